"""Main scaffolding orchestrator.

Takes a project name and writes a new mruby CLI project under
``<output_dir>/<name>``: the gem specification, build configuration,
Rakefile, Docker files, the C entry point, the mruby library stub, and the
bintest/mtest stubs.

Directories are create-or-skip; files are always rewritten.  The first
filesystem failure aborts the run with :class:`FilesystemError`, leaving
whatever was already written in place.  Every target path is joined
explicitly onto the project root -- the process working directory is never
changed -- so runs against different roots do not interfere.
"""

from __future__ import annotations

from pathlib import Path

from .catalog import ManifestEntry, TemplateCatalog
from .materializer import FilesystemError, ensure_directory, join_label, materialize
from .reporter import ActionRecord, ConsoleReporter, Reporter


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class Scaffolder:
    """Apply the file manifest for one project name.

    Attributes:
        name: Project name, used verbatim as the top-level directory.
        reporter: Receives one :class:`ActionRecord` per directory decision
            and per file write, in execution order.
        output_dir: Parent directory of the project.
        catalog: Supplies the manifest and renders file contents.
    """

    def __init__(
        self,
        name: str,
        reporter: Reporter | None = None,
        output_dir: str | Path = ".",
        catalog: TemplateCatalog | None = None,
    ) -> None:
        self.name = name
        self.reporter = reporter or ConsoleReporter()
        self.output_dir = Path(output_dir)
        self.catalog = catalog or TemplateCatalog()
        self._materialized: set[str] = set()

    @property
    def project_root(self) -> Path:
        return self.output_dir / self.name

    # -- Public API --------------------------------------------------------

    def run(self) -> Path:
        """Generate the project.

        Returns:
            Path to the project root.

        Raises:
            FilesystemError: If any directory or file cannot be created.
                Nothing after the failing path is attempted.
        """
        self._materialized = set()

        # 1. The project directory itself is create-or-skip like any other
        ensure_directory(self.output_dir, self.name, self.reporter)

        # 2. Manifest entries, strictly in order
        for entry in self.catalog:
            self._apply(entry)

        return self.project_root

    # -- Internal ----------------------------------------------------------

    def _apply(self, entry: ManifestEntry) -> None:
        parent = entry.parent(self.name)
        if parent and parent not in self._materialized:
            prefixes = materialize(
                self.project_root, parent, self.reporter, label=self.name
            )
            self._materialized.update(prefixes)

        relative = entry.output_path(self.name)
        content = self.catalog.render(entry, self.name)
        self._write_file(relative, content)

    def _write_file(self, relative: str, content: str) -> None:
        target = self.project_root / relative
        try:
            data = content.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise FilesystemError(target, exc) from exc
        try:
            target.write_bytes(data)
        except OSError as exc:
            raise FilesystemError(target, exc) from exc
        self.reporter.report(ActionRecord.file_created(join_label(self.name, relative)))


def scaffold(
    name: str,
    reporter: Reporter | None = None,
    output_dir: str | Path = ".",
) -> Path:
    """Scaffold project *name* under *output_dir*; see :class:`Scaffolder`."""
    return Scaffolder(name, reporter=reporter, output_dir=output_dir).run()
