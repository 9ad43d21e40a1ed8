"""The fixed manifest of files generated for a new mruby CLI project.

Each :class:`ManifestEntry` pairs an output path pattern with a template in
``templates/``.  Output patterns may embed the project name as ``{name}``;
they are always ``/``-separated and relative to the project directory.

The order of :data:`MANIFEST` is the order files are written in.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .templates import TemplateRenderer


@dataclass(frozen=True)
class ManifestEntry:
    """One generated file: where it goes and which template produces it."""

    path: str
    template: str

    def output_path(self, name: str) -> str:
        """Return the relative output path for project *name*."""
        return self.path.format(name=name)

    def parent(self, name: str) -> str:
        """Return the relative parent directory, or ``""`` for root files."""
        head, _, _ = self.output_path(name).rpartition("/")
        return head


MANIFEST: tuple[ManifestEntry, ...] = (
    ManifestEntry("mrbgem.rake", "mrbgem.rake.j2"),
    ManifestEntry("build_config.rb", "build_config.rb.j2"),
    ManifestEntry("Rakefile", "Rakefile.j2"),
    ManifestEntry("Dockerfile", "Dockerfile.j2"),
    ManifestEntry("docker-compose.yml", "docker-compose.yml.j2"),
    ManifestEntry("tools/{name}/{name}.c", "tools/main.c.j2"),
    ManifestEntry("mrblib/{name}.rb", "mrblib/main.rb.j2"),
    ManifestEntry("bintest/{name}.rb", "bintest/main.rb.j2"),
    ManifestEntry("test/test_{name}.rb", "test/test_main.rb.j2"),
)


class TemplateCatalog:
    """Ordered mapping from output path to rendered content.

    Rendering is a pure function of the project name: no timestamps, no
    environment lookups, nothing that could differ between two runs.
    """

    def __init__(
        self,
        entries: tuple[ManifestEntry, ...] = MANIFEST,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.entries = entries
        self.renderer = renderer or TemplateRenderer()

    def __iter__(self) -> Iterator[ManifestEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @staticmethod
    def _build_context(name: str) -> dict[str, str]:
        return {"name": name}

    def render(self, entry: ManifestEntry, name: str) -> str:
        """Render *entry*'s template for project *name*."""
        return self.renderer.render(entry.template, self._build_context(name))

    def render_all(self, name: str) -> dict[str, str]:
        """Render every entry, keyed by output path, in manifest order."""
        return {entry.output_path(name): self.render(entry, name) for entry in self.entries}

    def output_paths(self, name: str) -> list[str]:
        return [entry.output_path(name) for entry in self.entries]
