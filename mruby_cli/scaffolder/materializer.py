"""Create-or-skip directory materialization.

Given a relative path such as ``tools/widget``, every cumulative prefix
(``tools``, then ``tools/widget``) is checked in root-to-leaf order.  Missing
directories are created, existing ones are skipped, and both outcomes are
reported.  An existing directory is never an error; anything the OS refuses
is raised as :class:`FilesystemError` and ends the run.
"""

from __future__ import annotations

from pathlib import Path

from .reporter import ActionRecord, Reporter


class FilesystemError(Exception):
    """Raised when a directory cannot be created or a file cannot be written.

    Attributes:
        path: The path the operation was acting on.
        cause: The underlying ``OSError``, or the ``UnicodeEncodeError`` raised
            when a file body cannot be encoded as UTF-8.
    """

    def __init__(self, path: Path, cause: OSError | UnicodeEncodeError) -> None:
        self.path = path
        self.cause = cause
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"{path}: {reason}")


def split_prefixes(relative: str) -> list[str]:
    """Return the cumulative ``/``-joined prefixes of *relative*.

    Examples::

        split_prefixes("a/b/c") -> ["a", "a/b", "a/b/c"]
        split_prefixes("mrblib") -> ["mrblib"]
    """
    prefixes: list[str] = []
    current = ""
    for segment in relative.split("/"):
        if not segment:
            continue
        current = f"{current}/{segment}" if current else segment
        prefixes.append(current)
    return prefixes


def join_label(label: str, relative: str) -> str:
    """Prefix a report path with *label* (the project directory name)."""
    return f"{label}/{relative}" if label else relative


def ensure_directory(
    base: Path,
    relative: str,
    reporter: Reporter,
    *,
    label: str = "",
) -> bool:
    """Create ``base / relative`` unless it already is a directory.

    The parent must already exist.  Returns ``True`` when the directory was
    created and ``False`` when it was skipped.
    """
    target = base / relative
    report_path = join_label(label, relative)
    if target.is_dir():
        reporter.report(ActionRecord.directory_skipped(report_path))
        return False
    try:
        target.mkdir()
    except OSError as exc:
        raise FilesystemError(target, exc) from exc
    reporter.report(ActionRecord.directory_created(report_path))
    return True


def materialize(
    base: Path,
    relative: str,
    reporter: Reporter,
    *,
    label: str = "",
) -> list[str]:
    """Ensure every prefix directory of *relative* exists under *base*.

    Args:
        base: Directory the relative path is joined onto.
        relative: ``/``-separated directory path.
        reporter: Receives one record per prefix, in root-to-leaf order.
        label: Optional leading component for reported paths, so records
            read ``widget/tools`` while *base* already points at ``widget``.

    Returns:
        The prefixes that were processed, relative to *base*.

    Raises:
        FilesystemError: On the first prefix that cannot be created.  Later
            prefixes are not attempted.
    """
    prefixes = split_prefixes(relative)
    for prefix in prefixes:
        ensure_directory(base, prefix, reporter, label=label)
    return prefixes
