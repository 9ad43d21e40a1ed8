"""Action records and the reporting sinks that display them.

The scaffolder never prints.  Every directory decision and file write is
described by an :class:`ActionRecord` and handed to a reporter, which decides
how (or whether) to show it.  Three reporters are provided:

* :class:`ConsoleReporter` -- coloured lines on a Rich console (the CLI default).
* :class:`StreamReporter` -- plain lines on any text stream.
* :class:`RecordingReporter` -- keeps the records in memory.

Every line has the same two-column shape::

      create  widget/mrblib/
      skip    widget/tools/
      create  widget/mrblib/widget.rb
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, TextIO

from rich.console import Console
from rich.markup import escape

from mruby_cli.utils import console as shared_console


# ---------------------------------------------------------------------------
# Action records
# ---------------------------------------------------------------------------


class ActionKind(str, Enum):
    """What the scaffolder did with a single path."""

    DIRECTORY_SKIPPED = "directory_skipped"
    DIRECTORY_CREATED = "directory_created"
    FILE_CREATED = "file_created"


@dataclass(frozen=True)
class ActionRecord:
    """One reported unit of work.

    ``path`` is POSIX-style, relative to the output directory, and never
    carries a trailing separator; :attr:`display_path` adds one for
    directories.
    """

    kind: ActionKind
    path: str

    @classmethod
    def directory_skipped(cls, path: str) -> ActionRecord:
        return cls(ActionKind.DIRECTORY_SKIPPED, path)

    @classmethod
    def directory_created(cls, path: str) -> ActionRecord:
        return cls(ActionKind.DIRECTORY_CREATED, path)

    @classmethod
    def file_created(cls, path: str) -> ActionRecord:
        return cls(ActionKind.FILE_CREATED, path)

    @property
    def is_directory(self) -> bool:
        return self.kind is not ActionKind.FILE_CREATED

    @property
    def verb(self) -> str:
        """``skip`` for an existing directory, ``create`` otherwise."""
        return "skip" if self.kind is ActionKind.DIRECTORY_SKIPPED else "create"

    @property
    def display_path(self) -> str:
        return f"{self.path}/" if self.is_directory else self.path

    def format_line(self) -> str:
        """Render the record as an unstyled two-column report line."""
        return f"  {self.verb:<8}{self.display_path}"


# ---------------------------------------------------------------------------
# Reporters
# ---------------------------------------------------------------------------


class Reporter(Protocol):
    """Anything that accepts action records in execution order."""

    def report(self, record: ActionRecord) -> None: ...


class ConsoleReporter:
    """Print each record to a Rich console, colouring the verb."""

    _VERB_STYLES: dict[str, str] = {
        "create": "bold green",
        "skip": "bold yellow",
    }

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else shared_console

    def report(self, record: ActionRecord) -> None:
        style = self._VERB_STYLES[record.verb]
        self.console.print(
            f"  [{style}]{record.verb:<8}[/{style}]{escape(record.display_path)}",
            highlight=False,
            soft_wrap=True,
        )


class StreamReporter:
    """Write plain report lines to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def report(self, record: ActionRecord) -> None:
        self.stream.write(record.format_line() + "\n")


@dataclass
class RecordingReporter:
    """Collect records in memory, in the order they were reported."""

    records: list[ActionRecord] = field(default_factory=list)

    def report(self, record: ActionRecord) -> None:
        self.records.append(record)

    def lines(self) -> list[str]:
        """Return every record formatted as a report line."""
        return [r.format_line() for r in self.records]

    def paths(self, kind: ActionKind | None = None) -> list[str]:
        """Return recorded paths, optionally filtered to a single kind."""
        return [r.path for r in self.records if kind is None or r.kind is kind]
