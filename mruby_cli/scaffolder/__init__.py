"""mruby-cli scaffolder -- generates new mruby command-line projects.

Writes a fixed set of files (gem specification, build configuration,
Rakefile, Docker files, a C entry point, an mruby library stub, and test
stubs) under a directory named after the project.

Quick usage::

    from mruby_cli.scaffolder import RecordingReporter, Scaffolder

    reporter = RecordingReporter()
    project_path = Scaffolder("widget", reporter, "/tmp/output").run()
"""

from mruby_cli.scaffolder.catalog import MANIFEST, ManifestEntry, TemplateCatalog
from mruby_cli.scaffolder.generator import Scaffolder, scaffold
from mruby_cli.scaffolder.materializer import FilesystemError, materialize
from mruby_cli.scaffolder.reporter import (
    ActionKind,
    ActionRecord,
    ConsoleReporter,
    RecordingReporter,
    Reporter,
    StreamReporter,
)
from mruby_cli.scaffolder.templates import TemplateRenderer

__all__ = [
    "MANIFEST",
    "ActionKind",
    "ActionRecord",
    "ConsoleReporter",
    "FilesystemError",
    "ManifestEntry",
    "RecordingReporter",
    "Reporter",
    "Scaffolder",
    "StreamReporter",
    "TemplateCatalog",
    "TemplateRenderer",
    "materialize",
    "scaffold",
]
