"""mruby-cli configuration.

Typed settings for a single ``--setup`` run.  The scaffolder trusts the name
it is given, so this is where a project name is checked before any directory
is touched.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

OUTPUT_DIR_ENV = "MRUBY_CLI_OUTPUT_DIR"

_FORBIDDEN_NAME_CHARS = ("/", "\\", "\0")


class SetupConfig(BaseModel):
    """Settings for scaffolding one project.

    The project is written to ``<output_dir>/<name>``.
    """

    name: str = Field(..., description="Project name (directory, binary and gem name)")
    output_dir: Path = Field(default=Path("."), description="Parent directory of the project")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("project name must not be empty")
        if any(ch in value for ch in _FORBIDDEN_NAME_CHARS):
            raise ValueError("project name must not contain path separators or NUL bytes")
        if value in (".", ".."):
            raise ValueError("project name must not be '.' or '..'")
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("project name must be valid UTF-8") from None
        return value

    @property
    def project_root(self) -> Path:
        """Directory the project is generated into."""
        return self.output_dir / self.name

    @classmethod
    def from_env(cls, name: str, output_dir: str | Path | None = None) -> "SetupConfig":
        """Build a ``SetupConfig``, falling back to the environment.

        An explicit *output_dir* wins; otherwise ``MRUBY_CLI_OUTPUT_DIR`` is
        used when set, and the current directory when it is not.
        """
        if output_dir is None:
            output_dir = os.environ.get(OUTPUT_DIR_ENV) or "."
        return cls(name=name, output_dir=Path(output_dir))
