"""Run configuration for the wtv command line tool."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import SubWCRevNotFoundError

log = logging.getLogger(__name__)


class Settings(BaseModel):
    """Validated settings for one run.

    ``subwcrev`` is either a path to SubWCRev.exe or the name of an
    environment variable holding that path. The variables are looked up in
    ``environ``, which is captured when the settings are built rather than
    read from the process later.

    With ``strict`` set, a revision that can't be read fails the run instead of
    being replaced by 0.
    """

    model_config = ConfigDict(frozen=True)

    input_file: Path
    output_file: Path
    subwcrev: str | None = Field(default=None, min_length=1)
    working_copy: str | None = Field(default=None, min_length=1)
    assembly_info: Path | None = None
    strict: bool = False
    environ: dict[str, str] = Field(default_factory=dict, repr=False)

    @model_validator(mode="after")
    def check_subwcrev_pair(self) -> Settings:
        if (self.subwcrev is None) != (self.working_copy is None):
            raise ValueError(
                "the SubWCRev path and the working copy path must be given together"
            )
        return self

    @property
    def uses_subwcrev(self) -> bool:
        return self.subwcrev is not None

    @classmethod
    def from_args(
        cls, args: argparse.Namespace, environ: Mapping[str, str] | None = None
    ) -> Settings:
        """Build settings from parsed command line arguments.

        Raises:
            pydantic.ValidationError: If the argument combination is invalid
        """
        return cls(
            input_file=args.file_in,
            output_file=args.file_out,
            subwcrev=args.subwcrev,
            working_copy=args.working_copy,
            assembly_info=args.assembly_info,
            strict=args.strict,
            environ=dict(environ or {}),
        )

    def resolve_subwcrev(self) -> Path:
        """Locate the SubWCRev executable.

        Raises:
            SubWCRevNotFoundError: If neither the given path nor the
                environment variable of that name points to a file
        """
        if self.subwcrev is None:
            raise SubWCRevNotFoundError("SubWCRev.exe not configured")

        candidate = Path(self.subwcrev)
        if candidate.is_file():
            return candidate

        from_env = self.environ.get(self.subwcrev)
        if from_env:
            log.debug("Using SubWCRev path from $%s: %s", self.subwcrev, from_env)
            if Path(from_env).is_file():
                return Path(from_env)
            raise SubWCRevNotFoundError(f"SubWCRev.exe not found at: {from_env}")

        raise SubWCRevNotFoundError(f"SubWCRev.exe not found at: {self.subwcrev}")
