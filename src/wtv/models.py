"""Data models for revision extraction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


@dataclass(frozen=True)
class RevisionInfo:
    """Outcome of reading the revision number from a version declaration.

    Either a success carrying the parsed revision and its successor, or a
    failure carrying a non-empty error message with both numbers at 0. Use
    the ``success`` and ``failure`` constructors rather than building one by
    hand.
    """

    revision_number: int = 0
    next_revision_number: int = 0
    error: str | None = None

    def __post_init__(self) -> None:
        if self.error is None:
            if self.next_revision_number != self.revision_number + 1:
                raise ValueError(
                    "next_revision_number must be revision_number + 1, got "
                    f"{self.revision_number} and {self.next_revision_number}"
                )
        else:
            if not self.error.strip():
                raise ValueError("error must be a non-empty message")
            if self.revision_number or self.next_revision_number:
                raise ValueError("a failed RevisionInfo carries no revision numbers")

    @classmethod
    def success(cls, revision_number: int) -> RevisionInfo:
        return cls(revision_number, revision_number + 1)

    @classmethod
    def failure(cls, error: str) -> RevisionInfo:
        return cls(0, 0, error)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        if self.succeeded:
            return (
                f"RevisionNumber: {self.revision_number}, "
                f"NextRevisionNumber: {self.next_revision_number}"
            )
        return self.error


class ExitCode(IntEnum):
    """Process exit codes of the command line tool."""

    SUCCESS = 0
    WRONG_NO_OF_ARGUMENTS = 1
    PROBLEM_READING_INPUT_FILE = 2
    PROBLEM_WRITING_TO_OUTPUT_FILE = 3
    PROBLEM_DOING_REPLACEMENTS = 4
    PROBLEM_GETTING_SVN_REVISION_NUMBER = 5

    @property
    def description(self) -> str:
        """Human readable form, e.g. "WTV Wrong No Of Arguments"."""
        return "WTV " + self.name.replace("_", " ").title()
