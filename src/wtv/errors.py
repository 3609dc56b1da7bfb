"""Exceptions raised by wtv.

Extraction problems inside a readable source file are never raised: they are
returned as a failed RevisionInfo. Only the conditions below cross a function
boundary as exceptions.
"""

from __future__ import annotations


class WtvError(Exception):
    """Base exception for wtv operations."""

    pass


class AssemblyInfoNotFoundError(WtvError, FileNotFoundError):
    """Raised when the source file to read a version from does not exist."""

    def __init__(self, path: str):
        super().__init__(f"File not found: {path}")
        self.path = path


class SubWCRevNotFoundError(WtvError):
    """Raised when the SubWCRev executable cannot be located."""

    pass


class SubWCRevError(WtvError):
    """Raised when SubWCRev fails or its output can't be used."""

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        self.exit_code = exit_code
