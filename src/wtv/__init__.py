"""
wtv - When The Version.

Stamps dates and revision numbers into template files at build time.

This package provides:
- strip_comments: comment removal for C-style source text
- extract_revision_info / read_revision_info: revision number of an AssemblyVersion
- RevisionInfo: success/failure result of an extraction
- Exception classes: WtvError and its subclasses
"""

from wtv.comments import strip_comments
from wtv.errors import (
    AssemblyInfoNotFoundError,
    SubWCRevError,
    SubWCRevNotFoundError,
    WtvError,
)
from wtv.extractors import extract_revision_info, read_revision_info
from wtv.models import ExitCode, RevisionInfo

__all__ = [
    "AssemblyInfoNotFoundError",
    "ExitCode",
    "RevisionInfo",
    "SubWCRevError",
    "SubWCRevNotFoundError",
    "WtvError",
    "extract_revision_info",
    "read_revision_info",
    "strip_comments",
]
