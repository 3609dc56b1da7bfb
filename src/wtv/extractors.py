"""Revision number extraction from AssemblyInfo-style source files."""

from __future__ import annotations

import logging
import re
from os import PathLike
from pathlib import Path

from .comments import strip_comments
from .errors import AssemblyInfoNotFoundError
from .models import RevisionInfo

log = logging.getLogger(__name__)

EMPTY_CONTENTS_ERROR = "File contents are empty"
NO_DECLARATION_ERROR = (
    "Can't find any line with text 'AssemblyFileVersion' or 'AssemblyVersion'"
)

# Case sensitive; the payload stops at the first closing quote
_VERSION_DECLARATION = re.compile(
    r'\bAssembly(?:File)?Version\("(?P<version>[^"]*)"\)'
)
# Accepts what .NET's int.TryParse accepts for plain integers
_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _parse_int32(text: str) -> int | None:
    """Parse a base-10 32-bit signed integer, or return None."""
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


def extract_revision_info(text: str) -> RevisionInfo:
    """Read the revision number from the first version declaration in text.

    Comments are stripped first, so a commented out declaration is ignored.
    The first ``AssemblyVersion("...")`` or ``AssemblyFileVersion("...")`` in
    document order wins; its last dot-separated component is the revision.

    Args:
        text: Source text, usually the contents of an AssemblyInfo.cs file

    Returns:
        A successful RevisionInfo, or a failed one describing why no revision
        could be read. Never raises for bad content.

    Example:
        info = extract_revision_info('[assembly: AssemblyVersion("1.0.0.15")]')
        assert info.next_revision_number == 16
    """
    if not text.strip():
        return RevisionInfo.failure(EMPTY_CONTENTS_ERROR)

    # A file holding only comments has no declaration rather than no contents
    match = _VERSION_DECLARATION.search(strip_comments(text))
    if match is None:
        return RevisionInfo.failure(NO_DECLARATION_ERROR)

    version = match.group("version")
    last_segment = version.split(".")[-1]
    log.debug("Found version %r at offset %d", version, match.start())

    revision = _parse_int32(last_segment)
    if revision is None:
        return RevisionInfo.failure(f"Can't parse {last_segment} to int")
    return RevisionInfo.success(revision)


def read_revision_info(path: str | PathLike[str]) -> RevisionInfo:
    """Read a source file and extract its revision number.

    Raises:
        AssemblyInfoNotFoundError: If path is not an existing file
    """
    path = Path(path)
    if not path.is_file():
        raise AssemblyInfoNotFoundError(str(path))

    # AssemblyInfo files are a few lines long, read the whole thing
    text = path.read_text(encoding="utf-8-sig", errors="replace")
    info = extract_revision_info(text)
    if info.succeeded:
        log.debug("%s: %s", path, info)
    else:
        log.warning("%s: %s", path, info.error)
    return info
