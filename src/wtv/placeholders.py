"""Placeholder substitution for template files."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from .config import Settings
from .errors import AssemblyInfoNotFoundError, SubWCRevNotFoundError, WtvError
from .extractors import read_revision_info
from .subwcrev import get_working_copy_revision

log = logging.getLogger(__name__)

DAY_PLACEHOLDER = "{DD}"
MONTH_PLACEHOLDER = "{MM}"
YEAR_PLACEHOLDER = "{YYYY}"
SVN_PLACEHOLDER = "{SVN}"
BUILD_PLACEHOLDER = "{BUILD}"

ErrorReporter = Callable[[str], None]


def _ignore(message: str) -> None:
    pass


def get_svn_revision_number(settings: Settings, report: ErrorReporter = _ignore) -> int:
    """Get the working copy revision, or 0 if it can't be determined.

    Errors are logged and passed to ``report`` instead of being raised,
    unless the settings are strict.

    Raises:
        SubWCRevNotFoundError: In strict mode, if SubWCRev can't be located
        SubWCRevError: In strict mode, if SubWCRev fails
    """
    if not settings.uses_subwcrev:
        if settings.strict:
            raise SubWCRevNotFoundError("SubWCRev.exe not configured")
        return 0
    try:
        subwcrev = settings.resolve_subwcrev()
        return get_working_copy_revision(subwcrev, settings.working_copy)
    except WtvError as e:
        if settings.strict:
            raise
        log.error("Could not get SVN revision: %s", e)
        report(str(e))
        return 0


def get_next_build_number(settings: Settings, report: ErrorReporter = _ignore) -> int:
    """Get the next revision number of the configured AssemblyInfo file, or 0.

    Raises:
        WtvError: In strict mode, if no revision could be read
    """
    if settings.assembly_info is None:
        if settings.strict:
            raise WtvError("No AssemblyInfo file given for {BUILD}")
        return 0
    try:
        info = read_revision_info(settings.assembly_info)
    except AssemblyInfoNotFoundError as e:
        if settings.strict:
            raise
        log.error("Could not read build number: %s", e)
        report(str(e))
        return 0
    if not info.succeeded:
        if settings.strict:
            raise WtvError(info.error)
        report(info.error)
        return 0
    return info.next_revision_number


def do_replacements(
    contents: str,
    settings: Settings,
    now: datetime | None = None,
    report: ErrorReporter = _ignore,
) -> str:
    """Replace all placeholders in template contents.

    Args:
        contents: Template text
        settings: Run settings naming SubWCRev and the AssemblyInfo file
        now: Time to stamp, defaults to the current UTC time
        report: Called with a message for each value that fell back to 0

    Returns:
        The template with every placeholder replaced
    """
    if now is None:
        now = datetime.now(timezone.utc)

    # Only call out to SubWCRev and the file system when the token is used
    if SVN_PLACEHOLDER in contents:
        contents = contents.replace(
            SVN_PLACEHOLDER, str(get_svn_revision_number(settings, report))
        )
    if BUILD_PLACEHOLDER in contents:
        contents = contents.replace(
            BUILD_PLACEHOLDER, str(get_next_build_number(settings, report))
        )

    return (
        contents.replace(DAY_PLACEHOLDER, str(now.day))
        .replace(MONTH_PLACEHOLDER, str(now.month))
        .replace(YEAR_PLACEHOLDER, str(now.year))
    )
