"""SubWCRev.exe wrapper for reading the Subversion working copy revision.

SubWCRev substitutes keywords in a template file. We hand it a temporary
file holding only ``$WCREV$`` and read the revision number back.
"""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from pathlib import Path

from .errors import SubWCRevError

log = logging.getLogger(__name__)

WCREV_KEYWORD = "$WCREV$"
# Revisions are stamped into 16-bit version fields
MAX_REVISION = 65535

# Reference: SubWCRev.cpp in the TortoiseSVN sources
EXIT_CODE_MESSAGES: dict[int, str] = {
    1: "SubWCRev.exe - Syntax error",
    2: "SubWCRev.exe - File/folder not found",
    3: "SubWCRev.exe - File open error",
    4: "SubWCRev.exe - Memory allocation error",
    5: "SubWCRev.exe - File read/write/size error",
    6: "SubWCRev.exe - SVN error (is the working copy path correct?)",
    7: "SubWCRev.exe - Local mods found (-n)",
    8: "SubWCRev.exe - Mixed rev WC found (-m)",
    9: "SubWCRev.exe - Output file already exists (-d)",
    10: "SubWCRev.exe - the path is not a working copy or part of one",
}
UNKNOWN_EXIT_CODE_MESSAGE = "SubWCRev.exe - unknown exit code status (sorry!)"


def exit_code_message(exit_code: int) -> str:
    return EXIT_CODE_MESSAGES.get(exit_code, UNKNOWN_EXIT_CODE_MESSAGE)


def fit_revision(text: str) -> int:
    """Parse SubWCRev output, keeping the last four digits if it overflows.

    Raises:
        ValueError: If text is not a number
    """
    text = text.strip()
    value = int(text)
    if value < 0:
        raise ValueError(f"Negative revision: {text}")
    if value <= MAX_REVISION:
        return value
    truncated = int(text[-4:])
    log.info("Revision %d too large, using last four digits: %d", value, truncated)
    return truncated


def get_working_copy_revision(subwcrev: str | os.PathLike[str], working_copy: str) -> int:
    """Run SubWCRev on a working copy and return its revision number.

    Args:
        subwcrev: Path to SubWCRev.exe
        working_copy: Path of the Subversion working copy

    Returns:
        The highest revision in the working copy, truncated to fit 16 bits

    Raises:
        SubWCRevError: If SubWCRev can't be run, exits with an error code, or
            writes something that isn't a revision number
    """
    fd, temp_name = tempfile.mkstemp(suffix=".wtv")
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(WCREV_KEYWORD)

        cmd = [str(subwcrev), working_copy.strip('"'), temp_name, temp_name]
        log.debug("Running %s", cmd)
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
        )
        if result.returncode != 0:
            if result.stdout:
                log.debug("SubWCRev output:\n%s", result.stdout)
            raise SubWCRevError(exit_code_message(result.returncode), result.returncode)

        return fit_revision(temp_path.read_text(encoding="utf-8"))
    except SubWCRevError:
        raise
    except (OSError, ValueError) as e:
        raise SubWCRevError("Problem running SubWCRev.exe") from e
    finally:
        temp_path.unlink(missing_ok=True)
