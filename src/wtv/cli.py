"""When The Version: date and revision stamping for .NET project files.

Usage:
    wtv FILE_IN FILE_OUT [SUBWCREV WORKING_COPY] [--assembly-info PATH] [--strict]

Reads FILE_IN, replaces its placeholders and writes FILE_OUT. Typically run
as a pre-build step turning AssemblyInfo.Template.cs into AssemblyInfo.cs.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Mapping, Sequence

from pydantic import ValidationError

from .config import Settings
from .errors import SubWCRevError, SubWCRevNotFoundError, WtvError
from .models import ExitCode
from .placeholders import do_replacements

log = logging.getLogger(__name__)

BANNER = [
    "",
    "  WTV (When The Version) Automatic date-based version numbering for .Net projects",
    "",
]

USAGE = [
    '  Usage: WTV  "file-in"  "file-out"  ["path to SubWCrev.exe"  "SVN working-copy-path"]',
    "             [--assembly-info AssemblyInfo.cs] [--strict] [-v]",
    '   "file-in"  can contain the following placeholders:',
    "     {DD}    - Day",
    "     {MM}    - Month",
    "     {YYYY}  - Year",
    "     {SVN}   - SubVersion revision (must specify the path to SubWCrev.exe and working copy path)",
    "     {BUILD} - Next revision number of --assembly-info (last part of its AssemblyVersion)",
    "",
    "  Example Pre-Build command: (remove the line breaks)",
    '    "C:\\Path\\To\\WTV.exe"',
    '      "$(ProjectDir)Properties\\AssemblyInfo.Template.cs"',
    '      "$(ProjectDir)Properties\\AssemblyInfo.cs"',
    '      "C:\\Program Files\\TortoiseSVN\\bin\\SubWCRev.exe"',
    '      "$(SolutionDir)."',
]


class UsageError(Exception):
    """Raised instead of exiting when the command line can't be parsed."""

    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="wtv",
        description="Replace date and revision placeholders in a template file.",
        add_help=False,
    )
    parser.add_argument("file_in", help="template file to read")
    parser.add_argument("file_out", help="file to write")
    parser.add_argument(
        "subwcrev",
        nargs="?",
        help="path to SubWCRev.exe, or an environment variable holding it",
    )
    parser.add_argument("working_copy", nargs="?", help="SVN working copy path")
    parser.add_argument(
        "--assembly-info",
        help="source file whose AssemblyVersion feeds the {BUILD} placeholder",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="fail instead of substituting 0 when a revision can't be read",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def print_error(message: str) -> None:
    """Write an error message to the console."""
    for line in BANNER:
        print(line, file=sys.stderr)
    print(f"    Error: {message}", file=sys.stderr)


def print_usage(exit_code: ExitCode) -> int:
    """Print usage instructions and return the exit code passed in."""
    print_error(exit_code.description)
    print("", file=sys.stderr)
    for line in USAGE:
        print(line, file=sys.stderr)
    return int(exit_code)


def _read_settings(
    argv: Sequence[str] | None, environ: Mapping[str, str]
) -> Settings | None:
    try:
        args = build_parser().parse_args(argv)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        return Settings.from_args(args, environ)
    except (UsageError, ValidationError) as e:
        log.debug("Bad arguments: %s", e)
        return None


def main(
    argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None
) -> int:
    """Run wtv and return the process exit code."""
    settings = _read_settings(argv, os.environ if environ is None else environ)
    if settings is None:
        return print_usage(ExitCode.WRONG_NO_OF_ARGUMENTS)

    try:
        template = settings.input_file.read_text(encoding="utf-8-sig", errors="replace")
    except OSError as e:
        log.error("Could not read %s: %s", settings.input_file, e)
        return print_usage(ExitCode.PROBLEM_READING_INPUT_FILE)

    try:
        output = do_replacements(template, settings, report=print_error)
    except (SubWCRevError, SubWCRevNotFoundError) as e:
        log.error("Could not get SVN revision: %s", e)
        return print_usage(ExitCode.PROBLEM_GETTING_SVN_REVISION_NUMBER)
    except (WtvError, OSError, ValueError) as e:
        log.error("Replacement failed: %s", e)
        return print_usage(ExitCode.PROBLEM_DOING_REPLACEMENTS)

    try:
        settings.output_file.write_text(output, encoding="utf-8")
    except OSError as e:
        log.error("Could not write %s: %s", settings.output_file, e)
        return print_usage(ExitCode.PROBLEM_WRITING_TO_OUTPUT_FILE)

    log.info("Wrote %s", settings.output_file)
    return int(ExitCode.SUCCESS)


if __name__ == "__main__":
    raise SystemExit(main())
