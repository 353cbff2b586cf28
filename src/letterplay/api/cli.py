"""
Command-line interface for letterplay.

Validates the input file, format and class flags, then reports the first
character of each requested class matching the format.

Exit codes:
    0  success
    1  input missing or not a file
    2  input file has invalid content
    3  format missing or not allowed
    4  no class flag passed
"""
from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from ..core.byte_classes import ByteClass, is_valid_content
from ..engine.counter import count_bytes, describe_counts
from ..engine.search import run_search
from ..engine.target import ALLOWED_FORMATS, FormatKind, parse_format

OPTION_INPUT = "input"
OPTION_FORMAT = "format"


class OptionError(ValueError):
    """Rejected command-line option, carrying the process exit code."""

    def __init__(self, message: str, exit_code: int):
        super().__init__(message)
        self.exit_code = exit_code


def check_input_option(path: str | None, log) -> bytes:
    """Check the input path and return the validated file contents."""
    if path is None:
        raise OptionError(f"Option {OPTION_INPUT} not passed", 1)

    log(f"File: {path}")
    file_path = Path(path)
    if not file_path.is_file():
        raise OptionError(f"Option {OPTION_INPUT} does not resolve to a file", 1)

    content = file_path.read_bytes()
    if not is_valid_content(content):
        raise OptionError(
            f"Option {OPTION_INPUT} resolves to a file with invalid content", 2)

    log(f"{OPTION_INPUT} option validated")
    return content


def check_format_option(name: str | None, log) -> FormatKind:
    if name is None:
        raise OptionError(f"Option {OPTION_FORMAT} not passed", 3)
    if name not in ALLOWED_FORMATS:
        raise OptionError(
            f"Option {OPTION_FORMAT} passed, but {name} is not in allowed list: "
            f"{', '.join(ALLOWED_FORMATS)}", 3)

    log(f"{OPTION_FORMAT} option validated")
    return parse_format(name)


def check_class_flags(classes: list[ByteClass] | None, log) -> list[ByteClass]:
    """Deduplicate the class flags, keeping command-line order."""
    selected = list(dict.fromkeys(classes or []))
    if not selected:
        raise OptionError("At least one of the L/P/S flags must be passed", 4)

    names = ", ".join(f"include-{c.value}" for c in selected)
    log(f"{names} flags set successfully")
    return selected


def cmd_letter_play(args: argparse.Namespace) -> int:
    """Validate options, run the search and print one line per class."""
    start = time.time()
    log_file = open(args.log_file, "w") if args.log_file else None

    def _log(msg):
        if log_file:
            log_file.write(msg + "\n")
        print(msg)

    try:
        try:
            content = check_input_option(args.input, _log)
            fmt = check_format_option(args.format, _log)
            classes = check_class_flags(args.classes, _log)
        except OptionError as e:
            _log(str(e))
            _log(f"Error code {e.exit_code}")
            return e.exit_code

        _log("Processing check")

        counts = count_bytes(content)
        if args.verbose:
            _log(f"Counts: {describe_counts(counts)}")

        for byte_class, result in run_search(content, fmt, classes, counts):
            _log(f"First {fmt.value} {byte_class.value}: "
                 f"{result.char if result else 'None'}")

        _log(f"Finished in: {time.time() - start:.6f}")
        return 0
    finally:
        if log_file:
            log_file.close()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="letterplay",
        description="Find the first non-, least- or most-repeating character of a text file",
    )
    parser.add_argument("-i", "--input", help="Path to the file to scan")
    parser.add_argument(
        "-f", "--format",
        help=f"Search format: {', '.join(ALLOWED_FORMATS)}",
    )

    # Class flags append in the order given
    parser.add_argument(
        "-L", "--include-letter",
        dest="classes", action="append_const", const=ByteClass.LETTER,
        help="Search lowercase letters",
    )
    parser.add_argument(
        "-P", "--include-punctuation",
        dest="classes", action="append_const", const=ByteClass.PUNCTUATION,
        help="Search punctuation marks",
    )
    parser.add_argument(
        "-S", "--include-symbol",
        dest="classes", action="append_const", const=ByteClass.SYMBOL,
        help="Search symbols (every other byte)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print per-byte counts before the report",
    )
    parser.add_argument("--log-file", help="Also write output lines to this file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return cmd_letter_play(args)


if __name__ == "__main__":
    sys.exit(main())
