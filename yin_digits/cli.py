"""Command-line interface for the yin digit converter.

WHY: Users need a simple way to turn numbers into yin syllables (and
back) from the terminal or a shell pipeline. The CLI wires together the
line source, the streaming converter, a pluggable formatter, and stdout
behind a single command.

HOW: Uses argparse to accept input files (stdin when none are given),
the mode (encode or --decode), the output format, and the invalid-input
policy. Each line is converted, rendered, written, and its chain
released before the next line is read. Results go to stdout;
diagnostics and log messages go to stderr.

RULES:
- Positional arguments: zero or more input files; "-" means stdin
- Every input file is checked for existence before any line is read
- One output line per accepted input line, in input order
- --on-invalid abort (default): print "Error, X is not a digit" to
  stderr and exit with EXIT_INVALID_INPUT (253), like earlier versions
- --on-invalid skip: log a warning for the bad line and keep going
- --decode reads dotted syllable chains and prints their integer value
- --exact uses true base-2048 conversion instead of the streaming chain
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterator, List, Optional

from yin_digits.config import (
    DEFAULT_FORMAT,
    EXIT_INVALID_INPUT,
    EXIT_OK,
    EXIT_USAGE,
    INVALID_INPUT_POLICIES,
    load_log_level,
    load_on_invalid_policy,
)
from yin_digits.core.chain import DigitChain
from yin_digits.core.codec import sanity_check
from yin_digits.core.converter import convert_lines
from yin_digits.core.errors import InvalidSyllableError, OutOfRangeError, YinError
from yin_digits.formatters import FORMATTERS

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a diagnostic to stderr.

    WHY: Diagnostics must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _iter_lines(paths: List[str]) -> Iterator[str]:
    """Yield lines from each path in turn, stdin for "-" or no paths."""
    if not paths:
        paths = ["-"]
    for path in paths:
        if path == "-":
            yield from sys.stdin
        else:
            with open(path, encoding="utf-8", errors="surrogateescape") as f:
                yield from f


def _handle_invalid(error: YinError, line_number: int, policy: str) -> bool:
    """Report a rejected line. Returns True when processing should stop."""
    if policy == "abort":
        _status(str(error))
        return True
    logger.warning("Skipping line %d: %s", line_number, error)
    return False


def _run_encode(args: argparse.Namespace, policy: str) -> int:
    """Convert decimal lines to rendered chains."""
    formatter = FORMATTERS[args.format]()
    out = sys.stdout

    for result in convert_lines(_iter_lines(args.input_files), exact=args.exact):
        if not result.ok:
            out.flush()
            if _handle_invalid(result.error, result.line_number, policy):
                return EXIT_INVALID_INPUT
            continue

        with result.chain as chain:
            out.write(formatter.format(chain))

    out.flush()
    return EXIT_OK


def _run_decode(args: argparse.Namespace, policy: str) -> int:
    """Parse dotted syllable lines and print the integers they spell."""
    out = sys.stdout

    for line_number, line in enumerate(_iter_lines(args.input_files), start=1):
        try:
            chain = DigitChain.parse(line)
        except InvalidSyllableError as e:
            out.flush()
            if _handle_invalid(e, line_number, policy):
                return EXIT_INVALID_INPUT
            continue

        with chain:
            out.write("{}\n".format(chain.to_int()))

    out.flush()
    return EXIT_OK


def _run(args: argparse.Namespace) -> int:
    """Validate arguments, then run the selected mode.

    RULES:
    - Configuration errors (bad YIN_ON_INVALID, YIN_LOG_LEVEL) exit with EXIT_USAGE
    - Missing input files exit with EXIT_USAGE before any output
    """
    if args.sanity_check is not None:
        try:
            print(sanity_check(args.sanity_check))
        except OutOfRangeError as e:
            _status("Error: {}".format(e))
            return EXIT_USAGE
        return EXIT_OK

    policy = args.on_invalid
    if policy is None:
        try:
            policy = load_on_invalid_policy()
        except ValueError as e:
            _status("Error: {}".format(e))
            return EXIT_USAGE

    if args.format not in FORMATTERS:
        available = ", ".join(sorted(FORMATTERS.keys()))
        _status("Error: Unknown format '{}'. Available formats: {}".format(args.format, available))
        return EXIT_USAGE

    for path in args.input_files:
        if path != "-" and not Path(path).is_file():
            _status("Error: File not found: {}".format(path))
            return EXIT_USAGE

    if args.decode:
        return _run_decode(args, policy)
    return _run_encode(args, policy)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without reading stdin.
    """
    parser = argparse.ArgumentParser(
        prog="yin_digits",
        description="Convert decimal integers, one per line, into pronounceable "
                    "yin digit syllables (11 bits per syllable), or back.",
    )

    parser.add_argument(
        "input_files",
        nargs="*",
        help="Files to read, one number per line. Reads stdin when omitted or '-'.",
    )

    parser.add_argument(
        "--decode",
        action="store_true",
        help="Read dotted syllable chains and print the integers they spell.",
    )

    parser.add_argument(
        "--exact",
        action="store_true",
        help="Use true base-2048 conversion instead of the streaming chain.",
    )

    parser.add_argument(
        "--format",
        default=DEFAULT_FORMAT,
        choices=sorted(FORMATTERS.keys()),
        help="Output format for encoded chains (default: %(default)s).",
    )

    parser.add_argument(
        "--on-invalid",
        default=None,
        choices=INVALID_INPUT_POLICIES,
        help="What to do with a line that is not a valid number: stop with "
             "status {} or skip it (default: $YIN_ON_INVALID or abort).".format(
                 EXIT_INVALID_INPUT),
    )

    parser.add_argument(
        "--sanity-check",
        type=int,
        default=None,
        metavar="N",
        help="Encode a single value in [0, 2047], verify the round trip, and exit.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Exits only on a non-zero status; returns normally on success
    """
    try:
        level = load_log_level()
    except ValueError as e:
        _status("Error: {}".format(e))
        sys.exit(EXIT_USAGE)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    parser = build_parser()
    args = parser.parse_args(argv)
    exit_code = _run(args)
    if exit_code != EXIT_OK:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
