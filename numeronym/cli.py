"""
Command-line front-end.

    numeronym localization "Andreessen Horowitz"
    echo accessibility | numeronym

With words on the command line, prints one numeronym per word. Without
them, reads standard input and answers every line as soon as it arrives.
"""

import argparse
import logging
import os
import sys

from . import __version__
from .abbreviation import abbreviate

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr; NUMERONYM_LOG_LEVEL sets the level unless verbose."""
    level_name = "DEBUG" if verbose else os.getenv("NUMERONYM_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        force=True,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numeronym",
        description="Abbreviate words and phrases into numeronyms (localization -> l10n).",
    )
    parser.add_argument("words", nargs="*", help="Text to abbreviate. Reads stdin lines when omitted.")
    parser.add_argument("--details", action="store_true",
                        help="Print input (tabs escaped), numeronym, cluster count and elided count, tab-separated.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_line(text: str, details: bool = False) -> str:
    result = abbreviate(text)
    if not details:
        return result.text
    return "\t".join([text.replace("\t", "\\t"), result.text, str(result.length), str(result.elided)])


def main(argv=None, stdin=None, stdout=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    if args.words:
        inputs = args.words
    else:
        logger.debug("No words given, reading from stdin")
        inputs = (line.rstrip("\r\n") for line in stdin)

    count = 0
    for text in inputs:
        stdout.write(format_line(text, details=args.details) + "\n")
        stdout.flush()
        count += 1

    logger.debug("Processed %d input(s)", count)
    return 0
