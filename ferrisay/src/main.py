import argparse
import logging
import os
import sys
from typing import List, Optional

from ferrisay.src.core.configuration import config_manager # Import the centralized config manager
from ferrisay.src.core.mascot import Mascot
from ferrisay.src.core.bubble import say

DEFAULT_WIDTH = 40
DEFAULT_MASCOT = 'ferris'


def non_negative_int(value: str) -> int:
    """argparse type for the width option."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"width must be 0 or more, got {number}")
    return number


def config_width() -> int:
    """Configured default width, or DEFAULT_WIDTH when the value is not a usable int."""
    width = config_manager.get_entry('say.max_width', DEFAULT_WIDTH)
    if isinstance(width, bool) or not isinstance(width, int) or width < 0:
        logging.warning(f"Invalid say.max_width {width!r} in config, using {DEFAULT_WIDTH}.")
        return DEFAULT_WIDTH
    return width


def build_parser() -> argparse.ArgumentParser:
    # Config values become the defaults; command line flags win
    width = config_width()
    mascot = config_manager.get_entry('say.mascot', DEFAULT_MASCOT)

    parser = argparse.ArgumentParser(prog="ferrisay", description="Have Ferris say something in a speech bubble.")
    parser.add_argument("message", nargs="*", help="Words to say. Read from --file or stdin when omitted.")
    parser.add_argument("-w", "--width", type=non_negative_int, default=width,
                        help=f"Maximum width of a line of text (default: {width}).")
    parser.add_argument("-f", "--file", help="Read the message from this UTF-8 file.")
    parser.add_argument("-m", "--mascot", type=str.lower, default=mascot, choices=Mascot.names(),
                        help=f"Who says it (default: {mascot}).")
    parser.add_argument("--break-long-words", action="store_true",
                        default=bool(config_manager.get_entry('say.break_long_words', False)),
                        help="Cut words longer than the width instead of widening the bubble.")
    parser.add_argument("--stderr", action="store_true", help="Write to stderr instead of stdout.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def read_message(args: argparse.Namespace) -> str:
    """Picks the message from the positional words, a file or stdin, in that order."""
    if args.message:
        return ' '.join(args.message)
    if args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            return f.read()
    return sys.stdin.read()


def configure_logging(verbose: bool) -> None:
    level_name = 'DEBUG' if verbose else str(config_manager.get_entry('logging.level', 'INFO')).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        logging.warning(f"Unknown logging level '{level_name}' in config, using INFO.")
        level = logging.INFO
    logging.getLogger().setLevel(level)


def silence_stream(stream) -> None:
    """Points a stream's file descriptor at os.devnull.

    Streams without a real descriptor (e.g. in-memory ones) are left alone.
    """
    try:
        fd = stream.fileno()
    except (AttributeError, OSError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fd)
    finally:
        os.close(devnull)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    # Resolve the mascot once; the renderer only ever sees the bytes
    try:
        mascot = Mascot.from_name(args.mascot)
    except ValueError as e:
        logging.error(str(e))
        return 1

    try:
        message = read_message(args)
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Could not read message from {args.file or 'stdin'}: {e}")
        return 1

    stream = sys.stderr if args.stderr else sys.stdout
    logging.debug(f"Saying {len(message)} chars at width {args.width} with {mascot.value}")
    try:
        stream.flush()
        say(message, args.width, stream.buffer, mascot.art, args.break_long_words)
        stream.flush()
    except BrokenPipeError:
        # Reader went away (e.g. piped into head); keep the shutdown flush quiet
        silence_stream(stream)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
