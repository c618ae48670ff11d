import errno
import logging
from typing import BinaryIO, List, Sequence, Tuple

from ferrisay.src.core.mascot import FERRIS
from ferrisay.src.core.text import normalize, wrap, display_width


def longest_line(lines: Sequence[str]) -> int:
    """Display width of the widest line, 0 for no lines."""
    return max((display_width(line) for line in lines), default=0)


def border_tokens(index: int, line_count: int) -> Tuple[str, str]:
    """Left and right border for a body row.

    A one line message reads as a plain bubble (< text >); longer ones get
    bracket shapes so the rows look connected.
    """
    if line_count == 1:
        return "< ", " >"
    if index == 0:
        return "/ ", " \\"
    if index == line_count - 1:
        return "\\ ", " /"
    return "| ", " |"


def render(lines: Sequence[str], mascot: bytes = FERRIS) -> bytes:
    """Draws the bubble around already wrapped lines and appends the mascot."""
    line_count = len(lines)
    actual_width = longest_line(lines)
    logging.debug(f"Rendering bubble: {line_count} lines, width {actual_width}")

    # --- Top border ---
    parts: List[str] = [" ", "_" * (actual_width + 2), "\n"]

    # --- Message rows, right border aligned by display width ---
    for i, line in enumerate(lines):
        left, right = border_tokens(i, line_count)
        padding = " " * (actual_width - display_width(line))
        parts.append(f"{left}{line}{padding}{right}\n")

    # --- Bottom border; the mascot brings its own line breaks ---
    parts.append(" ")
    parts.append("-" * (actual_width + 2))

    return "".join(parts).encode("utf-8") + mascot


def write_all(writer: BinaryIO, data: bytes) -> None:
    """Keeps calling writer.write() until every byte of data has been taken.

    Raw sinks (unbuffered files, sockets, RawIOBase subclasses) may accept
    only part of the data per call. A None return means a non-blocking sink
    would block; it is raised as BlockingIOError carrying the count written
    so far. A sink that takes nothing at all raises OSError.
    """
    view = memoryview(data)
    total = 0
    while view:
        written = writer.write(view)
        if written is None:
            raise BlockingIOError(errno.EAGAIN, "sink would block", total)
        if written == 0:
            raise OSError(errno.EIO, f"sink accepted no bytes after {total} of {len(data)}")
        total += written
        view = view[written:]


def write_bubble(lines: Sequence[str], writer: BinaryIO, mascot: bytes = FERRIS) -> None:
    """Renders the bubble and writes all of it to writer."""
    write_all(writer, render(lines, mascot))


def say(text: str, max_width: int, writer: BinaryIO, mascot: bytes = FERRIS,
        break_long_words: bool = False) -> None:
    """
    Writes the mascot saying something.

    Args:
        text: The message. Runs of spaces and tabs are merged, line breaks are kept.
        max_width: Maximum display width of a line before it is wrapped.
        writer: Anything with a write(bytes) method, e.g. sys.stdout.buffer,
                a file opened in 'wb' mode or io.BytesIO.
        mascot: Art placed under the bubble (FERRIS or CLIPPY).
        break_long_words: Cut words wider than max_width instead of letting
                          them widen the bubble.

    Errors raised by writer.write() propagate unchanged.

    Example:
        >>> say("Hello fellow Rustaceans!", 24, sys.stdout.buffer)
         __________________________
        < Hello fellow Rustaceans! >
         --------------------------
                \\
                 \\
                    _~^~^~_
                \\) /  o o  \\ (/
                  '_   -   _'
                  / '-----' \\
    """
    lines = wrap(normalize(text), max_width, break_long_words)
    write_bubble(lines, writer, mascot)


def say_to_string(text: str, max_width: int, mascot: bytes = FERRIS,
                  break_long_words: bool = False) -> str:
    """Same output as say(), returned as a str instead of written out."""
    lines = wrap(normalize(text), max_width, break_long_words)
    return render(lines, mascot).decode("utf-8")
