import re
import logging
from typing import List

from wcwidth import wcwidth

# Any whitespace except line feed, carriage return and the \x1c-\x1f separators
HORIZONTAL_WHITESPACE = re.compile(r'[^\S\r\n\x1c-\x1f]+')


def normalize(text: str) -> str:
    """Merges runs of whitespace into one space while keeping line breaks."""
    return HORIZONTAL_WHITESPACE.sub(' ', text)


def display_width(text: str) -> int:
    """Number of terminal columns the text occupies.

    Wide characters count as 2 and combining marks as 0. Control characters,
    which have no column width, also count as 0.
    """
    return sum(max(wcwidth(char), 0) for char in text)


def _split_paragraphs(text: str) -> List[str]:
    paragraphs = text.split('\n')
    # A final line break does not open another paragraph
    if len(paragraphs) > 1 and paragraphs[-1] == '':
        paragraphs.pop()
    return [p[:-1] if p.endswith('\r') else p for p in paragraphs]


def _break_word(word: str, max_width: int) -> List[str]:
    """Cuts a word into chunks no wider than max_width (at least one char each)."""
    chunks = []
    temp_word = ""
    temp_width = 0
    for char in word:
        char_width = max(wcwidth(char), 0)
        if temp_word and temp_width + char_width > max_width:
            chunks.append(temp_word)
            temp_word = ""
            temp_width = 0
        temp_word += char
        temp_width += char_width
    if temp_word:
        chunks.append(temp_word)
    return chunks


def wrap(text: str, max_width: int, break_long_words: bool = False) -> List[str]:
    """Wraps text to fit within max_width display columns, preserving paragraphs.

    Lines are filled greedily with space separated words. A word wider than
    max_width gets a line of its own and is left whole unless
    ``break_long_words`` is set. Always returns at least one line.
    """
    lines = []
    for paragraph in _split_paragraphs(text):
        words = paragraph.split(' ')
        # Trailing whitespace is dropped, leading whitespace is kept as indentation
        if len(words) > 1 and words[-1] == '':
            words.pop()

        current_line = []
        current_width = 0
        for word in words:
            word_width = display_width(word)
            if not current_line:
                current_line.append(word)
                current_width = word_width
            elif current_width + 1 + word_width <= max_width:
                current_line.append(word)
                current_width += 1 + word_width
            else:
                lines.append(' '.join(current_line))
                current_line = [word]
                current_width = word_width

            # Only a word that starts a line can overflow it
            if break_long_words and current_width > max_width and len(current_line) == 1:
                chunks = _break_word(word, max(max_width, 1))
                lines.extend(chunks[:-1])
                current_line = [chunks[-1]]
                current_width = display_width(chunks[-1])

        # Add the last line of the paragraph; empty paragraphs give empty lines
        lines.append(' '.join(current_line))

    logging.debug(f"Wrapped {len(text)} chars into {len(lines)} lines at width {max_width}")
    return lines


def fill(text: str, max_width: int, break_long_words: bool = False) -> str:
    """Like wrap() but returns a single string with the lines joined by newlines."""
    return '\n'.join(wrap(text, max_width, break_long_words))
