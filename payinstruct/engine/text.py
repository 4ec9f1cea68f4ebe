"""String utilities for instruction scanning.

Instructions are normalized to single ASCII spaces before any scanning, so the
scanner and extractor only ever treat the literal space character as a word
boundary.
"""

import re

_WHITESPACE_CHARS = frozenset(" \t\n\r")


def normalize_whitespace(text) -> str:
    """Trim the text and collapse runs of space/tab/CR/LF into one space.

    Non-string input yields an empty string.
    """
    if not isinstance(text, str):
        return ""

    out = []
    prev_was_space = False
    for char in text.strip():
        if char in _WHITESPACE_CHARS:
            if not prev_was_space:
                out.append(" ")
                prev_was_space = True
        else:
            out.append(char)
            prev_was_space = False
    return "".join(out)


def find_keyword_position(text: str, keyword: str, start: int = 0) -> int:
    """Find a keyword as a whole word, case-insensitively.

    A whole-word match is bounded on each side by the start/end of the text or
    a literal space. Embedded occurrences (e.g. "TO" inside "TOKEN") are skipped
    and scanning continues after them.

    Args:
        text: Normalized text to search
        keyword: Keyword to look for
        start: Offset to start searching from

    Returns:
        Index of the first whole-word match at or after start, or -1
    """
    pattern = re.compile(re.escape(keyword), re.IGNORECASE)
    pos = start
    while pos < len(text):
        match = pattern.search(text, pos)
        if match is None:
            return -1

        found, end = match.start(), match.end()
        starts_word = found == 0 or text[found - 1] == " "
        ends_word = end == len(text) or text[end] == " "
        if starts_word and ends_word:
            return found

        pos = found + 1
    return -1


def extract_next_word(text: str, start: int = 0) -> str:
    """Return the run of non-space characters after any leading spaces."""
    pos = start
    while pos < len(text) and text[pos] == " ":
        pos += 1

    word_start = pos
    while pos < len(text) and text[pos] != " ":
        pos += 1

    return text[word_start:pos]
