"""Pure string helpers: sentence splitting, whitespace cleanup and line wrapping."""

import re

# A run of non-terminators followed by one or more terminators
SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+")

WHITESPACE_PATTERN = re.compile(r"\s+")


def split_sentences(text: str) -> list[str]:
    """Split text into sentences ending in '.', '!' or '?'.

    Args:
        text: Text to split

    Returns:
        Matched sentences, untrimmed. When no sentence boundary is found the
        whole text is returned as the only element, so "" gives [""] and
        "no terminator" gives ["no terminator"]. Text after the last
        terminator is dropped.
    """
    sentences = SENTENCE_PATTERN.findall(text)
    return sentences or [text]


def clean_text(text: str) -> str:
    """Collapse whitespace runs (newlines included) to single spaces and trim.

    All-whitespace input gives an empty string.
    """
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def wrap_text(text: str, max_width: int) -> list[str]:
    """Greedily wrap words into lines of at most max_width characters.

    Words are separated by single spaces. A word longer than max_width is
    kept whole on its own line.

    Args:
        text: Text to wrap
        max_width: Maximum line length in characters

    Returns:
        Wrapped lines in order
    """
    lines: list[str] = []
    current = ""

    for word in text.split(" "):
        candidate = f"{current} {word}" if current else word
        if len(candidate) > max_width:
            if current:
                lines.append(current)
            current = word
        else:
            current = candidate

    if current:
        lines.append(current)

    return lines
