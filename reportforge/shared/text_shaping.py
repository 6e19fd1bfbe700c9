"""
Text Shaping for Layout Engines.

Layout engines break lines at spaces and, when justifying, may split a run
of characters wherever it fits. Author names on a cover page and the
name/affiliation-index pairs next to them must stay on one line, so they
are shaped before being handed to the renderer:

1. every maximal whitespace run becomes one NO-BREAK SPACE (U+00A0);
2. a WORD JOINER (U+2060) is placed between every pair of adjacent
   characters, which forbids a break at that position.

    >>> shape("Jassal B")
    'J\\u2060a\\u2060s\\u2060s\\u2060a\\u2060l\\u2060\\xa0\\u2060B'

Word joiners already present in the input are dropped before shaping, so
shape(shape(text)) == shape(text).
"""

import re

WORD_JOINER = "\u2060"
NO_BREAK_SPACE = "\u00a0"

# str patterns: \s also matches U+00A0, so shaped output keeps its spaces
_WHITESPACE_RUN = re.compile(r"\s+")


def shape(text: str) -> str:
    """Make text unbreakable for a downstream layout engine.

    Args:
        text: Any string (empty is fine)

    Returns:
        Shaped string; empty input gives empty output
    """
    plain = text.replace(WORD_JOINER, "")
    collapsed = _WHITESPACE_RUN.sub(NO_BREAK_SPACE, plain)
    return WORD_JOINER.join(collapsed)


def unshape(text: str) -> str:
    """Undo shape(): drop word joiners and restore plain spaces."""
    return text.replace(WORD_JOINER, "").replace(NO_BREAK_SPACE, " ")


def is_shaped(text: str) -> bool:
    """True if text is already in shaped form."""
    return shape(text) == text
