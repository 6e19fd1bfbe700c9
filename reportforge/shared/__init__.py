"""Shared utilities used by the authors and citation modules."""

from reportforge.shared.fragments import (
    Fragment,
    FragmentStyle,
    italic,
    plain,
    plain_text,
    superscript,
)
from reportforge.shared.text_shaping import (
    NO_BREAK_SPACE,
    WORD_JOINER,
    is_shaped,
    shape,
    unshape,
)

__all__ = [
    # Fragments
    "Fragment",
    "FragmentStyle",
    "plain",
    "italic",
    "superscript",
    "plain_text",
    # Shaping
    "shape",
    "unshape",
    "is_shaped",
    "WORD_JOINER",
    "NO_BREAK_SPACE",
]
