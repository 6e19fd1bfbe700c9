"""Styled text fragments.

Formatting code produces immutable tuples of fragments; a sink (see
reportforge.citation.sinks) turns them into text, markup or rich output
only at the end.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class FragmentStyle(Enum):
    """Emphasis markers understood by the sinks."""

    ITALIC = "italic"
    SUPERSCRIPT = "superscript"


@dataclass(frozen=True)
class Fragment:
    """A piece of text with an optional style marker."""

    text: str
    style: Optional[FragmentStyle] = None

    @property
    def is_plain(self) -> bool:
        return self.style is None


def plain(text: str) -> Fragment:
    return Fragment(text)


def italic(text: str) -> Fragment:
    return Fragment(text, FragmentStyle.ITALIC)


def superscript(text: str) -> Fragment:
    return Fragment(text, FragmentStyle.SUPERSCRIPT)


def plain_text(fragments: Iterable[Fragment]) -> str:
    """Concatenate fragment texts, ignoring styles."""
    return "".join(fragment.text for fragment in fragments)
