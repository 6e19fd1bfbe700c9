"""Fragment sinks.

Render fragment tuples produced by the formatter or the author block into
a concrete output: plain text, Markdown, HTML or a rich Text object for
terminal display.
"""

from __future__ import annotations

import html
import re
from enum import Enum
from typing import Iterable

from rich.text import Text

from reportforge.shared.fragments import Fragment, FragmentStyle


class OutputFormat(Enum):
    """Output formats for rendered fragments."""

    TEXT = "text"
    MARKDOWN = "markdown"
    HTML = "html"


# Characters with meaning in Markdown emphasis and superscript markup
_MARKDOWN_SPECIAL = re.compile(r"([\\`*_^])")

_MARKDOWN_WRAP = {
    FragmentStyle.ITALIC: ("*", "*"),
    FragmentStyle.SUPERSCRIPT: ("^", "^"),
}

_HTML_WRAP = {
    FragmentStyle.ITALIC: ("<i>", "</i>"),
    FragmentStyle.SUPERSCRIPT: ("<sup>", "</sup>"),
}

_RICH_STYLES = {
    FragmentStyle.ITALIC: "italic",
    FragmentStyle.SUPERSCRIPT: "dim",
}


def _render_fragment(fragment: Fragment, format: OutputFormat) -> str:
    if format == OutputFormat.HTML:
        text = html.escape(fragment.text, quote=False)
        wraps = _HTML_WRAP
    elif format == OutputFormat.MARKDOWN:
        text = _MARKDOWN_SPECIAL.sub(r"\\\1", fragment.text)
        wraps = _MARKDOWN_WRAP
    else:
        return fragment.text

    if fragment.style is None or not text:
        return text
    opening, closing = wraps[fragment.style]
    return f"{opening}{text}{closing}"


def render(
    fragments: Iterable[Fragment], format: OutputFormat = OutputFormat.TEXT
) -> str:
    """Render fragments as a single string.

    Args:
        fragments: Fragments in display order
        format: Output format

    Returns:
        Rendered string
    """
    return "".join(_render_fragment(fragment, format) for fragment in fragments)


def to_rich_text(fragments: Iterable[Fragment]) -> Text:
    """Build a rich Text with styled spans for terminal display."""
    text = Text()
    for fragment in fragments:
        style = _RICH_STYLES.get(fragment.style) if fragment.style else None
        text.append(fragment.text, style=style)
    return text
