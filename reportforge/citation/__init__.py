"""Citation formatting for report reference sections.

This package provides:
- formatter: publication records to citation fragments
- sinks: fragments to text, Markdown, HTML or rich output
"""

from reportforge.citation.formatter import (
    Citation,
    CitationFormatter,
    author_list,
    citation_text,
    format_publication,
    format_references,
    trim_separators,
)
from reportforge.citation.sinks import OutputFormat, render, to_rich_text

__all__ = [
    # Formatting
    "Citation",
    "CitationFormatter",
    "author_list",
    "citation_text",
    "format_publication",
    "format_references",
    "trim_separators",
    # Output
    "OutputFormat",
    "render",
    "to_rich_text",
]
