"""Author collection and cover-page author blocks.

This package provides:
- collector: deduplicated contributors of an event tree
- block: cover author line and author/affiliation block
"""

from reportforge.authors.block import (
    AffiliationBlock,
    affiliation_block,
    author_name,
    cover_author_line,
)
from reportforge.authors.collector import (
    AuthorCollector,
    collect_authors,
    sorted_authors,
)

__all__ = [
    "AuthorCollector",
    "collect_authors",
    "sorted_authors",
    "AffiliationBlock",
    "affiliation_block",
    "author_name",
    "cover_author_line",
]
