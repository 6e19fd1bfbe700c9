"""Reference formatting for report bibliographies.

Turns a publication record into an ordered tuple of citation fragments.
Rules depend on the publication variant:

    LiteratureReference  Smith J., Doe A. (2020). Title. Journal, 12, 1-10.
    Book                 Smith J. (2019). Chapter, *Book title*, 5-9.
    URL                  Reactome. Retrieved from https://reactome.org
    other kinds          display name as-is, plus a logged warning

Missing optional fields are left out. Missing required fields degrade
instead of failing: no year renders as ``n.d.`` (configurable), no title
as an empty string and no authors drops the author prefix.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence

from reportforge.core.config.base import CitationConfig
from reportforge.core.logging import get_logger
from reportforge.domain.models import (
    URL,
    Book,
    LiteratureReference,
    OtherPublication,
    Person,
    Publication,
)
from reportforge.shared.fragments import Fragment, italic, plain, plain_text

logger = get_logger(__name__)

_LEADING_SEPARATORS = re.compile(r"^[\s,.]+")
_TRAILING_SEPARATORS = re.compile(r"[\s,.]+$")

Citation = tuple[Fragment, ...]


def trim_separators(text: str) -> str:
    """Strip stray whitespace, commas and periods from both ends.

    >>> trim_separators("..Cells, Ageing,..")
    'Cells, Ageing'
    """
    text = _LEADING_SEPARATORS.sub("", text)
    return _TRAILING_SEPARATORS.sub("", text)


def author_list(
    people: Sequence[Person],
    max_authors: int = 6,
    et_al: str = " et. al.",
) -> str:
    """Name the first max_authors people, in input order.

    Each name is followed by a period. If there are more people than
    max_authors, et_al is appended.
    """
    names = ", ".join(f"{person.display_name}." for person in people[:max_authors])
    if len(people) > max_authors:
        names += et_al
    return names


class CitationFormatter:
    """Formats publications into citation fragments."""

    def __init__(self, config: Optional[CitationConfig] = None) -> None:
        self.config = config or CitationConfig()

    def format(self, publication: Publication) -> Citation:
        """Format one publication.

        Never raises for an unrecognised kind: the display name is used and
        a warning is logged.

        Raises:
            TypeError: If publication is not one of the publication records
        """
        if isinstance(publication, LiteratureReference):
            return self._literature_reference(publication)
        if isinstance(publication, Book):
            return self._book(publication)
        if isinstance(publication, URL):
            return self._url(publication)
        if isinstance(publication, OtherPublication):
            logger.warning("Publication subtype not known", kind=publication.kind)
            return (plain(publication.display_name),)
        raise TypeError(f"Not a publication record: {type(publication).__name__}")

    def format_all(self, publications: Iterable[Publication]) -> list[Citation]:
        """Format publications in input order."""
        return [self.format(publication) for publication in publications]

    def _head(self, authors: Sequence[Person], year: Optional[int]) -> str:
        year_text = self.config.missing_year if year is None else str(year)
        names = author_list(authors, self.config.max_authors, self.config.et_al)
        if not names:
            return f"({year_text})"
        return f"{names} ({year_text})"

    def _literature_reference(self, reference: LiteratureReference) -> Citation:
        fragments = [
            plain(
                f"{self._head(reference.authors, reference.year)}. "
                f"{trim_separators(reference.title)}"
            )
        ]
        if reference.journal is not None:
            fragments.append(plain(". " + reference.journal.strip()))
        if reference.volume is not None:
            fragments.append(plain(", " + reference.volume))
        if reference.pages is not None:
            fragments.append(plain(", " + reference.pages.strip()))
        fragments.append(plain("."))
        return tuple(fragments)

    def _book(self, book: Book) -> Citation:
        fragments = [plain(self._head(book.authors, book.year)), plain(". ")]
        if book.chapter_title is not None:
            fragments.append(plain(book.chapter_title + ", "))
        fragments.append(italic(book.title.strip()))
        if book.pages is not None:
            fragments.append(plain(", " + book.pages.strip()))
        fragments.append(plain("."))
        return tuple(fragments)

    def _url(self, url: URL) -> Citation:
        return (plain(f"{url.title}. Retrieved from {url.locator}"),)


def format_publication(
    publication: Publication, config: Optional[CitationConfig] = None
) -> Citation:
    """Convenience function to format a single publication."""
    return CitationFormatter(config).format(publication)


def format_references(
    publications: Iterable[Publication], config: Optional[CitationConfig] = None
) -> list[Citation]:
    """Convenience function to format a reference list."""
    return CitationFormatter(config).format_all(publications)


def citation_text(citation: Iterable[Fragment]) -> str:
    """Plain text of a citation, styles dropped."""
    return plain_text(citation)
