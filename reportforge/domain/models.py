"""Domain records consumed by the formatting core.

All records are frozen: they are produced once by the data layer (see
reportforge.domain.loader) and only read afterwards.

Person equality and hashing use the display name alone, so a set of
Person objects deduplicates authors the way the cover page expects even
when the same curator arrives through different edit records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

COMPOSITE_SCHEMA_CLASSES = frozenset({"Pathway", "TopLevelPathway"})


@dataclass(frozen=True)
class Affiliation:
    """Institution a person is affiliated with."""

    display_name: str


@dataclass(frozen=True)
class Person:
    """A curator, editor or reviewer.

    Only display_name takes part in equality and hashing.
    """

    display_name: str
    affiliations: tuple[Affiliation, ...] = field(default=(), compare=False)


@dataclass(frozen=True)
class InstanceEdit:
    """A recorded authorship, edit, review or revision action."""

    author: tuple[Person, ...] = ()
    date_time: Optional[str] = None


@dataclass(frozen=True)
class Event:
    """A pathway or reaction.

    Pathways are composite and hold their sub-events in has_event.
    """

    st_id: str
    display_name: str
    schema_class: str = "Event"
    authored: tuple[InstanceEdit, ...] = ()
    edited: tuple[InstanceEdit, ...] = ()
    reviewed: tuple[InstanceEdit, ...] = ()
    revised: tuple[InstanceEdit, ...] = ()
    created: Optional[InstanceEdit] = None
    modified: Optional[InstanceEdit] = None
    has_event: tuple[Event, ...] = ()

    @property
    def is_composite(self) -> bool:
        """True for pathways and any event carrying sub-events."""
        return self.schema_class in COMPOSITE_SCHEMA_CLASSES or bool(self.has_event)

    def edits(self) -> tuple[InstanceEdit, ...]:
        """All edit records attached directly to this event."""
        singletons = tuple(e for e in (self.created, self.modified) if e is not None)
        return self.authored + self.edited + self.reviewed + self.revised + singletons


# Publications ---------------------------------------------------------------


@dataclass(frozen=True)
class LiteratureReference:
    """A journal article."""

    authors: tuple[Person, ...] = ()
    year: Optional[int] = None
    title: str = ""
    journal: Optional[str] = None
    volume: Optional[str] = None
    pages: Optional[str] = None

    kind = "LiteratureReference"


@dataclass(frozen=True)
class Book:
    """A book or a chapter within one."""

    authors: tuple[Person, ...] = ()
    year: Optional[int] = None
    title: str = ""
    chapter_title: Optional[str] = None
    pages: Optional[str] = None

    kind = "Book"


@dataclass(frozen=True)
class URL:
    """A web resource."""

    title: str = ""
    locator: str = ""

    kind = "URL"


@dataclass(frozen=True)
class OtherPublication:
    """Any publication kind the formatter has no rules for."""

    display_name: str = ""
    kind: str = "Publication"


Publication = Union[LiteratureReference, Book, URL, OtherPublication]
