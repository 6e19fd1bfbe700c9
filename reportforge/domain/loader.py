"""Load domain records from decoded JSON.

The data layer hands records over as plain dicts (snake_case keys). Each
record type is validated with a pydantic schema and converted into the
frozen dataclasses of reportforge.domain.models.

Publications carry a ``kind`` discriminator. The known kinds map onto the
closed publication variants; any other kind becomes an OtherPublication so
that the formatter can still print its display name.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from reportforge.core.exceptions import RecordValidationError
from reportforge.core.logging import get_logger
from reportforge.domain.models import (
    URL,
    Affiliation,
    Book,
    Event,
    InstanceEdit,
    LiteratureReference,
    OtherPublication,
    Person,
    Publication,
)

logger = get_logger(__name__)


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class AffiliationRecord(_Record):
    display_name: str = Field(alias="displayName")


class PersonRecord(_Record):
    display_name: str = Field(alias="displayName")
    affiliation: List[AffiliationRecord] = Field(default_factory=list)

    def to_domain(self) -> Person:
        return Person(
            display_name=self.display_name,
            affiliations=tuple(Affiliation(a.display_name) for a in self.affiliation),
        )


class InstanceEditRecord(_Record):
    author: List[PersonRecord] = Field(default_factory=list)
    date_time: Optional[str] = Field(default=None, alias="dateTime")

    def to_domain(self) -> InstanceEdit:
        return InstanceEdit(
            author=tuple(p.to_domain() for p in self.author),
            date_time=self.date_time,
        )


class EventRecord(_Record):
    st_id: str = Field(alias="stId")
    display_name: str = Field(alias="displayName")
    schema_class: str = Field(default="Event", alias="schemaClass")
    authored: List[InstanceEditRecord] = Field(default_factory=list)
    edited: List[InstanceEditRecord] = Field(default_factory=list)
    reviewed: List[InstanceEditRecord] = Field(default_factory=list)
    revised: List[InstanceEditRecord] = Field(default_factory=list)
    created: Optional[InstanceEditRecord] = None
    modified: Optional[InstanceEditRecord] = None
    has_event: List["EventRecord"] = Field(default_factory=list, alias="hasEvent")

    def to_domain(self) -> Event:
        def edits(records: List[InstanceEditRecord]) -> tuple[InstanceEdit, ...]:
            return tuple(r.to_domain() for r in records)

        return Event(
            st_id=self.st_id,
            display_name=self.display_name,
            schema_class=self.schema_class,
            authored=edits(self.authored),
            edited=edits(self.edited),
            reviewed=edits(self.reviewed),
            revised=edits(self.revised),
            created=self.created.to_domain() if self.created else None,
            modified=self.modified.to_domain() if self.modified else None,
            has_event=tuple(e.to_domain() for e in self.has_event),
        )


EventRecord.model_rebuild()


class LiteratureReferenceRecord(_Record):
    author: List[PersonRecord] = Field(default_factory=list)
    year: Optional[int] = None
    title: Optional[str] = None
    journal: Optional[str] = None
    volume: Optional[str] = None
    pages: Optional[str] = None

    def to_domain(self) -> LiteratureReference:
        return LiteratureReference(
            authors=tuple(p.to_domain() for p in self.author),
            year=self.year,
            title=self.title or "",
            journal=self.journal,
            volume=self.volume,
            pages=self.pages,
        )


class BookRecord(_Record):
    author: List[PersonRecord] = Field(default_factory=list)
    year: Optional[int] = None
    title: Optional[str] = None
    chapter_title: Optional[str] = Field(default=None, alias="chapterTitle")
    pages: Optional[str] = None

    def to_domain(self) -> Book:
        return Book(
            authors=tuple(p.to_domain() for p in self.author),
            year=self.year,
            title=self.title or "",
            chapter_title=self.chapter_title,
            pages=self.pages,
        )


class URLRecord(_Record):
    title: Optional[str] = None
    uniform_resource_locator: str = Field(default="", alias="uniformResourceLocator")

    def to_domain(self) -> URL:
        return URL(title=self.title or "", locator=self.uniform_resource_locator)


PUBLICATION_SCHEMAS: dict[str, type[_Record]] = {
    "LiteratureReference": LiteratureReferenceRecord,
    "Book": BookRecord,
    "URL": URLRecord,
}


def _error_fields(errors: List[dict]) -> str:
    return ", ".join(".".join(str(p) for p in err["loc"]) for err in errors)


def _invalid(record_type: str, error: PydanticValidationError) -> RecordValidationError:
    errors = error.errors()
    fields = _error_fields(errors)
    return RecordValidationError(
        f"Invalid {record_type} record: {fields}",
        record_type=record_type,
        errors=errors,
    )


def load_person(data: dict[str, Any]) -> Person:
    """Build a Person from a decoded record."""
    try:
        return PersonRecord.model_validate(data).to_domain()
    except PydanticValidationError as e:
        raise _invalid("Person", e) from e


def load_event(data: dict[str, Any]) -> Event:
    """Build an Event, including its sub-event tree, from a decoded record.

    Raises:
        RecordValidationError: If a required field is missing or malformed
    """
    try:
        return EventRecord.model_validate(data).to_domain()
    except PydanticValidationError as e:
        raise _invalid("Event", e) from e


def _publication_kind(data: dict[str, Any]) -> str:
    for key in ("kind", "schemaClass", "schema_class", "className"):
        if data.get(key):
            return str(data[key])
    return "Publication"


def load_publication(data: dict[str, Any]) -> Publication:
    """Build one publication variant from a decoded record.

    Unknown kinds never fail: they load as OtherPublication.

    Raises:
        RecordValidationError: If a known kind carries a malformed field
    """
    kind = _publication_kind(data)
    schema = PUBLICATION_SCHEMAS.get(kind)
    if schema is None:
        display_name = data.get("display_name") or data.get("displayName") or ""
        return OtherPublication(display_name=str(display_name), kind=kind)

    try:
        return schema.model_validate(data).to_domain()
    except PydanticValidationError as e:
        raise _invalid(kind, e) from e


def load_publications(items: Iterable[dict[str, Any]]) -> list[Publication]:
    """Load a list of publications, preserving order.

    A malformed record does not stop the list: it is logged and loaded as
    an OtherPublication named after its title (or its kind).
    """
    publications: list[Publication] = []
    for item in items:
        try:
            publications.append(load_publication(item))
        except RecordValidationError as e:
            kind = e.record_type or _publication_kind(item)
            logger.warning(
                "Malformed publication record",
                kind=kind,
                fields=_error_fields(e.errors),
            )
            title = item.get("title") if isinstance(item.get("title"), str) else ""
            publications.append(
                OtherPublication(display_name=title.strip() or kind, kind=kind)
            )
    logger.debug("Loaded publications", count=len(publications))
    return publications
