"""Domain records and the loader that builds them from JSON input."""

from reportforge.domain.loader import (
    load_event,
    load_person,
    load_publication,
    load_publications,
)
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

__all__ = [
    # Records
    "Affiliation",
    "Person",
    "InstanceEdit",
    "Event",
    # Publications
    "Publication",
    "LiteratureReference",
    "Book",
    "URL",
    "OtherPublication",
    # Loading
    "load_event",
    "load_person",
    "load_publication",
    "load_publications",
]
