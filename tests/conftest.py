"""
Shared pytest fixtures and configuration for ReportForge tests.

Fixture Organization
--------------------
- **make_person / make_edit**: builders for people and edit records
- **reaction / pathway**: small event trees with overlapping curators
- **literature_reference / book / url / other_publication**: one record
  per publication variant
- **event_json / publications_json**: the same data written to JSON files
  for loader and CLI tests
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

from reportforge.domain.models import (
    URL,
    Affiliation,
    Book,
    Event,
    InstanceEdit,
    LiteratureReference,
    OtherPublication,
    Person,
)


# ============================================================================
# Builders
# ============================================================================


@pytest.fixture
def make_person() -> Callable[..., Person]:
    """Factory for Person records.

    Example:
        def test_something(make_person):
            person = make_person("Jassal B", "EBI")
    """

    def _make(name: str, *affiliations: str) -> Person:
        return Person(
            display_name=name,
            affiliations=tuple(Affiliation(a) for a in affiliations),
        )

    return _make


@pytest.fixture
def make_edit(make_person) -> Callable[..., InstanceEdit]:
    """Factory for InstanceEdit records from author names."""

    def _make(*names: str) -> InstanceEdit:
        return InstanceEdit(author=tuple(make_person(n) for n in names))

    return _make


# ============================================================================
# Events
# ============================================================================


@pytest.fixture
def reaction(make_edit) -> Event:
    """A reaction with two authored edits sharing a curator and one review."""
    return Event(
        st_id="R-HSA-1",
        display_name="ATP hydrolysis",
        schema_class="Reaction",
        authored=(make_edit("Gillespie ME"), make_edit("Gillespie ME")),
        reviewed=(make_edit("D'Eustachio P"),),
    )


@pytest.fixture
def pathway(reaction, make_edit) -> Event:
    """A pathway holding the reaction plus a sub-pathway."""
    sub_pathway = Event(
        st_id="R-HSA-3",
        display_name="Glycolysis",
        schema_class="Pathway",
        edited=(make_edit("Jassal B"),),
        created=make_edit("Matthews L"),
    )
    return Event(
        st_id="R-HSA-2",
        display_name="Metabolism",
        schema_class="Pathway",
        authored=(make_edit("Jassal B", "Gillespie ME"),),
        modified=make_edit("Wu G"),
        has_event=(reaction, sub_pathway),
    )


# ============================================================================
# Publications
# ============================================================================


@pytest.fixture
def seven_authors(make_person) -> tuple:
    return tuple(make_person(name) for name in "ABCDEFG")


@pytest.fixture
def literature_reference(seven_authors) -> LiteratureReference:
    return LiteratureReference(
        authors=seven_authors,
        year=2020,
        title=" Signaling pathway. ",
        journal="Nature ",
        volume="12",
        pages="1-10 ",
    )


@pytest.fixture
def book(make_person) -> Book:
    return Book(
        authors=(make_person("Alberts B"), make_person("Johnson A")),
        year=2002,
        title=" Molecular Biology of the Cell ",
        chapter_title="Cell Signaling",
        pages=" 831-906",
    )


@pytest.fixture
def url() -> URL:
    return URL(title="Reactome", locator="https://reactome.org")


@pytest.fixture
def other_publication() -> OtherPublication:
    return OtherPublication(display_name="Some thesis, 1999", kind="Thesis")


# ============================================================================
# JSON files
# ============================================================================


def _person(name: str, *affiliations: str) -> Dict[str, Any]:
    return {
        "display_name": name,
        "affiliation": [{"display_name": a} for a in affiliations],
    }


@pytest.fixture
def event_dict() -> Dict[str, Any]:
    """A pathway record as exported by the data layer."""
    return {
        "st_id": "R-HSA-2",
        "display_name": "Metabolism",
        "schema_class": "Pathway",
        "authored": [{"author": [_person("Jassal B", "EBI")]}],
        "reviewed": [{"author": [_person("Wu G", "OICR", "EBI")]}],
        "has_event": [
            {
                "st_id": "R-HSA-1",
                "display_name": "ATP hydrolysis",
                "schema_class": "Reaction",
                "created": {
                    "author": [_person("Gillespie ME", "NYU")],
                    "date_time": "2004-01-01",
                },
                "edited": [{"author": [_person("Jassal B", "EBI")]}],
            }
        ],
    }


@pytest.fixture
def publications_list() -> List[Dict[str, Any]]:
    return [
        {
            "kind": "LiteratureReference",
            "author": [_person(name) for name in "ABCDEFG"],
            "year": 2020,
            "title": " Signaling pathway. ",
            "journal": "Nature ",
            "volume": "12",
            "pages": "1-10 ",
        },
        {
            "kind": "Book",
            "author": [_person("Alberts B")],
            "year": 2002,
            "title": "Molecular Biology of the Cell",
        },
        {
            "kind": "URL",
            "title": "Reactome",
            "uniform_resource_locator": "https://reactome.org",
        },
        {"kind": "Thesis", "display_name": "Some thesis, 1999"},
    ]


@pytest.fixture
def event_json(tmp_path: Path, event_dict) -> Path:
    path = tmp_path / "event.json"
    path.write_text(json.dumps(event_dict), encoding="utf-8")
    return path


@pytest.fixture
def publications_json(tmp_path: Path, publications_list) -> Path:
    path = tmp_path / "publications.json"
    path.write_text(json.dumps(publications_list), encoding="utf-8")
    return path
