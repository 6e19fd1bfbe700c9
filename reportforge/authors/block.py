"""Cover-page author blocks.

Two renderings of the people behind an event:

- cover_author_line(): the centred line under the title, e.g.
  ``"Gillespie ME., Jassal B., Matthews L."`` with each name shaped so the
  layout engine never splits it;
- affiliation_block(): names followed by superscript affiliation numbers,
  plus the numbered affiliation legend printed below them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from reportforge.authors.collector import AuthorCollector, sorted_authors
from reportforge.domain.models import Event, Person
from reportforge.shared.fragments import Fragment, plain, superscript
from reportforge.shared.text_shaping import shape

Shaper = Callable[[str], str]


def _identity(text: str) -> str:
    return text


def author_name(person: Person) -> str:
    """Cover-page form of a person's name."""
    return f"{person.display_name}."


def cover_author_line(
    event: Event,
    collector: Optional[AuthorCollector] = None,
    shaped: bool = True,
    separator: str = ", ",
) -> str:
    """Build the author line for the cover page of event.

    Args:
        event: Event being exported
        collector: Collector to use (a lenient one by default)
        shaped: Shape each name so it is never broken across lines
        separator: Text placed between names

    Returns:
        Sorted, distinct names joined by separator
    """
    collector = collector or AuthorCollector()
    shaper: Shaper = shape if shaped else _identity

    names: list[str] = []
    for person in sorted_authors(collector.collect(event)):
        name = author_name(person)
        if name not in names:
            names.append(name)
    return separator.join(shaper(name) for name in names)


@dataclass(frozen=True)
class AffiliationBlock:
    """Author fragments with affiliation indices and the matching legend."""

    fragments: tuple[Fragment, ...]
    affiliations: tuple[str, ...]

    def legend(self) -> list[str]:
        """Numbered affiliation lines, in index order."""
        return [f"{i}. {name}" for i, name in enumerate(self.affiliations, start=1)]


def affiliation_block(
    people: Iterable[Person],
    shaped: bool = True,
    separator: str = ", ",
) -> AffiliationBlock:
    """Build names with superscript affiliation indices.

    Affiliations are numbered from 1 in order of first appearance. Each
    person's indices are sorted and comma-joined. A repeated display name
    keeps only its first occurrence.
    """
    shaper: Shaper = shape if shaped else _identity
    affiliations: list[str] = []
    seen: set[str] = set()
    entries: list[tuple[Fragment, ...]] = []

    for person in people:
        if person.display_name in seen:
            continue
        seen.add(person.display_name)

        indices: list[int] = []
        for affiliation in person.affiliations:
            if affiliation.display_name not in affiliations:
                affiliations.append(affiliation.display_name)
            indices.append(1 + affiliations.index(affiliation.display_name))

        entry = [plain(shaper(author_name(person)))]
        if indices:
            joined = ", ".join(str(i) for i in sorted(set(indices)))
            entry.append(superscript(shaper(joined)))
        entries.append(tuple(entry))

    fragments: list[Fragment] = []
    for i, entry in enumerate(entries):
        if i:
            fragments.append(plain(separator))
        fragments.extend(entry)

    return AffiliationBlock(fragments=tuple(fragments), affiliations=tuple(affiliations))
