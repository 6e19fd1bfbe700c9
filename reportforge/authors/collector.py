"""Author collection over an event hierarchy.

Gathers everyone who authored, edited, reviewed or revised an event, plus
the people behind its created/modified records, and, for pathways, the
same for every sub-event below it.

Traversal uses an explicit stack and a visited set keyed by st_id:

- an event reached twice through different parents (shared sub-events are
  common in pathway data) is walked once;
- an event whose st_id is already on its own ancestry path closes a cycle.
  It is skipped with a warning, or raises EventCycleError when the
  collector is strict.
"""

from __future__ import annotations

from typing import Iterable

from reportforge.core.exceptions import EventCycleError
from reportforge.core.logging import get_logger
from reportforge.domain.models import Event, Person

logger = get_logger(__name__)


class AuthorCollector:
    """Collects the deduplicated set of people behind an event."""

    def __init__(self, strict_cycles: bool = False) -> None:
        self.strict_cycles = strict_cycles

    def collect(self, event: Event) -> set[Person]:
        """Return every contributor to event and its sub-events.

        Person equality is by display name, so the set holds one entry per
        name. The set is unordered; use sorted_authors() before display.

        Raises:
            EventCycleError: If strict and a sub-event refers to an ancestor
        """
        authors: set[Person] = set()
        visited: set[str] = set()
        stack: list[tuple[Event, tuple[str, ...]]] = [(event, ())]

        while stack:
            current, ancestors = stack.pop()

            if current.st_id in ancestors:
                self._on_cycle(current, ancestors)
                continue
            if current.st_id in visited:
                continue
            visited.add(current.st_id)

            for edit in current.edits():
                authors.update(edit.author)

            if current.is_composite:
                path = ancestors + (current.st_id,)
                # Reversed so children are walked in their listed order
                for child in reversed(current.has_event):
                    stack.append((child, path))

        logger.debug(
            "Collected authors",
            event_id=event.st_id,
            events=len(visited),
            authors=len(authors),
        )
        return authors

    def _on_cycle(self, event: Event, ancestors: tuple[str, ...]) -> None:
        start = ancestors.index(event.st_id)
        cycle = list(ancestors[start:]) + [event.st_id]
        if self.strict_cycles:
            raise EventCycleError(
                f"Event {event.st_id} is its own sub-event: {' -> '.join(cycle)}",
                path=cycle,
            )
        logger.warning(
            "Skipping cyclic sub-event",
            event_id=event.st_id,
            cycle=" -> ".join(cycle),
        )


def collect_authors(event: Event, strict_cycles: bool = False) -> set[Person]:
    """Convenience wrapper around AuthorCollector.collect()."""
    return AuthorCollector(strict_cycles=strict_cycles).collect(event)


def sorted_authors(people: Iterable[Person]) -> list[Person]:
    """Materialize people as a list sorted by display name."""
    return sorted(people, key=lambda person: person.display_name)
