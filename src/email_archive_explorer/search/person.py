"""Case-insensitive person search across the three name indexes.

Mentioned people, participants and notable figures are counted
independently. A search scans each index in that order and merges matches
by lowercased name. Each scan only writes the field its own index owns; a
name first seen in a later scan takes its other fields from the lookup maps
at the moment it is created and they are not refreshed afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

import structlog

from email_archive_explorer.index import FrequencyIndexes
from email_archive_explorer.models import CountedItem, PersonMatch, PersonSearchResult

logger = structlog.get_logger()


@dataclass
class _MatchAccumulator:
    name: str
    mentions: int
    participations: int
    is_notable: bool

    @property
    def relevance(self) -> int:
        return self.mentions + self.participations

    def to_match(self) -> PersonMatch:
        return PersonMatch(
            name=self.name,
            mentions=self.mentions,
            participations=self.participations,
            is_notable=self.is_notable,
        )


# Applies one index's count to an accumulator.
FieldUpdate = Callable[[_MatchAccumulator, int], None]


def _set_mentions(acc: _MatchAccumulator, count: int) -> None:
    acc.mentions = count


def _set_participations(acc: _MatchAccumulator, count: int) -> None:
    acc.participations = count


def _mark_notable(acc: _MatchAccumulator, count: int) -> None:
    acc.is_notable = True


def _merge_index(
    results: dict[str, _MatchAccumulator],
    items: Sequence[CountedItem],
    query_lower: str,
    indexes: FrequencyIndexes,
    update: FieldUpdate,
) -> None:
    for item in items:
        key = item.name.lower()
        if query_lower not in key:
            continue

        acc = results.get(key)
        if acc is None:
            acc = _MatchAccumulator(
                name=item.name,
                mentions=indexes.mentioned_people_map.get(key, 0),
                participations=indexes.participants_map.get(key, 0),
                is_notable=key in indexes.notable_figures_map,
            )
            results[key] = acc
        update(acc, item.count)


def search_person(indexes: FrequencyIndexes, query: str, limit: int) -> PersonSearchResult:
    """Find names containing ``query`` in any of the three name indexes.

    Args:
        indexes: Prebuilt frequency indexes.
        query: Name or partial name; matched case-insensitively as a substring.
        limit: Maximum number of matches returned.

    Returns:
        Matches ranked by mentions + participations, descending. Ties keep the
        order in which names were first found.
    """

    query_lower = query.lower()
    results: dict[str, _MatchAccumulator] = {}

    scans: tuple[tuple[Sequence[CountedItem], FieldUpdate], ...] = (
        (indexes.mentioned_people, _set_mentions),
        (indexes.participants, _set_participations),
        (indexes.notable_figures, _mark_notable),
    )
    for items, update in scans:
        _merge_index(results, items, query_lower, indexes, update)

    ranked = sorted(results.values(), key=lambda acc: acc.relevance, reverse=True)
    matches = [acc.to_match() for acc in ranked[:limit]]

    logger.debug(
        "person_search_completed",
        query=query,
        total_matches=len(results),
        returned=len(matches),
    )
    return PersonSearchResult(
        query=query,
        total_matches=len(results),
        returned=len(matches),
        matches=matches,
    )
