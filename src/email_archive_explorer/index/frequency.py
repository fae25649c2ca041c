"""Frequency indexes over the repeated free-text fields of the archive.

Each index is a ranked list of distinct values with their occurrence counts.
Values are keyed by their exact trimmed text, so "Epstein" and "epstein" are
counted separately; the lowercase lookup maps exist for case-insensitive
cross-referencing between indexes.
"""

from __future__ import annotations

import unicodedata
from collections import Counter
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass

import structlog

from email_archive_explorer.models import CountedItem, EmailDocument

logger = structlog.get_logger()

Extractor = Callable[[EmailDocument], Iterable[str]]


def mentioned_people(doc: EmailDocument) -> Sequence[str]:
    return doc.people_mentioned


def participant_names(doc: EmailDocument) -> Sequence[str]:
    return doc.participant_names


def notable_figures(doc: EmailDocument) -> Sequence[str]:
    return doc.notable_figures


def crime_types(doc: EmailDocument) -> Sequence[str]:
    return doc.crime_types


def collation_key(name: str) -> tuple[str, str, str]:
    """Sort key approximating a locale-aware comparison of names.

    Accents and case are ignored first, then case, then the raw text decides,
    so the order is total and does not depend on the process locale.
    """
    folded = name.casefold()
    base = "".join(
        c for c in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(c)
    )
    return (base, folded, name)


def build_counted_list(
    documents: Iterable[EmailDocument],
    extractor: Extractor,
) -> list[CountedItem]:
    """Count every trimmed, non-empty value produced by ``extractor``.

    Args:
        documents: Records to aggregate over.
        extractor: Maps a record to its candidate values.

    Returns:
        Counted items sorted by count descending, then by name.
    """

    counts: Counter[str] = Counter()
    for doc in documents:
        for value in extractor(doc):
            normalized = value.strip()
            if normalized:
                counts[normalized] += 1

    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], collation_key(kv[0])))
    return [CountedItem(name=name, count=count) for name, count in ranked]


def build_counted_map(items: Iterable[CountedItem]) -> dict[str, int]:
    """Map lowercased names to counts for case-insensitive lookups."""
    return {item.name.lower(): item.count for item in items}


@dataclass(frozen=True)
class FrequencyIndexes:
    """All derived indexes, computed once from an immutable record set."""

    mentioned_people: Sequence[CountedItem]
    participants: Sequence[CountedItem]
    notable_figures: Sequence[CountedItem]
    crime_types: Sequence[CountedItem]

    mentioned_people_map: Mapping[str, int]
    participants_map: Mapping[str, int]
    notable_figures_map: Mapping[str, int]

    @classmethod
    def build(cls, documents: Sequence[EmailDocument]) -> FrequencyIndexes:
        mentioned = tuple(build_counted_list(documents, mentioned_people))
        logger.info("index_built", index="mentioned_people", unique=len(mentioned))

        participants = tuple(build_counted_list(documents, participant_names))
        logger.info("index_built", index="participants", unique=len(participants))

        notable = tuple(build_counted_list(documents, notable_figures))
        logger.info("index_built", index="notable_figures", unique=len(notable))

        crimes = tuple(build_counted_list(documents, crime_types))
        logger.info("index_built", index="crime_types", unique=len(crimes))

        return cls(
            mentioned_people=mentioned,
            participants=participants,
            notable_figures=notable,
            crime_types=crimes,
            mentioned_people_map=build_counted_map(mentioned),
            participants_map=build_counted_map(participants),
            notable_figures_map=build_counted_map(notable),
        )
