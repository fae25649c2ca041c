"""AND-filtering of email records by people and crime types."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from email_archive_explorer.models import EmailDocument


def normalize_filter_values(value: Any) -> list[str] | None:
    """Accept a comma-separated string or a list of strings.

    ``"A, B"`` becomes ``["A", "B"]``; blank parts are dropped. Lists keep
    their items as given apart from dropping blank strings.
    """

    if value is None:
        return None
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, (list, tuple)):
        return [v for v in value if not (isinstance(v, str) and not v.strip())]
    return value


class EmailFilters(BaseModel):
    """Filter criteria; every supplied value of every field must match."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    participants: list[str] | None = None
    mentioned_people: list[str] | None = None
    notable_figures: list[str] | None = None
    crime_types: list[str] | None = None

    @field_validator(
        "participants", "mentioned_people", "notable_figures", "crime_types", mode="before"
    )
    @classmethod
    def _split_values(cls, v: Any) -> Any:
        return normalize_filter_values(v)

    def is_empty(self) -> bool:
        return not (
            self.participants or self.mentioned_people or self.notable_figures or self.crime_types
        )


_FIELD_ATTRIBUTES: tuple[tuple[str, Callable[[EmailDocument], Iterable[str]]], ...] = (
    ("participants", lambda d: (p.name for p in d.participants)),
    ("mentioned_people", lambda d: d.people_mentioned),
    ("notable_figures", lambda d: d.notable_figures),
    ("crime_types", lambda d: d.crime_types),
)


def filter_emails(
    documents: Iterable[EmailDocument],
    filters: EmailFilters,
) -> list[EmailDocument]:
    """Return records that contain every requested value, in input order.

    Comparison is case-insensitive on trimmed values, matching how the
    counted lists present names. A field with no values imposes no
    constraint, so empty filters return every record.
    """

    filtered = list(documents)

    for field, attribute in _FIELD_ATTRIBUTES:
        wanted = getattr(filters, field)
        if not wanted:
            continue
        wanted_lower = [w.strip().lower() for w in wanted]
        filtered = [
            doc
            for doc in filtered
            if _has_all(wanted_lower, {v.strip().lower() for v in attribute(doc) if v})
        ]

    return filtered


def _has_all(wanted: list[str], present: set[str]) -> bool:
    return all(w in present for w in wanted)
