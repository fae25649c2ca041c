"""Offset/limit pagination over ordered result lists."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from email_archive_explorer.exceptions import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of a result list plus the metadata needed to fetch the next."""

    total: int
    offset: int
    returned: int
    has_more: bool
    items: list[T]


def validate_limit(limit: object, field: str = "limit") -> int:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ValidationError(field, f"must be an integer, got {limit!r}")
    if limit < 1:
        raise ValidationError(field, f"must be >= 1, got {limit}")
    return limit


def validate_offset(offset: object, field: str = "offset") -> int:
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise ValidationError(field, f"must be an integer, got {offset!r}")
    if offset < 0:
        raise ValidationError(field, f"must be >= 0, got {offset}")
    return offset


def paginate(items: Sequence[T], limit: int, offset: int = 0) -> Page[T]:
    """Take ``items[offset:offset + limit]`` and describe the slice.

    Args:
        items: Ordered results.
        limit: Maximum slice length (>= 1).
        offset: Number of leading items to skip (>= 0).

    Raises:
        ValidationError: If limit or offset is out of range.
    """

    limit = validate_limit(limit)
    offset = validate_offset(offset)

    total = len(items)
    sliced = list(items[offset : offset + limit])
    return Page(
        total=total,
        offset=offset,
        returned=len(sliced),
        has_more=offset + len(sliced) < total,
        items=sliced,
    )
