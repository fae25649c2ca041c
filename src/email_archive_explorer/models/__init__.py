"""Data models for Email Archive Explorer.

This module contains Pydantic models for data validation and serialization.
"""

from email_archive_explorer.models.email_document import EmailDocument, EmailParticipant
from email_archive_explorer.models.results import (
    CountedItem,
    CrimeTypesResult,
    EmailsByIdsResult,
    EmailSearchResult,
    EmailSummary,
    IndexStats,
    MentionedPeoplePage,
    NotableFiguresPage,
    ParticipantsPage,
    PersonMatch,
    PersonSearchResult,
)

__all__ = [
    "CountedItem",
    "CrimeTypesResult",
    "EmailDocument",
    "EmailParticipant",
    "EmailSearchResult",
    "EmailSummary",
    "EmailsByIdsResult",
    "IndexStats",
    "MentionedPeoplePage",
    "NotableFiguresPage",
    "ParticipantsPage",
    "PersonMatch",
    "PersonSearchResult",
]
