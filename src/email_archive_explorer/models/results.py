"""Result models returned by the explorer operations."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from email_archive_explorer.models.email_document import EmailDocument


class CountedItem(BaseModel):
    """A distinct value and the number of times it occurs across the archive."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Trimmed value in its original casing")
    count: int = Field(ge=1, description="Number of occurrences")


class PersonMatch(BaseModel):
    name: str
    mentions: int = 0
    participations: int = 0
    is_notable: bool = False


class _PageMeta(BaseModel):
    total: int
    offset: int
    returned: int
    has_more: bool


class MentionedPeoplePage(_PageMeta):
    people: list[CountedItem]


class ParticipantsPage(_PageMeta):
    participants: list[CountedItem]


class NotableFiguresPage(_PageMeta):
    notable_figures: list[CountedItem]


class CrimeTypesResult(BaseModel):
    total: int
    crime_types: list[CountedItem]


class PersonSearchResult(BaseModel):
    query: str
    total_matches: int
    returned: int
    matches: list[PersonMatch]


class EmailSummary(BaseModel):
    """Small projection of a record used in filtered email listings."""

    document_id: str
    summary: str


class EmailSearchResult(BaseModel):
    total_matches: int
    offset: int
    returned: int
    has_more: bool
    emails: list[EmailSummary]


class EmailsByIdsResult(BaseModel):
    emails: list[EmailDocument]


class IndexStats(BaseModel):
    """Sizes of the loaded dataset and of each derived index."""

    documents: int
    mentioned_people: int
    participants: int
    notable_figures: int
    crime_types: int
