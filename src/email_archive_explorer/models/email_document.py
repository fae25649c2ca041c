"""Annotated email record model.

Records are loaded once from the dataset and never mutated afterwards, so the
models are frozen and list fields are stored as tuples. Missing or null list
fields become empty, and null items inside a list are dropped, so the indexing
and filtering code never has to special-case them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LIST_FIELDS = (
    "participants",
    "attachment_names",
    "people_mentioned",
    "organizations",
    "locations",
    "phone_numbers",
    "urls",
    "notable_figures",
    "topics",
    "key_quotes",
    "crime_types",
    "victim_names",
)

_TEXT_FIELDS = (
    "email_text",
    "source_file",
    "date",
    "time",
    "subject",
    "primary_topic",
    "summary",
    "tone",
    "potential_crimes",
    "evidence_strength",
    "cover_up",
)


class EmailParticipant(BaseModel):
    """A named party attached to an email (sender or recipient)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(default="", description="Display name")
    email: str = Field(default="", description="Email address, may be empty")

    @field_validator("name", "email", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class EmailDocument(BaseModel):
    """One annotated email document with investigative metadata."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    document_id: str = Field(description="Unique document identifier")
    email_text: str = Field(default="", description="Full body text")
    source_file: str = Field(default="", description="File the email was extracted from")
    is_email: bool = Field(default=False, description="Whether the document is a genuine email")

    # First participant is the sender, the rest are recipients.
    participants: tuple[EmailParticipant, ...] = Field(default_factory=tuple)
    date: str = Field(default="", description="Date as written in the source")
    time: str = Field(default="", description="Time as written in the source")
    subject: str = Field(default="")
    has_attachments: bool = Field(default=False)
    attachment_names: tuple[str, ...] = Field(default_factory=tuple)

    people_mentioned: tuple[str, ...] = Field(default_factory=tuple)
    organizations: tuple[str, ...] = Field(default_factory=tuple)
    locations: tuple[str, ...] = Field(default_factory=tuple)
    phone_numbers: tuple[str, ...] = Field(default_factory=tuple)
    urls: tuple[str, ...] = Field(default_factory=tuple)
    notable_figures: tuple[str, ...] = Field(default_factory=tuple)

    primary_topic: str = Field(default="")
    topics: tuple[str, ...] = Field(default_factory=tuple)
    summary: str = Field(default="")
    key_quotes: tuple[str, ...] = Field(default_factory=tuple)
    tone: str = Field(default="")

    potential_crimes: str = Field(default="", description="Suspected crime description")
    evidence_strength: str = Field(default="", description="Evidence strength label")
    crime_types: tuple[str, ...] = Field(default_factory=tuple, description="Crime type tags")
    mentions_victims: bool = Field(default=False)
    victim_names: tuple[str, ...] = Field(default_factory=tuple)
    cover_up: str = Field(default="", description="Cover-up description")

    @field_validator("document_id")
    @classmethod
    def _require_document_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("document_id must not be blank")
        return v

    @field_validator(*_LIST_FIELDS, mode="before")
    @classmethod
    def _none_as_empty_list(cls, v: Any) -> Any:
        if v is None:
            return ()
        if isinstance(v, (list, tuple)):
            return tuple(item for item in v if item is not None)
        return v

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _none_as_empty_text(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("is_email", "has_attachments", "mentions_victims", mode="before")
    @classmethod
    def _none_as_false(cls, v: Any) -> Any:
        return False if v is None else v

    @property
    def sender(self) -> EmailParticipant | None:
        return self.participants[0] if self.participants else None

    @property
    def recipients(self) -> list[EmailParticipant]:
        return list(self.participants[1:])

    @property
    def participant_names(self) -> list[str]:
        """Names of all participants, with blank names removed."""
        return [p.name for p in self.participants if p.name and p.name.strip()]
