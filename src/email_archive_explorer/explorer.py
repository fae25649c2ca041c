"""Email archive explorer.

This module provides the query surface over a loaded archive: counted-list
retrieval, person search, filtered email listing and lookup by document ID.
An explorer is an immutable snapshot; reloading the dataset means building a
new explorer and swapping the reference.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

import pydantic
import structlog

from email_archive_explorer.config import Settings
from email_archive_explorer.dataset import load_documents, parse_documents
from email_archive_explorer.exceptions import ValidationError
from email_archive_explorer.index import DocumentStore, FrequencyIndexes
from email_archive_explorer.models import (
    CountedItem,
    CrimeTypesResult,
    EmailDocument,
    EmailsByIdsResult,
    EmailSearchResult,
    EmailSummary,
    IndexStats,
    MentionedPeoplePage,
    NotableFiguresPage,
    ParticipantsPage,
    PersonSearchResult,
)
from email_archive_explorer.pagination import Page, paginate, validate_limit, validate_offset
from email_archive_explorer.search import (
    EmailFilters,
    filter_emails,
    normalize_filter_values,
    search_person,
)

logger = structlog.get_logger()


class EmailExplorer:
    """Read-only query service over one loaded email archive.

    The record store and all frequency indexes are built eagerly in the
    constructor and never change afterwards, so a single instance can be
    shared between concurrent readers.
    """

    def __init__(
        self,
        documents: Sequence[EmailDocument],
        settings: Settings | None = None,
        strict: bool | None = None,
    ) -> None:
        """Build the store and indexes.

        Args:
            documents: Records in dataset order.
            settings: Application settings. If None, uses default settings.
            strict: Abort on duplicate document IDs. If None, uses
                settings.strict_loading.
        """
        from email_archive_explorer.config import get_settings

        self.settings = settings or get_settings()
        if strict is None:
            strict = self.settings.strict_loading

        self.store = DocumentStore.load(documents, strict=strict)
        self.indexes = FrequencyIndexes.build(self.store.documents)
        logger.info("indexes_ready", documents=len(self.store))

    @classmethod
    def from_records(
        cls,
        records: Iterable[EmailDocument | Mapping[str, Any]],
        settings: Settings | None = None,
        strict: bool = False,
    ) -> EmailExplorer:
        """Build an explorer from in-memory records.

        Args:
            records: EmailDocument instances or raw record dicts, in dataset
                order. Raw dicts are validated the same way as records read
                from the dataset file.
            settings: Application settings. If None, uses default settings.
            strict: Abort on malformed records or duplicate IDs.

        Raises:
            DatasetLoadError: If strict is set and a record is malformed or
                an ID is repeated.
        """
        documents: list[EmailDocument] = []
        for position, record in enumerate(records):
            if isinstance(record, EmailDocument):
                documents.append(record)
            else:
                raw = dict(record) if isinstance(record, Mapping) else record
                documents.extend(parse_documents([raw], strict=strict, first_position=position))
        return cls(documents, settings=settings, strict=strict)

    @classmethod
    def from_json_file(
        cls,
        path: Path | None = None,
        settings: Settings | None = None,
        strict: bool | None = None,
    ) -> EmailExplorer:
        """Load the dataset file and build an explorer over it.

        Args:
            path: Dataset JSON file. If None, uses settings.dataset_path.
            settings: Application settings. If None, uses default settings.
            strict: Abort on malformed records or duplicate IDs. If None,
                uses settings.strict_loading.

        Raises:
            DatasetLoadError: If the dataset cannot be read, or if strict
                loading is on and the dataset contains bad records.
        """
        from email_archive_explorer.config import get_settings

        settings = settings or get_settings()
        if strict is None:
            strict = settings.strict_loading
        documents = load_documents(path or settings.dataset_path, strict=strict)
        return cls(documents, settings=settings, strict=strict)

    # ------------------------------------------------------------------
    # Counted lists
    # ------------------------------------------------------------------

    def get_mentioned_people(self, limit: int | None = None, offset: int = 0) -> MentionedPeoplePage:
        """People mentioned in email bodies, most frequent first."""
        page = self._page_counted(self.indexes.mentioned_people, limit, offset)
        return MentionedPeoplePage(**_page_meta(page), people=page.items)

    def get_participants(self, limit: int | None = None, offset: int = 0) -> ParticipantsPage:
        """Email senders and recipients, most frequent first."""
        page = self._page_counted(self.indexes.participants, limit, offset)
        return ParticipantsPage(**_page_meta(page), participants=page.items)

    def get_notable_figures(self, limit: int | None = None, offset: int = 0) -> NotableFiguresPage:
        """Notable public figures, most frequent first."""
        page = self._page_counted(self.indexes.notable_figures, limit, offset)
        return NotableFiguresPage(**_page_meta(page), notable_figures=page.items)

    def get_crime_types(self) -> CrimeTypesResult:
        """All crime type tags, unpaginated."""
        crime_types = list(self.indexes.crime_types)
        return CrimeTypesResult(total=len(crime_types), crime_types=crime_types)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search_person(self, query: str, limit: int | None = None) -> PersonSearchResult:
        """Search for a person across mentions, participants and notable figures.

        Raises:
            ValidationError: If query is empty or limit is not >= 1.
        """
        if not isinstance(query, str) or not query:
            raise ValidationError("query", "must be a non-empty string")
        limit = validate_limit(self.settings.default_search_limit if limit is None else limit)

        return search_person(self.indexes, query, limit)

    def get_emails(
        self,
        filters: EmailFilters | Mapping[str, Any] | None = None,
        limit: int | None = None,
        offset: int = 0,
        **filter_fields: Any,
    ) -> EmailSearchResult:
        """Filter emails (AND across all values) and return one page of summaries.

        Filters can be passed as an EmailFilters, a mapping, or keyword
        arguments (participants, mentioned_people, notable_figures,
        crime_types). Each field takes a list of strings or a
        comma-separated string.

        Raises:
            ValidationError: On unknown filter fields, bad filter values, or
                an out-of-range limit/offset.
        """
        limit = validate_limit(self.settings.default_emails_limit if limit is None else limit)
        offset = validate_offset(offset)
        criteria = _build_filters(filters, filter_fields)

        matching = filter_emails(self.store, criteria)
        page = paginate(matching, limit, offset)

        logger.debug(
            "email_filter_completed",
            total_matches=page.total,
            returned=page.returned,
            offset=offset,
        )
        return EmailSearchResult(
            total_matches=page.total,
            offset=page.offset,
            returned=page.returned,
            has_more=page.has_more,
            emails=[EmailSummary(document_id=d.document_id, summary=d.summary) for d in page.items],
        )

    def get_emails_by_ids(self, ids: Sequence[str] | str) -> EmailsByIdsResult:
        """Resolve document IDs to full records, dropping unknown IDs.

        Args:
            ids: IDs as a list or a comma-separated string. Output follows
                input order.
        """
        wanted = normalize_filter_values(ids) or []
        if not isinstance(wanted, list) or not all(isinstance(i, str) for i in wanted):
            raise ValidationError("ids", f"must be a string or a list of strings, got {ids!r}")
        documents = [
            doc for doc in (self.store.get(i.strip()) for i in wanted) if doc is not None
        ]
        return EmailsByIdsResult(emails=documents)

    def stats(self) -> IndexStats:
        return IndexStats(
            documents=len(self.store),
            mentioned_people=len(self.indexes.mentioned_people),
            participants=len(self.indexes.participants),
            notable_figures=len(self.indexes.notable_figures),
            crime_types=len(self.indexes.crime_types),
        )

    def _page_counted(
        self, items: Sequence[CountedItem], limit: int | None, offset: int
    ) -> Page[CountedItem]:
        if limit is None:
            limit = self.settings.default_list_limit
        return paginate(items, limit, offset)


def _page_meta(page: Page[Any]) -> dict[str, Any]:
    return {
        "total": page.total,
        "offset": page.offset,
        "returned": page.returned,
        "has_more": page.has_more,
    }


def _build_filters(
    filters: EmailFilters | Mapping[str, Any] | None,
    extra: Mapping[str, Any],
) -> EmailFilters:
    if isinstance(filters, EmailFilters) and not extra:
        return filters

    if isinstance(filters, EmailFilters):
        fields: dict[str, Any] = filters.model_dump(exclude_none=True)
    else:
        fields = dict(filters or {})
    fields.update({k: v for k, v in extra.items() if v is not None})

    try:
        return EmailFilters.model_validate(fields)
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "filters"
        raise ValidationError(field, error["msg"]) from e
