"""In-memory store of annotated email records keyed by document ID."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

import structlog

from email_archive_explorer.exceptions import DuplicateDocumentError
from email_archive_explorer.models import EmailDocument

logger = structlog.get_logger()


class DocumentStore:
    """Read-only collection of email records with ID lookup.

    The store is built once and exposes no mutation operations. Iteration
    yields records in the order they were loaded.
    """

    def __init__(self, documents: Sequence[EmailDocument]) -> None:
        self._documents: tuple[EmailDocument, ...] = tuple(documents)
        self._by_id: dict[str, EmailDocument] = {d.document_id: d for d in self._documents}

    @classmethod
    def load(cls, documents: Iterable[EmailDocument], strict: bool = False) -> DocumentStore:
        """Build a store, rejecting duplicate document IDs.

        Args:
            documents: Records in dataset order.
            strict: Raise on a duplicate ID instead of skipping the later record.

        Raises:
            DuplicateDocumentError: If strict is set and two records share an ID.
        """

        seen: set[str] = set()
        unique: list[EmailDocument] = []
        for doc in documents:
            if doc.document_id in seen:
                if strict:
                    raise DuplicateDocumentError(doc.document_id)
                logger.warning("duplicate_document_skipped", document_id=doc.document_id)
                continue
            seen.add(doc.document_id)
            unique.append(doc)

        return cls(unique)

    def get(self, document_id: str) -> EmailDocument | None:
        """Return the record with this ID, or None when it is unknown."""
        return self._by_id.get(document_id)

    @property
    def documents(self) -> tuple[EmailDocument, ...]:
        return self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[EmailDocument]:
        return iter(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._by_id
