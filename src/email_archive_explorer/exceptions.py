"""Custom exceptions for Email Archive Explorer."""

from __future__ import annotations


class EmailExplorerError(Exception):
    """Base exception for all Email Archive Explorer errors."""


class ConfigurationError(EmailExplorerError):
    """Exception raised for configuration related errors."""


class DatasetLoadError(EmailExplorerError):
    """Exception raised when the email dataset cannot be loaded."""


class DuplicateDocumentError(DatasetLoadError):
    """Exception raised when two records share a document ID."""

    def __init__(self, document_id: str) -> None:
        super().__init__(f"Duplicate document_id in dataset: {document_id!r}")
        self.document_id = document_id


class ValidationError(EmailExplorerError):
    """Exception raised when query parameters fail validation."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Invalid {field}: {message}")
        self.field = field
        self.message = message
