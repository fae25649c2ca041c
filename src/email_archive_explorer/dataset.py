"""Helpers for loading the annotated email dataset into internal models."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pydantic
import structlog

from email_archive_explorer.exceptions import DatasetLoadError
from email_archive_explorer.models import EmailDocument

logger = structlog.get_logger()


def _raw_records(payload: Any, path: Path) -> list[Any]:
    if isinstance(payload, list):
        return payload
    # Some exports wrap the array: {"emails": [...]}
    if isinstance(payload, dict) and isinstance(payload.get("emails"), list):
        return payload["emails"]
    raise DatasetLoadError(f"{path}: expected a JSON array of email records")


def parse_documents(
    raw_records: list[Any],
    strict: bool = False,
    first_position: int = 0,
) -> list[EmailDocument]:
    """Validate raw record dicts into EmailDocument models.

    Args:
        raw_records: Decoded JSON objects, one per email.
        strict: Raise on the first malformed record instead of skipping it.
        first_position: Dataset position of the first record, used in errors.

    Returns:
        Valid records, in input order.

    Raises:
        DatasetLoadError: If strict is set and a record is malformed.
    """

    documents: list[EmailDocument] = []
    for position, raw in enumerate(raw_records, start=first_position):
        try:
            if not isinstance(raw, dict):
                raise TypeError(f"record is {type(raw).__name__}, not an object")
            documents.append(EmailDocument.model_validate(raw))
        except (pydantic.ValidationError, TypeError) as e:
            document_id = raw.get("document_id") if isinstance(raw, dict) else None
            if strict:
                raise DatasetLoadError(
                    f"Malformed record at position {position} ({document_id!r}): {e}"
                ) from e
            logger.warning(
                "malformed_document_skipped",
                position=position,
                document_id=document_id,
                error=str(e),
            )
    return documents


def load_documents(path: Path, strict: bool = False) -> list[EmailDocument]:
    """Read and validate the dataset JSON file.

    Args:
        path: Path to a UTF-8 JSON file holding an array of records.
        strict: Abort on malformed records instead of skipping them.

    Returns:
        The validated records in file order.

    Raises:
        DatasetLoadError: If the file is missing, is not valid JSON, or has
            an unexpected top-level shape.
    """

    try:
        with path.open(encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as e:
        raise DatasetLoadError(f"Dataset file not found: {path}") from e
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DatasetLoadError(f"Unable to read dataset {path}: {e}") from e

    raw_records = _raw_records(payload, path)
    documents = parse_documents(raw_records, strict=strict)

    logger.info(
        "dataset_loaded",
        path=str(path),
        loaded=len(documents),
        skipped=len(raw_records) - len(documents),
    )
    return documents
