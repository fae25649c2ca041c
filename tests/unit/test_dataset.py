"""Unit tests for dataset loading."""

from __future__ import annotations

import json

import pytest

from email_archive_explorer.dataset import load_documents, parse_documents
from email_archive_explorer.exceptions import DatasetLoadError


def test_load_documents_reads_array(dataset_file) -> None:
    documents = load_documents(dataset_file)

    assert [d.document_id for d in documents] == ["DOC-001", "DOC-002", "DOC-003"]


def test_load_documents_accepts_wrapped_array(tmp_path, two_record_data) -> None:
    path = tmp_path / "wrapped.json"
    path.write_text(json.dumps({"emails": two_record_data}), encoding="utf-8")

    documents = load_documents(path)

    assert [d.document_id for d in documents] == ["R1", "R2"]


def test_malformed_records_are_skipped(two_record_data) -> None:
    raw = [two_record_data[0], {"summary": "no id"}, "not an object", two_record_data[1]]

    documents = parse_documents(raw)

    assert [d.document_id for d in documents] == ["R1", "R2"]


def test_null_list_items_keep_the_record(two_record_data) -> None:
    raw = dict(two_record_data[0], people_mentioned=[None, "John Smith"])

    documents = parse_documents([raw], strict=True)

    assert len(documents) == 1
    assert documents[0].people_mentioned == ("John Smith",)


def test_malformed_record_aborts_in_strict_mode(two_record_data) -> None:
    raw = [two_record_data[0], {"document_id": "bad", "participants": "Jane"}]

    with pytest.raises(DatasetLoadError, match="position 1"):
        parse_documents(raw, strict=True)


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(DatasetLoadError, match="not found"):
        load_documents(tmp_path / "missing.json")


def test_invalid_json_raises(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(DatasetLoadError):
        load_documents(path)


def test_unexpected_top_level_raises(tmp_path) -> None:
    path = tmp_path / "object.json"
    path.write_text(json.dumps({"records": []}), encoding="utf-8")

    with pytest.raises(DatasetLoadError, match="JSON array"):
        load_documents(path)
