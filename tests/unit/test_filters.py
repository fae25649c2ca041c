"""Unit tests for email filtering."""

from __future__ import annotations

import pytest

from email_archive_explorer.search import EmailFilters, filter_emails, normalize_filter_values


def _ids(docs) -> list[str]:
    return [d.document_id for d in docs]


class TestNormalizeFilterValues:
    """Test suite for filter value normalization."""

    def test_comma_separated_string_is_split(self) -> None:
        assert normalize_filter_values("Jane Doe, John Smith ,") == ["Jane Doe", "John Smith"]

    def test_single_string_becomes_one_element_list(self) -> None:
        assert normalize_filter_values("fraud") == ["fraud"]

    def test_list_kept_without_empty_strings(self) -> None:
        assert normalize_filter_values(["Jane Doe", ""]) == ["Jane Doe"]

    def test_whitespace_only_list_items_dropped(self) -> None:
        assert normalize_filter_values(["  ", "fraud", "\t"]) == ["fraud"]
        assert EmailFilters(crime_types=["  "]).is_empty()

    def test_none_passes_through(self) -> None:
        assert normalize_filter_values(None) is None

    def test_model_applies_normalization(self) -> None:
        filters = EmailFilters(crime_types="financial fraud, obstruction")

        assert filters.crime_types == ["financial fraud", "obstruction"]

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(Exception):  # Pydantic ValidationError
            EmailFilters(senders=["Jane Doe"])


class TestFilterEmails:
    """Test suite for filter_emails."""

    def test_empty_filters_return_everything_in_order(self, sample_documents) -> None:
        result = filter_emails(sample_documents, EmailFilters())

        assert result == list(sample_documents)
        assert EmailFilters().is_empty()

    def test_value_present_in_every_record(self, sample_documents) -> None:
        result = filter_emails(sample_documents, EmailFilters(participants=["jeffrey epstein"]))

        assert _ids(result) == ["DOC-001", "DOC-002", "DOC-003"]

    def test_value_absent_from_every_record(self, sample_documents) -> None:
        result = filter_emails(sample_documents, EmailFilters(mentioned_people=["Nobody"]))

        assert result == []

    def test_all_values_within_a_field_required(self, sample_documents) -> None:
        filters = EmailFilters(participants=["Jeffrey Epstein", "Darren Indyke"])

        assert _ids(filter_emails(sample_documents, filters)) == ["DOC-002"]

    def test_fields_combined_with_and(self, sample_documents) -> None:
        filters = EmailFilters(
            participants=["Ghislaine Maxwell"],
            crime_types=["financial fraud"],
        )

        assert _ids(filter_emails(sample_documents, filters)) == ["DOC-003"]

    def test_matching_ignores_case_and_padding(self, sample_documents) -> None:
        filters = EmailFilters(mentioned_people=["LARRY SUMMERS"])

        assert _ids(filter_emails(sample_documents, filters)) == ["DOC-001", "DOC-002", "DOC-003"]

    def test_notable_figures_and_comma_separated_crimes(self, sample_documents) -> None:
        assert _ids(
            filter_emails(sample_documents, EmailFilters(notable_figures="Bill Clinton"))
        ) == ["DOC-003"]
        assert _ids(
            filter_emails(sample_documents, EmailFilters(crime_types="Financial Fraud,obstruction"))
        ) == ["DOC-002"]

    def test_input_not_mutated(self, sample_documents) -> None:
        original = list(sample_documents)

        filter_emails(sample_documents, EmailFilters(crime_types=["obstruction"]))

        assert sample_documents == original
