"""Pytest configuration and shared fixtures."""

import json

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging_and_settings():
    """Keep structlog configuration and cached settings from leaking between tests."""
    from email_archive_explorer.config import get_settings

    get_settings.cache_clear()
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()


@pytest.fixture
def mock_settings():
    """Provide mock settings for testing."""
    from email_archive_explorer.config import Settings

    return Settings(
        log_level="DEBUG",
        debug=True,
    )


@pytest.fixture
def two_record_data() -> list[dict]:
    """The two-record archive used to check cross-index behaviour."""
    return [
        {
            "document_id": "R1",
            "participants": [{"name": "Jane Doe", "email": ""}],
            "people_mentioned": ["John Smith"],
            "notable_figures": [],
            "crime_types": ["fraud"],
            "summary": "Jane writes about John.",
        },
        {
            "document_id": "R2",
            "participants": [{"name": "John Smith", "email": "john@example.com"}],
            "people_mentioned": [],
            "notable_figures": ["John Smith"],
            "crime_types": [],
            "summary": "John writes.",
        },
    ]


@pytest.fixture
def sample_email_data() -> list[dict]:
    """Provide a small but varied archive."""
    return [
        {
            "document_id": "DOC-001",
            "email_text": "Meeting moved to Friday. Ghislaine will join.",
            "source_file": "HOUSE_OVERSIGHT_001.txt",
            "is_email": True,
            "participants": [
                {"name": "Jeffrey Epstein", "email": "jeevacation@gmail.com"},
                {"name": "Ghislaine Maxwell", "email": "gmax@example.com"},
            ],
            "date": "2011-03-04",
            "time": "09:15",
            "subject": "Friday",
            "has_attachments": False,
            "attachment_names": [],
            "people_mentioned": ["Ghislaine Maxwell", "Larry Summers"],
            "organizations": ["Harvard"],
            "locations": ["New York"],
            "phone_numbers": [],
            "urls": [],
            "notable_figures": ["Larry Summers"],
            "primary_topic": "scheduling",
            "topics": ["scheduling"],
            "summary": "Scheduling a Friday meeting.",
            "key_quotes": ["Meeting moved to Friday."],
            "tone": "casual",
            "potential_crimes": "",
            "evidence_strength": "none",
            "crime_types": [],
            "mentions_victims": False,
            "victim_names": [],
            "cover_up": "",
        },
        {
            "document_id": "DOC-002",
            "email_text": "Wire the funds before the audit.",
            "is_email": True,
            "participants": [
                {"name": "Jeffrey Epstein", "email": "jeevacation@gmail.com"},
                {"name": "Darren Indyke", "email": None},
            ],
            "subject": "Funds",
            "people_mentioned": ["  Larry Summers  ", "Darren Indyke"],
            "notable_figures": ["Larry Summers"],
            "summary": "Request to move funds before an audit.",
            "crime_types": ["financial fraud", "obstruction"],
            "evidence_strength": "moderate",
        },
        {
            "document_id": "DOC-003",
            "email_text": "Flight manifest attached.",
            "is_email": True,
            "participants": [
                {"name": "Ghislaine Maxwell", "email": "gmax@example.com"},
                {"name": "Jeffrey Epstein", "email": "jeevacation@gmail.com"},
                {"name": "", "email": "pilot@example.com"},
            ],
            "has_attachments": True,
            "attachment_names": ["manifest.pdf"],
            "people_mentioned": ["larry summers", "Bill Clinton", "   "],
            "notable_figures": ["Bill Clinton"],
            "summary": "Flight manifest shared.",
            "crime_types": ["Financial Fraud"],
            "topics": None,
        },
    ]


@pytest.fixture
def sample_documents(sample_email_data):
    from email_archive_explorer.models import EmailDocument

    return [EmailDocument.model_validate(raw) for raw in sample_email_data]


@pytest.fixture
def explorer(sample_documents, mock_settings):
    from email_archive_explorer.explorer import EmailExplorer

    return EmailExplorer(sample_documents, settings=mock_settings)


@pytest.fixture
def two_record_explorer(two_record_data, mock_settings):
    from email_archive_explorer.explorer import EmailExplorer
    from email_archive_explorer.models import EmailDocument

    documents = [EmailDocument.model_validate(raw) for raw in two_record_data]
    return EmailExplorer(documents, settings=mock_settings)


@pytest.fixture
def dataset_file(tmp_path, sample_email_data):
    """Write the sample archive to a JSON file and return its path."""
    path = tmp_path / "emails.json"
    path.write_text(json.dumps(sample_email_data), encoding="utf-8")
    return path
