from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest

from infrastructure.documents.firestore_profile_store import FirestoreProfileStore, profile_document
from use_cases.session_models import UserProfile

PROFILE = UserProfile(
    user_id="uid-1",
    email="a@b.com",
    created_at=datetime(2025, 2, 9, 12, 30, 0, tzinfo=timezone.utc),
)


@pytest.fixture
def store():
    return FirestoreProfileStore("perono-test", token_provider=lambda: "id-token-1")


def test_profile_document_fields():
    doc = profile_document(PROFILE)
    assert doc == {
        "fields": {
            "uid": {"stringValue": "uid-1"},
            "email": {"stringValue": "a@b.com"},
            "createdAt": {"timestampValue": "2025-02-09T12:30:00.000000Z"},
        }
    }


@patch("requests.patch")
def test_create_writes_user_document(mock_patch, store):
    mock_resp = MagicMock()
    mock_resp.status_code = 200
    mock_patch.return_value = mock_resp

    result = store.create(PROFILE).result()

    assert result.ok is True
    args, kwargs = mock_patch.call_args
    assert args[0] == (
        "https://firestore.googleapis.com/v1/projects/perono-test/databases/(default)/documents/user/uid-1"
    )
    assert kwargs["headers"] == {"Authorization": "Bearer id-token-1"}
    assert kwargs["json"]["fields"]["uid"] == {"stringValue": "uid-1"}


@patch("requests.patch")
def test_create_reports_http_failure(mock_patch, store):
    mock_resp = MagicMock()
    mock_resp.status_code = 403
    mock_resp.text = "PERMISSION_DENIED"
    mock_patch.return_value = mock_resp

    result = store.create(PROFILE).result()

    assert result.ok is False
    assert "PERMISSION_DENIED" in result.error.message


@patch("requests.patch")
def test_create_reports_network_failure(mock_patch, store):
    mock_patch.side_effect = Exception("timeout")

    result = store.create(PROFILE).result()

    assert result.ok is False
    assert "timeout" in result.error.message
