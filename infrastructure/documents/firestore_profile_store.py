import logging
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import timezone
from typing import Callable, Optional

import requests

from use_cases.session_models import StoreResult, UserProfile

log = logging.getLogger(__name__)

FIRESTORE_URL = "https://firestore.googleapis.com/v1"
PROFILE_COLLECTION = "user"


def profile_document(profile: UserProfile) -> dict:
    """Firestore REST representation of a profile document."""
    created_at = profile.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    timestamp = created_at.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
    return {
        "fields": {
            "uid": {"stringValue": profile.user_id},
            "email": {"stringValue": profile.email},
            "createdAt": {"timestampValue": timestamp},
        }
    }


class FirestoreProfileStore:
    def __init__(
        self,
        project_id: str,
        token_provider: Callable[[], Optional[str]],
        executor: Optional[ThreadPoolExecutor] = None,
        timeout: float = 10,
    ):
        self.project_id = project_id
        self.token_provider = token_provider
        self.timeout = timeout
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="profiles")

    def document_url(self, user_id: str) -> str:
        return (
            f"{FIRESTORE_URL}/projects/{self.project_id}/databases/(default)"
            f"/documents/{PROFILE_COLLECTION}/{user_id}"
        )

    def create(self, profile: UserProfile) -> "Future[StoreResult]":
        return self._executor.submit(self._write, profile)

    def _write(self, profile: UserProfile) -> StoreResult:
        headers = {}
        token = self.token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            # PATCH without an update mask replaces the whole document.
            response = requests.patch(
                self.document_url(profile.user_id),
                headers=headers,
                json=profile_document(profile),
                timeout=self.timeout,
            )
        except Exception as e:
            log.error(f"❌ Network error writing profile {profile.user_id}: {e}")
            return StoreResult.failure(f"Network error: {e}")

        if response.status_code == 200:
            return StoreResult()
        return StoreResult.failure(f"Firestore error: HTTP {response.status_code} {response.text}")
