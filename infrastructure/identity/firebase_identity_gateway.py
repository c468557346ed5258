import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

import requests

from use_cases.session_models import AuthResult

log = logging.getLogger(__name__)

IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com/v1/accounts"


class FirebaseIdentityGateway:
    """Email/password accounts via the Identity Toolkit REST API."""

    def __init__(self, api_key: str, executor: Optional[ThreadPoolExecutor] = None, timeout: float = 10):
        self.api_key = api_key
        self.timeout = timeout
        self._executor = executor or ThreadPoolExecutor(max_workers=2, thread_name_prefix="identity")
        self._token_lock = threading.Lock()
        self._id_token: Optional[str] = None

    def sign_in(self, email: str, password: str) -> "Future[AuthResult]":
        return self._executor.submit(self._call, "signInWithPassword", email, password)

    def sign_up(self, email: str, password: str) -> "Future[AuthResult]":
        return self._executor.submit(self._call, "signUp", email, password)

    def current_id_token(self) -> Optional[str]:
        with self._token_lock:
            return self._id_token

    def _call(self, endpoint: str, email: str, password: str) -> AuthResult:
        payload = {"email": email, "password": password, "returnSecureToken": True}
        try:
            response = requests.post(
                f"{IDENTITY_TOOLKIT_URL}:{endpoint}",
                params={"key": self.api_key},
                json=payload,
                timeout=self.timeout,
            )
        except Exception as e:
            log.error(f"❌ Network error calling identity provider ({endpoint}): {e}")
            return AuthResult.failure(f"Network error: {e}")

        if response.status_code != 200:
            return AuthResult.failure(_error_message(response))

        try:
            body = response.json()
        except ValueError:
            log.error(f"❌ Identity provider returned a non-JSON body for {endpoint}")
            return AuthResult.failure("Identity provider returned an unreadable response")
        if not isinstance(body, dict):
            return AuthResult.failure("Identity provider returned an unreadable response")

        user_id = body.get("localId")
        if not user_id:
            return AuthResult.failure("Identity provider returned no user id")

        with self._token_lock:
            self._id_token = body.get("idToken")
        log.info(f"✅ Identity provider accepted {endpoint} for {user_id}")
        return AuthResult.success(user_id)


def _error_message(response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    error = body.get("error") if isinstance(body, dict) else None
    message = error.get("message") if isinstance(error, dict) else None
    return message or f"Identity provider error: HTTP {response.status_code}"
