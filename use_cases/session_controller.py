"""
Session/onboarding gating.

SessionController turns identity provider outcomes and explicit user actions
into SessionFlags mutations. The active screen is never stored: it is derived
from the flags on every query.

    LOGGED_OUT --sign_in ok--> ACTIVE
    LOGGED_OUT --sign_up ok--> ONBOARDING_PENDING
    ONBOARDING_PENDING --complete_onboarding--> ACTIVE
    ACTIVE / ONBOARDING_PENDING --log_out--> LOGGED_OUT
"""

import logging
import threading
from concurrent.futures import Future
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Literal, Optional

from use_cases.session_models import (
    AuthResult,
    Credentials,
    FlagStore,
    IdentityGateway,
    ProfileStore,
    Screen,
    SessionFlags,
    SessionState,
    StoreResult,
    UserProfile,
    derive_screen,
    derive_state,
)

log = logging.getLogger(__name__)

ActionStatus = Literal["OK", "ERROR"]
ScreenListener = Callable[[Screen, Screen], None]

SAVE_FAILED_MESSAGE = "Could not save your session on this device. Please try again."


@dataclass(frozen=True)
class SessionActionResult:
    """Result contract for sign-in/sign-up attempts."""

    status: ActionStatus
    screen: Screen
    message: Optional[str] = None
    user_id: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "OK"


class SessionController:
    def __init__(
        self,
        identity: IdentityGateway,
        profiles: ProfileStore,
        flag_store: FlagStore,
        flags: Optional[SessionFlags] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.identity = identity
        self.profiles = profiles
        self.flag_store = flag_store
        self._flags = flags if flags is not None else flag_store.load_flags()
        self._clock = clock
        self._lock = threading.RLock()
        self._listeners: List[ScreenListener] = []

    @property
    def flags(self) -> SessionFlags:
        return self._flags

    def current_state(self) -> SessionState:
        return derive_state(self._flags)

    def current_screen(self) -> Screen:
        return derive_screen(self._flags)

    def subscribe(self, listener: ScreenListener) -> Callable[[], None]:
        """Register a (previous, new) screen listener. Returns an unsubscribe callable."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def sign_in(self, credentials: Credentials) -> SessionActionResult:
        result = _await_auth(lambda: self.identity.sign_in(credentials.email, credentials.password))
        if not result.ok:
            return self._rejected("sign_in", result)

        # Returning users always skip onboarding, whatever the stored flag says.
        if not self._apply(SessionFlags(is_logged_in=True, has_completed_onboarding=True)):
            return self._not_saved()
        return SessionActionResult(status="OK", screen=self.current_screen(), user_id=result.user_id)

    def sign_up(self, credentials: Credentials) -> SessionActionResult:
        result = _await_auth(lambda: self.identity.sign_up(credentials.email, credentials.password))
        if not result.ok:
            return self._rejected("sign_up", result)

        profile = UserProfile(user_id=result.user_id, email=credentials.email, created_at=self._clock())
        self._submit_profile(profile)

        if not self._apply(SessionFlags(is_logged_in=True, has_completed_onboarding=False)):
            return self._not_saved()
        return SessionActionResult(status="OK", screen=self.current_screen(), user_id=result.user_id)

    def complete_onboarding(self) -> None:
        with self._lock:
            self._apply(self._flags.with_onboarding(True))

    def log_out(self) -> None:
        with self._lock:
            self._apply(self._flags.with_login(False))

    def _rejected(self, action: str, result: AuthResult) -> SessionActionResult:
        message = result.error.message if result.error is not None else "Unknown error"
        log.warning("%s rejected by identity provider: %s", action, message)
        return SessionActionResult(status="ERROR", screen=self.current_screen(), message=message)

    def _not_saved(self) -> SessionActionResult:
        return SessionActionResult(status="ERROR", screen=self.current_screen(), message=SAVE_FAILED_MESSAGE)

    def _submit_profile(self, profile: UserProfile) -> None:
        try:
            future = self.profiles.create(profile)
        except Exception as e:
            log.error("Profile write for %s could not be submitted: %s", profile.user_id, e)
            return

        def _on_done(done) -> None:
            try:
                outcome: StoreResult = done.result()
            except Exception as e:
                log.error("Profile write for %s crashed: %s", profile.user_id, e)
                return
            if outcome.ok:
                log.info("Profile document for %s written", profile.user_id)
            else:
                log.error("Error writing profile document for %s: %s", profile.user_id, outcome.error.message)

        future.add_done_callback(_on_done)

    def _apply(self, new_flags: SessionFlags) -> bool:
        """Persist, then publish. Returns False, leaving the flags as they were, when saving fails."""
        with self._lock:
            previous_screen = self.current_screen()
            try:
                self.flag_store.save_flags(new_flags)
            except Exception:
                log.exception("Saving session flags %s failed", new_flags)
                return False
            self._flags = new_flags
            new_screen = self.current_screen()
            if new_screen == previous_screen:
                return True
            log.info("Screen transition %s -> %s", previous_screen.value, new_screen.value)
            for listener in list(self._listeners):
                try:
                    listener(previous_screen, new_screen)
                except Exception:
                    log.exception("Screen listener failed for %s -> %s", previous_screen.value, new_screen.value)
            return True


def _await_auth(call: Callable[[], "Future[AuthResult]"]) -> AuthResult:
    """Block until the identity provider answers; a raising call or future becomes an AuthError."""
    try:
        return call().result()
    except Exception as e:
        log.error("Identity provider call failed: %s", e)
        return AuthResult.failure(str(e) or type(e).__name__)
