"""Session DTOs and collaborator contracts shared across application layers."""

from concurrent.futures import Future
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Optional, Protocol


class Screen(str, Enum):
    WELCOME = "welcome"
    AUTH = "auth"
    ONBOARDING = "onboarding"
    HOME = "home"


class SessionState(str, Enum):
    LOGGED_OUT = "logged_out"
    ONBOARDING_PENDING = "onboarding_pending"
    ACTIVE = "active"


STATE_SCREENS = {
    SessionState.LOGGED_OUT: Screen.WELCOME,
    SessionState.ONBOARDING_PENDING: Screen.ONBOARDING,
    SessionState.ACTIVE: Screen.HOME,
}


@dataclass(frozen=True)
class SessionFlags:
    """The two persisted booleans that gate every screen."""

    is_logged_in: bool = False
    has_completed_onboarding: bool = False

    def with_login(self, is_logged_in: bool) -> "SessionFlags":
        return replace(self, is_logged_in=is_logged_in)

    def with_onboarding(self, completed: bool) -> "SessionFlags":
        return replace(self, has_completed_onboarding=completed)


@dataclass(frozen=True)
class Credentials:
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class UserProfile:
    user_id: str
    email: str
    created_at: datetime


class AuthError(Exception):
    """Credential rejection, duplicate account or unreachable provider."""

    @property
    def message(self) -> str:
        return str(self)


class StoreError(Exception):
    """Profile write failure after a successful sign-up."""

    @property
    def message(self) -> str:
        return str(self)


@dataclass(frozen=True)
class AuthResult:
    """Outcome of an identity provider call."""

    user_id: Optional[str] = None
    error: Optional[AuthError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.user_id is not None

    @classmethod
    def success(cls, user_id: str) -> "AuthResult":
        return cls(user_id=user_id)

    @classmethod
    def failure(cls, message: str) -> "AuthResult":
        return cls(error=AuthError(message))


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a document store write."""

    error: Optional[StoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, message: str) -> "StoreResult":
        return cls(error=StoreError(message))


class IdentityGateway(Protocol):
    def sign_in(self, email: str, password: str) -> "Future[AuthResult]": ...

    def sign_up(self, email: str, password: str) -> "Future[AuthResult]": ...


class ProfileStore(Protocol):
    def create(self, profile: UserProfile) -> "Future[StoreResult]": ...


class FlagStore(Protocol):
    def load_flags(self) -> SessionFlags: ...

    def save_flags(self, flags: SessionFlags) -> None: ...


def derive_state(flags: SessionFlags) -> SessionState:
    if not flags.is_logged_in:
        return SessionState.LOGGED_OUT
    if not flags.has_completed_onboarding:
        return SessionState.ONBOARDING_PENDING
    return SessionState.ACTIVE


def derive_screen(flags: SessionFlags) -> Screen:
    return STATE_SCREENS[derive_state(flags)]
