"""Application layer contracts for orchestrating high-level flows."""

from .session_models import (
    AuthError,
    AuthResult,
    Credentials,
    FlagStore,
    IdentityGateway,
    ProfileStore,
    Screen,
    SessionFlags,
    SessionState,
    StoreError,
    StoreResult,
    UserProfile,
    derive_screen,
    derive_state,
)
from .session_controller import ActionStatus, SessionActionResult, SessionController
from .screen_flow import HOME_TABS, ONBOARDING_PAGES, HomeTab, select_screen

__all__ = [
    "ActionStatus",
    "AuthError",
    "AuthResult",
    "Credentials",
    "FlagStore",
    "HOME_TABS",
    "HomeTab",
    "IdentityGateway",
    "ONBOARDING_PAGES",
    "ProfileStore",
    "Screen",
    "SessionActionResult",
    "SessionController",
    "SessionFlags",
    "SessionState",
    "StoreError",
    "StoreResult",
    "UserProfile",
    "derive_screen",
    "derive_state",
    "select_screen",
]
