"""Authentication form orchestration (application layer)."""

from typing import Literal

from infrastructure.observability import set_sentry_user
from use_cases.session_controller import SessionActionResult, SessionController
from use_cases.session_models import Credentials

AuthMode = Literal["sign_in", "sign_up"]

MISSING_FIELDS_MESSAGE = "Please enter both email and password."


def toggle_mode(mode: AuthMode) -> AuthMode:
    return "sign_in" if mode == "sign_up" else "sign_up"


def submit_credentials(
    controller: SessionController,
    mode: AuthMode,
    email: str,
    password: str,
) -> SessionActionResult:
    """Validate form input, then run sign-in or sign-up through the controller."""
    email = (email or "").strip()
    if not email or not password:
        return SessionActionResult(status="ERROR", screen=controller.current_screen(), message=MISSING_FIELDS_MESSAGE)

    credentials = Credentials(email=email, password=password)
    if mode == "sign_up":
        result = controller.sign_up(credentials)
    else:
        result = controller.sign_in(credentials)

    if result.ok:
        set_sentry_user(result.user_id)
    return result


def log_out(controller: SessionController) -> None:
    """Log out and stop tagging error reports with the previous account."""
    controller.log_out()
    set_sentry_user(None)
