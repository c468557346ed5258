from pathlib import Path
from unittest.mock import patch

import pytest
from streamlit.testing.v1 import AppTest

from conftest import FakeIdentityGateway, FakeProfileStore, InMemoryFlagStore
from use_cases.session_controller import SessionController
from use_cases.session_models import AuthResult, SessionFlags

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def wiring():
    identity = FakeIdentityGateway()
    flag_store = InMemoryFlagStore()
    controller = SessionController(identity, FakeProfileStore(), flag_store)
    with patch("auth.init_flags_db"), patch("auth.get_session_controller", return_value=controller):
        yield identity, flag_store, controller


def _start():
    at = AppTest.from_file(APP_PATH, default_timeout=10)
    at.run()
    assert not at.exception
    return at


def test_fresh_install_walkthrough(wiring):
    identity, flag_store, _controller = wiring
    at = _start()
    assert at.title[0].value == "Welcome to PeronoAI!"

    at.button(key="get_started").click().run()
    assert at.title[0].value == "Sign In"

    at.button(key="auth_toggle").click().run()
    assert at.title[0].value == "Sign Up"

    at.text_input(key="auth_email").input("a@b.com")
    at.text_input(key="auth_password").input("pw")
    at.button(key="auth_submit").click().run()
    assert identity.calls == [("sign_up", "a@b.com", "pw")]
    assert at.header[0].value == "Welcome!"

    at.button(key="onboarding_next").click().run()
    at.button(key="onboarding_next").click().run()
    assert at.header[0].value == "Get Started"

    at.button(key="onboarding_finish").click().run()
    assert flag_store.flags == SessionFlags(True, True)

    at.button(key="log_out").click().run()
    assert at.title[0].value == "Welcome to PeronoAI!"
    assert flag_store.flags == SessionFlags(False, True)

    at.button(key="get_started").click().run()
    at.text_input(key="auth_email").input("a@b.com")
    at.text_input(key="auth_password").input("pw")
    at.button(key="auth_submit").click().run()
    assert flag_store.flags == SessionFlags(True, True)
    assert at.button(key="log_out") is not None
    assert not at.exception


def test_sign_in_error_is_displayed_and_cleared_by_toggle(wiring):
    identity, flag_store, _controller = wiring
    identity.sign_in_result = AuthResult.failure("INVALID_LOGIN_CREDENTIALS")
    at = _start()

    at.button(key="get_started").click().run()
    at.text_input(key="auth_email").input("a@b.com")
    at.text_input(key="auth_password").input("wrong")
    at.button(key="auth_submit").click().run()

    assert at.error[0].value == "INVALID_LOGIN_CREDENTIALS"
    assert flag_store.flags == SessionFlags(False, False)

    at.button(key="auth_toggle").click().run()
    assert len(at.error) == 0


def test_back_returns_to_welcome(wiring):
    at = _start()
    at.button(key="get_started").click().run()

    at.button(key="auth_back").click().run()

    assert at.title[0].value == "Welcome to PeronoAI!"


def test_missing_configuration_stops_app():
    import auth

    with patch("auth.init_flags_db"), patch(
        "auth.get_session_controller", side_effect=auth.ConfigurationError("`FIREBASE_API_KEY` is not set")
    ):
        at = AppTest.from_file(APP_PATH, default_timeout=10)
        at.run()

    assert "FIREBASE_API_KEY" in at.error[0].value
