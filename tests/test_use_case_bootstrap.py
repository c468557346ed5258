from unittest.mock import MagicMock, patch

import streamlit as st

import auth
from use_cases import bootstrap
from use_cases.session_models import Screen


@patch("use_cases.bootstrap.auth.get_session_controller")
@patch("use_cases.bootstrap.auth.init_flags_db")
def test_run_startup_continue(mock_init_db, mock_get_controller) -> None:
    st.session_state.clear()
    controller = MagicMock()
    controller.current_screen.return_value = Screen.WELCOME
    mock_get_controller.return_value = controller

    result = bootstrap.run_startup()

    assert result.status == "CONTINUE"
    assert result.planned_steps == (
        "init_flags_db",
        "build_session_controller",
        "init_session_state",
        "track_screen",
    )
    mock_init_db.assert_called_once()
    assert st.session_state.last_screen == "welcome"


@patch("use_cases.bootstrap.auth.get_session_controller")
@patch("use_cases.bootstrap.auth.init_flags_db")
def test_run_startup_stops_on_missing_configuration(_mock_init_db, mock_get_controller) -> None:
    st.session_state.clear()
    mock_get_controller.side_effect = auth.ConfigurationError("`FIREBASE_API_KEY` is not set")

    result = bootstrap.run_startup()

    assert result.status == "STOP"
    assert "FIREBASE_API_KEY" in result.reason
    assert "init_session_state" not in result.planned_steps
