import streamlit as st

from use_cases.session_models import Screen
from utils import session_manager


def test_init_session_state():
    st.session_state.clear()
    session_manager.init_session_state()
    assert st.session_state.last_screen is None
    assert st.session_state.auth_requested is False
    assert st.session_state.auth_mode == "sign_in"
    assert st.session_state.auth_error is None
    assert st.session_state.onboarding_page == 0


def test_track_screen_resets_navigation_on_transition():
    st.session_state.clear()
    session_manager.init_session_state()
    assert session_manager.track_screen(Screen.WELCOME) is True

    session_manager.request_auth()
    st.session_state.auth_mode = "sign_up"
    assert session_manager.track_screen(Screen.WELCOME) is False
    assert st.session_state.auth_requested is True

    assert session_manager.track_screen(Screen.ONBOARDING) is True
    assert st.session_state.auth_requested is False
    assert st.session_state.auth_mode == "sign_in"
    assert st.session_state.last_screen == "onboarding"


def test_leave_auth_clears_error():
    st.session_state.clear()
    session_manager.init_session_state()
    session_manager.request_auth()
    st.session_state.auth_error = "EMAIL_EXISTS"

    session_manager.leave_auth()

    assert st.session_state.auth_requested is False
    assert st.session_state.auth_error is None
