import streamlit as st

from use_cases.session_models import Screen

"""
SESSION STATE CONTRACT

Navigation-only state for one browser tab. The persisted login/onboarding
flags live in the flags database and are owned by SessionController.

Keys in st.session_state:

last_screen: str | None
    screen derived from the flags on the previous run
    default: None
    owner: session_manager

auth_requested: bool
    Welcome -> Auth navigation ("Get Started" pressed)
    default: False
    owner: welcome_view / auth_view

auth_mode: "sign_in" | "sign_up"
    which action the Auth screen submits
    default: "sign_in"
    owner: auth_view

auth_error: str | None
    provider message from the last failed attempt
    default: None
    owner: auth_view

onboarding_page: int
    current onboarding page index
    default: 0
    owner: onboarding_view
"""

NAVIGATION_DEFAULTS = {
    "auth_requested": False,
    "auth_mode": "sign_in",
    "auth_error": None,
    "onboarding_page": 0,
}


def init_session_state():
    if "last_screen" not in st.session_state:
        st.session_state.last_screen = None
    for key, default in NAVIGATION_DEFAULTS.items():
        if key not in st.session_state:
            st.session_state[key] = default


def reset_navigation():
    for key, default in NAVIGATION_DEFAULTS.items():
        st.session_state[key] = default


def track_screen(screen: Screen) -> bool:
    """Record the derived screen; reset navigation state when it changed. Returns True on change."""
    previous = st.session_state.get("last_screen")
    if previous == screen.value:
        return False
    if previous is not None:
        reset_navigation()
    st.session_state.last_screen = screen.value
    return True


def request_auth():
    st.session_state.auth_requested = True
    st.session_state.auth_error = None


def leave_auth():
    st.session_state.auth_requested = False
    st.session_state.auth_error = None
