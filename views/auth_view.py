import streamlit as st

from use_cases import auth_flow
from use_cases.session_controller import SessionController
from utils import session_manager


def render_auth_screen(controller: SessionController):
    is_signing_up = st.session_state.auth_mode == "sign_up"
    action_label = "Sign Up" if is_signing_up else "Sign In"

    st.title(action_label)

    email = st.text_input("Email", key="auth_email")
    password = st.text_input("Password", type="password", key="auth_password")

    if st.session_state.auth_error:
        st.error(st.session_state.auth_error)

    if st.button(action_label, key="auth_submit", type="primary"):
        with st.spinner("Contacting identity provider..."):
            result = auth_flow.submit_credentials(controller, st.session_state.auth_mode, email, password)
        if result.ok:
            st.session_state.auth_error = None
        else:
            st.session_state.auth_error = result.message
        st.rerun()

    toggle_label = "Already have an account? Sign In" if is_signing_up else "Don't have an account? Sign Up"
    if st.button(toggle_label, key="auth_toggle", type="tertiary"):
        st.session_state.auth_mode = auth_flow.toggle_mode(st.session_state.auth_mode)
        st.session_state.auth_error = None
        st.rerun()

    if st.button("← Back", key="auth_back", type="secondary"):
        session_manager.leave_auth()
        st.rerun()
