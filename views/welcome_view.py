import streamlit as st

from utils import session_manager


def render_welcome_screen():
    st.title("Welcome to PeronoAI!")
    if st.button("Get Started", key="get_started", type="primary"):
        session_manager.request_auth()
        st.rerun()
