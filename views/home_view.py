import streamlit as st

import ui
from use_cases import auth_flow, screen_flow
from use_cases.session_controller import SessionController


def render_home_screen(controller: SessionController):
    tabs = st.tabs([tab.label for tab in screen_flow.HOME_TABS])
    for container, tab in zip(tabs, screen_flow.HOME_TABS):
        with container:
            ui.render_hero(tab.heading, tab.blurb, tab.key)
            if tab.key == "profile":
                if st.button("Log Out", key="log_out"):
                    auth_flow.log_out(controller)
                    st.rerun()
