import streamlit as st

import ui
from use_cases import screen_flow
from use_cases.session_controller import SessionController


def render_onboarding_screen(controller: SessionController):
    page = screen_flow.clamp_onboarding_page(st.session_state.onboarding_page)
    title, description = screen_flow.ONBOARDING_PAGES[page]

    st.header(title)
    st.write(description)
    ui.render_page_dots(page, len(screen_flow.ONBOARDING_PAGES))

    col_back, col_next = st.columns(2)
    if page > 0 and col_back.button("Back", key="onboarding_back"):
        st.session_state.onboarding_page = page - 1
        st.rerun()

    if screen_flow.is_last_onboarding_page(page):
        if col_next.button("Finish", key="onboarding_finish", type="primary"):
            controller.complete_onboarding()
            st.rerun()
    elif col_next.button("Next", key="onboarding_next", type="primary"):
        st.session_state.onboarding_page = page + 1
        st.rerun()
