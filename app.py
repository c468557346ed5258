import streamlit as st

from infrastructure.observability import setup_observability
setup_observability()

import auth
import ui
from use_cases import bootstrap, screen_flow
from use_cases.session_models import Screen
from views import auth_view, home_view, onboarding_view, welcome_view

# --- PAGE SETUP ---
st.set_page_config(page_title="PeronoAI", page_icon="🎓", layout="centered")
ui.setup_style()

# --- STARTUP ORCHESTRATION ---
startup_result = bootstrap.run_startup()
if startup_result.status == "STOP":
    st.error(f"🚨 Configuration error: {startup_result.reason}")
    st.stop()

controller = auth.get_session_controller()

# --- SCREEN GATING ---
# Flags decide Welcome / Onboarding / Home; Auth only via explicit navigation.
screen = screen_flow.select_screen(controller.current_screen(), st.session_state.auth_requested)

if screen == Screen.WELCOME:
    welcome_view.render_welcome_screen()
elif screen == Screen.AUTH:
    auth_view.render_auth_screen(controller)
elif screen == Screen.ONBOARDING:
    onboarding_view.render_onboarding_screen(controller)
else:
    home_view.render_home_screen(controller)
