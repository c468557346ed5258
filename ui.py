import streamlit as st

TAB_GRADIENTS = {
    "home": ("#3b82f6", "#8b5cf6"),
    "lessons": ("#f97316", "#ef4444"),
    "profile": ("#22c55e", "#14b8a6"),
}


def setup_style():
    st.markdown("""
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Manrope:wght@400;600;700;800&display=swap');

        :root {
            --text-main: #f3f8ff;
            --text-soft: rgba(234, 244, 255, 0.78);
            --ease-fluid: cubic-bezier(0.22, 1, 0.36, 1);
            --anim-mid: 340ms;
        }

        html, body, .stApp {
            font-family: 'Manrope', sans-serif;
        }

        .main .block-container {
            max-width: 480px;
            padding-top: 2rem;
            animation: pageSlideIn var(--anim-mid) var(--ease-fluid);
        }

        @keyframes pageSlideIn {
            from { opacity: 0; transform: translate3d(12px, 0, 0); }
            to { opacity: 1; transform: translate3d(0, 0, 0); }
        }

        /* full-width rounded action buttons */
        .stButton > button {
            width: 100%;
            border-radius: 10px;
            font-weight: 700;
            transition: opacity var(--anim-mid) var(--ease-fluid);
        }
        .stButton > button:active { opacity: 0.7; }

        .pa-hero {
            border-radius: 18px;
            padding: 2.4rem 1.6rem;
            color: var(--text-main);
            text-align: center;
        }
        .pa-hero h2 { font-size: 2.1rem; font-weight: 800; margin-bottom: 0.6rem; }
        .pa-hero p { color: var(--text-soft); font-size: 1.05rem; }

        .pa-dots { text-align: center; letter-spacing: 0.4rem; font-size: 0.9rem; opacity: 0.8; }
    </style>
    """, unsafe_allow_html=True)


def render_hero(heading: str, blurb: str, tab_key: str = "home"):
    start, end = TAB_GRADIENTS.get(tab_key, TAB_GRADIENTS["home"])
    st.markdown(
        f"""
        <div class="pa-hero" style="background: linear-gradient(135deg, {start}, {end});">
          <h2>{heading}</h2>
          <p>{blurb}</p>
        </div>
        """,
        unsafe_allow_html=True
    )


def render_page_dots(current: int, total: int):
    dots = " ".join("●" if i == current else "○" for i in range(total))
    st.markdown(f"<div class='pa-dots'>{dots}</div>", unsafe_allow_html=True)
