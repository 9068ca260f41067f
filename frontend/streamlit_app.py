import streamlit as st
from dataclasses import dataclass
from typing import Callable, List, Dict
from modules.general import display_home_page
from modules.converter import display_mybatis_converter_page

# --- Page Configuration & Session State Initialization ---
st.set_page_config(layout="wide", page_title="Developer Tools - MyBatis Log Converter")

# Hide the (irrelevant) Streamlit "Deploy" button in local runs
hide_streamlit_style = """
            <style>
            /* Hide deploy button from toolbar if present */
            div[data-testid="stToolbar"] button[title*="Deploy"] {
                display: none !important;
            }
            </style>
            """
st.markdown(hide_streamlit_style, unsafe_allow_html=True)

if 'current_page' not in st.session_state:
    st.session_state.current_page = "Home"
if 'mybatis_result' not in st.session_state: # To store results from mybatis/convert
    st.session_state.mybatis_result = None
if 'mybatis_log_input' not in st.session_state:
    st.session_state.mybatis_log_input = ""

@dataclass
class Page:
    title: str
    render: Callable[[], None]
    category: str  # e.g. "Database", "General"

# Registry of available pages – add/remove entries as needed
PAGES: List[Page] = [
    Page("Home", display_home_page, "General"),
    Page("MyBatis Log Converter", display_mybatis_converter_page, "Database"),
]

# Utility: map title -> Page for quick lookup
_PAGE_MAP: Dict[str, Page] = {p.title: p for p in PAGES}

def _render_sidebar():
    """Render sidebar navigation dynamically from the PAGES registry."""
    pages_by_cat: Dict[str, List[Page]] = {}
    for page in PAGES:
        if page.category != "General":
            pages_by_cat.setdefault(page.category, []).append(page)

    # Home shortcut
    if st.sidebar.button("🏠 Home", key="nav_btn_home_main", type="primary" if st.session_state.current_page == "Home" else "secondary", use_container_width=True):
        st.session_state.current_page = "Home"
        st.rerun()

    CATEGORY_ICONS = {
        "Database": "🗄️ Database Tools",
    }

    for category, pages in pages_by_cat.items():
        header = CATEGORY_ICONS.get(category, category)
        st.sidebar.markdown(f"**{header}**")
        for page in pages:
            btn_key = f"nav_btn_{page.title.replace(' ', '_').lower()}"
            btn_type = "primary" if st.session_state.current_page == page.title else "secondary"
            if st.sidebar.button(page.title, key=btn_key, type=btn_type, use_container_width=True):
                st.session_state.current_page = page.title
                st.rerun()

# ------------------------------------------------------------------
# Main application dispatch
# ------------------------------------------------------------------

if st.session_state.current_page not in _PAGE_MAP:
    st.session_state.current_page = "Home"

_render_sidebar()

# Finally render the chosen page
_PAGE_MAP[st.session_state.current_page].render()
