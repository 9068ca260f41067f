import streamlit as st
from utils import list_tools_api

__all__ = ["display_home_page"]


def display_home_page():
    st.title("Developer Tools")
    st.markdown(
        """
        A small collection of developer utilities served by the FastAPI backend.

        Use the sidebar to open a tool.
        """
    )

    tools = list_tools_api()
    if not tools:
        st.warning("Could not load the tool list from the API. Is the backend running?")
        return

    st.subheader("Available Tools")
    for tool in tools:
        keywords = ", ".join(tool.get("keywords", []))
        st.markdown(f"**{tool.get('description', tool.get('name'))}** (`{tool.get('path')}`)  \n{keywords}")
