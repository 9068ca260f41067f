import streamlit as st

from utils import (
    mybatis_convert_api,
    DISPLAY_MODES,
    SQL_DIALECTS,
    SAMPLE_MYBATIS_LOG,
)

__all__ = ["display_mybatis_converter_page"]


def _load_sample_log():
    st.session_state.mybatis_log_input = SAMPLE_MYBATIS_LOG


def display_mybatis_converter_page():
    st.header("MyBatis Log Converter")
    st.caption(
        "Paste MyBatis debug output (`Preparing:` / `Parameters:` lines). "
        "Parameters are substituted into the placeholders for display only; "
        "the result is not guaranteed to be executable SQL."
    )

    st.text_area("MyBatis log", height=260, key="mybatis_log_input")
    st.button("Load sample log", key="mybatis_sample_btn", on_click=_load_sample_log)

    col_mode, col_dialect = st.columns(2)
    with col_mode:
        display_mode = st.selectbox("Display mode", DISPLAY_MODES, key="mybatis_display_mode")
    with col_dialect:
        dialect = st.selectbox(
            "Dialect (pretty mode)", SQL_DIALECTS, key="mybatis_dialect",
            disabled=display_mode != "pretty",
        )

    if st.button("Convert", key="mybatis_convert_btn", type="primary"):
        log_text = st.session_state.get("mybatis_log_input", "")
        with st.spinner("Converting…"):
            st.session_state.mybatis_result = mybatis_convert_api(
                log_text,
                display_mode=display_mode,
                dialect=dialect if display_mode == "pretty" else None,
            )

    resp = st.session_state.get("mybatis_result")
    if not resp:
        return

    if resp.get("success"):
        st.success(f"Converted {resp.get('statement_count', 0)} statement(s) in {resp.get('duration_s', 0)} s.")
        st.code(resp["sql"], language="sql")
        st.download_button(
            "Download .sql",
            data=resp["sql"],
            file_name="mybatis_statements.sql",
            mime="text/plain",
            key="mybatis_download_btn",
        )
    elif resp.get("error"):
        st.error(resp["error"])
    else:
        st.info("Paste a MyBatis log to convert.")
