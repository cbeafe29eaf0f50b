"""
Venci Venci Streamlit App

Shows a random artwork from the Harvard Art Museums catalog.
Click an artist, culture or century to ban it; Discover avoids your bans.
"""

import logging

import streamlit as st

from discovery.config import DEFAULT_LOG_LEVEL
from ui import (
    init_session_state,
    reset_bans,
    dismiss_error,
    run_discover,
    render_viewer,
    render_ban_list,
)

logging.basicConfig(
    level=getattr(logging, DEFAULT_LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

# Page config
st.set_page_config(
    page_title="Venci Venci",
    page_icon="🖼️",
    layout="wide",
)

init_session_state()

# Header
col_title, col_buttons = st.columns([3, 2])
with col_title:
    st.title("Venci Venci")
    st.markdown(
        "Click **Artist**, **Culture**, or **Century** to ban it. "
        "Discover avoids your bans."
    )

with col_buttons:
    col1, col2 = st.columns(2)
    discover_clicked = col1.button(
        "Loading…" if st.session_state.loading else "🔀 Discover",
        key="discover",
        type="primary",
        disabled=st.session_state.loading,
    )
    col2.button("🚫 Clear Bans", key="clear_bans", on_click=reset_bans)

if discover_clicked:
    with st.spinner("Finding an artwork..."):
        run_discover()

# Errors
if st.session_state.config_error:
    st.error(st.session_state.config_error)

if st.session_state.error:
    col_msg, col_close = st.columns([12, 1])
    col_msg.warning(st.session_state.error)
    col_close.button("✕", key="dismiss_error", on_click=dismiss_error, help="Dismiss")

# Main content
col_viewer, col_bans = st.columns([2, 1])

with col_viewer:
    render_viewer(st.session_state.artwork)

with col_bans:
    render_ban_list(st.session_state.bans, st.session_state.batch_summary)
