"""Ban list UI components.

This module provides Streamlit components for rendering ban chips.
"""

import streamlit as st

from discovery.models import BanSet, BatchSummary

from .session_state import unban_value


def chip_label(attribute: str, value: str) -> str:
    """Text of a removable ban chip."""
    return f"{attribute}: {value} ×"


def render_ban_list(bans: BanSet, summary: BatchSummary | None = None):
    """Render the ban list panel with one removable chip per ban.

    Args:
        bans: Current ban set
        summary: Optional summary of the last fetched batch
    """
    with st.container(border=True):
        col1, col2 = st.columns([2, 1])
        col1.markdown("**Ban List**")
        col2.caption("Click to remove")

        if bans.is_empty:
            st.caption("No bans yet. Click Artist/Culture/Century above to add")
        else:
            for attribute, value in bans.chips():
                st.button(
                    chip_label(attribute, value),
                    key=f"chip_{attribute}:{value}",
                    on_click=unban_value,
                    args=(attribute, value),
                    help="Remove from ban list",
                )

        if summary is not None and summary.fetched:
            st.caption(
                f"Last batch: {summary.eligible} of {summary.fetched} artworks avoided your bans"
            )
