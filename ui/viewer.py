"""Artwork viewer UI components.

This module provides Streamlit components for the "Now Viewing" panel.
"""

import streamlit as st

from discovery.config import BANNABLE_ATTRIBUTES
from discovery.models import ArtworkRecord

from .session_state import ban_value

EMPTY_DISPLAY = "—"


def display_value(value: str) -> str:
    """Value as shown in the panel ("—" when empty)."""
    return value or EMPTY_DISPLAY


def render_field(label: str, value: str, strong: bool = False):
    """Render a read-only key/value row."""
    col1, col2 = st.columns([1, 3])
    col1.caption(label)
    text = display_value(value)
    col2.markdown(f"**{text}**" if strong else text)


def render_bannable_field(attribute: str, value: str):
    """Render a key/value row whose value is a button that bans it."""
    col1, col2 = st.columns([1, 3])
    col1.caption(attribute)
    col2.button(
        display_value(value),
        key=f"ban_{attribute}",
        on_click=ban_value,
        args=(attribute, value),
        help=f"Ban this {attribute.lower()}",
        disabled=not value,
    )


def render_viewer(artwork: ArtworkRecord):
    """Render the currently displayed artwork.

    Args:
        artwork: Artwork to show (placeholder before the first discover)
    """
    with st.container(border=True):
        st.markdown("**Now Viewing**")

        if artwork.has_image:
            st.image(artwork.image_url, caption=artwork.title or "Artwork")
        else:
            st.info("No image yet")

        render_field("Title", artwork.title, strong=True)
        for attribute in BANNABLE_ATTRIBUTES:
            render_bannable_field(attribute, artwork.value_of(attribute))
        render_field("Date", artwork.date)
        render_field("Medium", artwork.medium)
