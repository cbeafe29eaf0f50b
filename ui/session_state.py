"""Session state initialization and management.

This module provides functions for initializing and managing Streamlit session state.
Bans and the displayed artwork are immutable values; callbacks replace them.
"""

import logging

import streamlit as st

from discovery import (
    ArtworkRecord,
    BanSet,
    CatalogClient,
    DiscoveryError,
    MissingConfigurationError,
    add_ban,
    remove_ban,
    clear_bans,
    discover,
    error_message,
)
from discovery.config import API_KEY_SECRET_NAME, get_api_key

logger = logging.getLogger(__name__)


def init_session_state():
    """Initialize all session state variables with defaults."""
    if "bans" not in st.session_state:
        st.session_state.bans = BanSet()
    if "artwork" not in st.session_state:
        st.session_state.artwork = ArtworkRecord.placeholder()
    if "batch_summary" not in st.session_state:
        st.session_state.batch_summary = None

    # Advisory only: disables the Discover button while a fetch runs
    if "loading" not in st.session_state:
        st.session_state.loading = False

    # Inline (dismissible) and blocking error messages
    if "error" not in st.session_state:
        st.session_state.error = ""
    if "config_error" not in st.session_state:
        st.session_state.config_error = ""


def load_api_key() -> str | None:
    """API key from Streamlit secrets, falling back to the environment."""
    try:
        value = st.secrets.get(API_KEY_SECRET_NAME)
    except Exception:
        # No secrets.toml at all
        value = None
    if isinstance(value, str) and value.strip():
        return value.strip()
    return get_api_key()


@st.cache_resource
def get_client(api_key: str | None) -> CatalogClient:
    """Shared catalog client (one requests session per key)."""
    return CatalogClient(api_key)


def ban_value(attribute: str, value: str):
    """Ban the clicked value.

    Args:
        attribute: "Artist", "Culture" or "Century"
        value: Value currently displayed for that attribute
    """
    st.session_state.bans = add_ban(st.session_state.bans, attribute, value)


def unban_value(attribute: str, value: str):
    """Remove a ban chip.

    Args:
        attribute: "Artist", "Culture" or "Century"
        value: Banned value to lift
    """
    st.session_state.bans = remove_ban(st.session_state.bans, attribute, value)


def reset_bans():
    """Clear every ban."""
    st.session_state.bans = clear_bans()


def dismiss_error():
    """Hide the inline error message."""
    st.session_state.error = ""


def run_discover():
    """Fetch a batch and display a random artwork that avoids the bans.

    On failure the previous artwork stays on screen and an error message
    is stored for rendering.
    """
    st.session_state.error = ""
    st.session_state.config_error = ""

    api_key = load_api_key()
    if not api_key:
        st.session_state.config_error = error_message(MissingConfigurationError())
        return

    st.session_state.loading = True
    try:
        result = discover(get_client(api_key), st.session_state.bans)
    except DiscoveryError as e:
        logger.warning("Discover failed: %s", e)
        st.session_state.error = error_message(e)
    else:
        st.session_state.artwork = result.artwork
        st.session_state.batch_summary = result.summary
    finally:
        st.session_state.loading = False
