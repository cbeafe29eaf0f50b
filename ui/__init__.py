"""UI module for Streamlit components.

This package contains all Streamlit-specific UI components.
The components are separated from discovery logic (in discovery/) to allow
testing of selection and bans without Streamlit.
"""

from .session_state import (
    init_session_state,
    load_api_key,
    ban_value,
    unban_value,
    reset_bans,
    dismiss_error,
    run_discover,
)
from .viewer import render_viewer
from .ban_list import render_ban_list

__all__ = [
    # Session state
    "init_session_state",
    "load_api_key",
    "ban_value",
    "unban_value",
    "reset_bans",
    "dismiss_error",
    "run_discover",
    # Viewer
    "render_viewer",
    # Ban list
    "render_ban_list",
]
