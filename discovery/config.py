"""Default configuration values."""

import os

# Harvard Art Museums catalog endpoint
API_URL = "https://api.harvardartmuseums.org/object"

# Records requested per discover (only records with an image are eligible)
PAGE_SIZE = 50
HAS_IMAGE = 1

# Seconds to wait for the catalog before giving up
REQUEST_TIMEOUT = float(os.environ.get("HAM_REQUEST_TIMEOUT", "10"))

# API key lookup (first non-empty wins)
API_KEY_ENV_VARS = ("HAM_API_KEY", "VITE_HAM_API_KEY")
API_KEY_SECRET_NAME = "HAM_API_KEY"

# Placeholder for missing/blank fields; never a banable value
NA_VALUE = "N/A"

# Attributes the user can ban, in display order
ARTIST = "Artist"
CULTURE = "Culture"
CENTURY = "Century"
BANNABLE_ATTRIBUTES = (ARTIST, CULTURE, CENTURY)

# Logging
DEFAULT_LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# User-facing messages
MISSING_API_KEY_MESSAGE = (
    "Missing API key. Add HAM_API_KEY to your environment "
    "or .streamlit/secrets.toml and restart."
)
FETCH_FAILED_MESSAGE = "Couldn't fetch artwork, try again."
NOTHING_ELIGIBLE_MESSAGE = "Nothing found that avoids your ban list. Try clearing some bans."


def get_api_key(environ=None) -> str | None:
    """Return the catalog API key from the environment, or None if unset."""
    environ = os.environ if environ is None else environ
    for name in API_KEY_ENV_VARS:
        value = (environ.get(name) or "").strip()
        if value:
            return value
    return None
