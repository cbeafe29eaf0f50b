"""Core module for artwork discovery logic."""

from .models import (
    ArtworkRecord,
    BanSet,
    BatchSummary,
    DiscoverResult,
    safe_value,
    artist_of,
    image_url_of,
)
from .errors import (
    DiscoveryError,
    MissingConfigurationError,
    FetchError,
    EmptyResultError,
    InvalidAttributeError,
)
from .bans import (
    add_ban,
    remove_ban,
    clear_bans,
    is_banned,
)
from .selector import (
    normalize_records,
    records_frame,
    apply_ban_filter,
    filter_eligible,
    summarize_batch,
    select,
)
from .catalog_client import CatalogClient, build_params, parse_records
from .discover import discover, error_message

__all__ = [
    # Models
    "ArtworkRecord",
    "BanSet",
    "BatchSummary",
    "DiscoverResult",
    "safe_value",
    "artist_of",
    "image_url_of",
    # Errors
    "DiscoveryError",
    "MissingConfigurationError",
    "FetchError",
    "EmptyResultError",
    "InvalidAttributeError",
    # Bans
    "add_ban",
    "remove_ban",
    "clear_bans",
    "is_banned",
    # Selector
    "normalize_records",
    "records_frame",
    "apply_ban_filter",
    "filter_eligible",
    "summarize_batch",
    "select",
    # Catalog
    "CatalogClient",
    "build_params",
    "parse_records",
    # Discover cycle
    "discover",
    "error_message",
]
