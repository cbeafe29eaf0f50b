"""Discover cycle: fetch a batch, then select from it.

Fetching and selecting stay separate steps so the selector never
touches the network.
"""

import logging
from typing import Optional

from .catalog_client import CatalogClient
from .config import FETCH_FAILED_MESSAGE, NOTHING_ELIGIBLE_MESSAGE, MISSING_API_KEY_MESSAGE
from .errors import DiscoveryError, EmptyResultError, FetchError, MissingConfigurationError
from .models import BanSet, DiscoverResult
from .selector import RandomSource, select, summarize_batch

logger = logging.getLogger(__name__)


def discover(
    client: CatalogClient,
    bans: BanSet,
    rng: Optional[RandomSource] = None,
) -> DiscoverResult:
    """Run one discover cycle.

    Args:
        client: Catalog client (its API key is checked before any request)
        bans: Current ban set
        rng: Random source passed through to the selector

    Returns:
        DiscoverResult with the chosen artwork and batch summary

    Raises:
        MissingConfigurationError: No API key
        FetchError: Transport or parsing failure
        EmptyResultError: Nothing in the batch avoids the bans
    """
    records = client.fetch_records()
    artwork = select(records, bans, rng=rng)
    return DiscoverResult(artwork=artwork, summary=summarize_batch(records, bans))


def error_message(error: DiscoveryError) -> str:
    """User-facing text for a discover failure."""
    if isinstance(error, MissingConfigurationError):
        return MISSING_API_KEY_MESSAGE
    if isinstance(error, EmptyResultError):
        return NOTHING_ELIGIBLE_MESSAGE
    if isinstance(error, FetchError):
        return FETCH_FAILED_MESSAGE
    logger.error("Unhandled discovery error: %s", error)
    return FETCH_FAILED_MESSAGE
