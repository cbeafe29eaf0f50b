"""Harvard Art Museums catalog client.

One GET against the object search endpoint, returning the raw records.
"""

import logging
from typing import Any, Optional

import requests

from .config import API_URL, PAGE_SIZE, HAS_IMAGE, REQUEST_TIMEOUT
from .errors import FetchError, MissingConfigurationError

logger = logging.getLogger(__name__)


def build_params(api_key: str, page_size: int = PAGE_SIZE) -> dict[str, Any]:
    """Query parameters for one random batch of records with images."""
    return {"apikey": api_key, "hasimage": HAS_IMAGE, "size": page_size}


def parse_records(payload: Any) -> list[dict]:
    """Extract the records array from a decoded response body.

    A missing "records" key is an empty batch.

    Raises:
        FetchError: If the body is not an object or records is not a list
    """
    if not isinstance(payload, dict):
        raise FetchError(f"Unexpected response body: {type(payload).__name__}")
    records = payload.get("records")
    if records is None:
        return []
    if not isinstance(records, list):
        raise FetchError(f"Unexpected 'records' value: {type(records).__name__}")
    return [r for r in records if isinstance(r, dict)]


class CatalogClient:
    """
    Fetches batches of raw artwork records from the catalog.

    Uses a shared requests.Session so connections are reused across
    discover clicks.
    """

    def __init__(
        self,
        api_key: Optional[str],
        session: Optional[requests.Session] = None,
        api_url: str = API_URL,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def fetch_records(self, page_size: int = PAGE_SIZE) -> list[dict]:
        """
        Fetch one batch of raw records.

        Returns:
            List of raw record dicts (possibly empty)

        Raises:
            MissingConfigurationError: If no API key is set (no request is made)
            FetchError: On connection, HTTP or decoding failure
        """
        if not self.api_key:
            raise MissingConfigurationError("HAM_API_KEY is not set")

        params = build_params(self.api_key, page_size)
        try:
            response = self.session.get(self.api_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.warning("Catalog request failed: %s", e.__class__.__name__)
            raise FetchError(f"Catalog request failed: {e.__class__.__name__}") from e
        except ValueError as e:
            logger.warning("Catalog returned invalid JSON")
            raise FetchError("Catalog returned invalid JSON") from e

        records = parse_records(payload)
        logger.info("Fetched %d records from catalog", len(records))
        return records
