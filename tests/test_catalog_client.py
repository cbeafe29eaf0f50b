"""Tests for the catalog HTTP client (no network)."""

import pytest
import requests

from discovery.catalog_client import CatalogClient, build_params, parse_records
from discovery.config import API_URL, get_api_key
from discovery.errors import FetchError, MissingConfigurationError
from tests.conftest import FakeResponse, FakeSession, make_raw_record


class TestBuildParams:
    def test_default_params(self):
        assert build_params("secret") == {"apikey": "secret", "hasimage": 1, "size": 50}

    def test_custom_page_size(self):
        assert build_params("secret", page_size=10)["size"] == 10


class TestParseRecords:
    """Tests for response body parsing."""

    def test_records_array(self, vase_record):
        assert parse_records({"info": {}, "records": [vase_record]}) == [vase_record]

    def test_missing_records_is_empty_batch(self):
        assert parse_records({"info": {"totalrecords": 0}}) == []

    def test_non_dict_entries_are_skipped(self, vase_record):
        assert parse_records({"records": [vase_record, "junk", None]}) == [vase_record]

    def test_non_object_body(self):
        with pytest.raises(FetchError):
            parse_records(["not", "an", "object"])

    def test_records_not_a_list(self):
        with pytest.raises(FetchError):
            parse_records({"records": "oops"})


class TestCatalogClient:
    """Tests for CatalogClient.fetch_records."""

    def test_fetch_sends_expected_request(self):
        records = [make_raw_record(), make_raw_record(title="Bowl")]
        session = FakeSession(FakeResponse({"records": records}))
        client = CatalogClient("secret", session=session, timeout=5)

        assert client.fetch_records() == records
        assert session.calls == [{
            "url": API_URL,
            "params": {"apikey": "secret", "hasimage": 1, "size": 50},
            "timeout": 5,
        }]
        assert session.headers["Accept"] == "application/json"

    @pytest.mark.parametrize("api_key", [None, ""])
    def test_missing_key_makes_no_request(self, api_key):
        session = FakeSession()
        client = CatalogClient(api_key, session=session)

        with pytest.raises(MissingConfigurationError):
            client.fetch_records()
        assert session.calls == []

    def test_http_error_becomes_fetch_error(self):
        session = FakeSession(FakeResponse({"error": "Unauthorized"}, status_code=401))
        client = CatalogClient("bad-key", session=session)

        with pytest.raises(FetchError) as exc_info:
            client.fetch_records()
        assert isinstance(exc_info.value.__cause__, requests.HTTPError)

    def test_connection_error_becomes_fetch_error(self):
        session = FakeSession(error=requests.ConnectionError("down"))
        client = CatalogClient("secret", session=session)

        with pytest.raises(FetchError):
            client.fetch_records()

    def test_invalid_json_becomes_fetch_error(self):
        session = FakeSession(FakeResponse(invalid_json=True))
        client = CatalogClient("secret", session=session)

        with pytest.raises(FetchError):
            client.fetch_records()

    def test_api_key_not_in_error_message(self):
        session = FakeSession(error=requests.ConnectionError("https://api/object?apikey=secret"))
        client = CatalogClient("secret", session=session)

        with pytest.raises(FetchError) as exc_info:
            client.fetch_records()
        assert "secret" not in str(exc_info.value)


class TestGetApiKey:
    """Tests for reading the API key from the environment."""

    def test_primary_variable(self):
        assert get_api_key({"HAM_API_KEY": "abc"}) == "abc"

    def test_vite_variable_fallback(self):
        assert get_api_key({"VITE_HAM_API_KEY": " xyz "}) == "xyz"

    def test_primary_wins(self):
        assert get_api_key({"HAM_API_KEY": "abc", "VITE_HAM_API_KEY": "xyz"}) == "abc"

    def test_missing_or_blank(self):
        assert get_api_key({}) is None
        assert get_api_key({"HAM_API_KEY": "  "}) is None
