"""Shared fixtures for artwork discovery tests."""

import pytest
import requests

from discovery.models import BanSet


def make_raw_record(
    title: str = "Vase",
    artist: str | None = "Unknown",
    culture: str | None = "Greek",
    century: str | None = "5th century B.C.",
    dated: str | None = "450 BC",
    medium: str | None = "Clay",
    image: str | None = "http://x/1.jpg",
) -> dict:
    """Helper to create a raw catalog record. None drops the field."""
    raw = {
        "title": title,
        "culture": culture,
        "century": century,
        "dated": dated,
        "medium": medium,
        "primaryimageurl": image,
    }
    raw = {k: v for k, v in raw.items() if v is not None}
    if artist is not None:
        raw["people"] = [{"name": artist, "role": "Artist"}]
    return raw


class FixedRandom:
    """Random source that returns scripted indices and records each bound."""

    def __init__(self, *indices: int):
        self.indices = list(indices)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self.indices.pop(0) if self.indices else 0


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code: int = 200, invalid_json: bool = False):
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.invalid_json:
            raise ValueError("Expecting value")
        return self.payload


class FakeSession:
    """Records GET calls and replays a response (or raises an error)."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response or FakeResponse({"records": []})
        self.error = error
        self.headers: dict = {}
        self.calls: list[dict] = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error:
            raise self.error
        return self.response


@pytest.fixture
def vase_record():
    """The single Greek vase record used across scenarios."""
    return make_raw_record()


@pytest.fixture
def no_bans():
    """Empty BanSet."""
    return BanSet()


@pytest.fixture
def mixed_batch():
    """Small batch spanning several artists, cultures and centuries."""
    return [
        make_raw_record("Vase", "Unknown", "Greek", "5th century B.C."),
        make_raw_record("Portrait", "Rembrandt", "Dutch", "17th century"),
        make_raw_record("Scroll", "Hokusai", "Japanese", "19th century"),
        make_raw_record("Bowl", None, None, None),
        make_raw_record("Sketch", "Rembrandt", "Dutch", "17th century"),
    ]
