"""Data models for artwork discovery."""

from dataclasses import dataclass, field
from typing import Any, Optional

from .config import NA_VALUE, ARTIST, CULTURE, CENTURY, BANNABLE_ATTRIBUTES
from .errors import InvalidAttributeError


def safe_value(val: Any) -> str:
    """
    Normalize a raw catalog field for display and ban checks.

    Missing, empty or whitespace-only values collapse to "N/A".
    Example: "  Greek " -> "Greek", "" -> "N/A", None -> "N/A"
    """
    if val is None:
        return NA_VALUE
    text = str(val).strip()
    return text or NA_VALUE


def artist_of(raw: dict) -> str:
    """
    Extract the artist name from the first contributor of a raw record.

    Example: {"people": [{"name": "Unknown"}]} -> "Unknown"
    Returns "N/A" when there are no contributors or the first has no name.
    """
    people = raw.get("people") if isinstance(raw, dict) else None
    if not people or not isinstance(people, list):
        return NA_VALUE
    first = people[0]
    if not isinstance(first, dict):
        return NA_VALUE
    return safe_value(first.get("name"))


def image_url_of(raw: dict) -> str:
    """Image URL of a raw record, or "" when absent (rendered conditionally)."""
    url = raw.get("primaryimageurl")
    if url is None:
        return ""
    return str(url).strip()


@dataclass(frozen=True)
class ArtworkRecord:
    """Normalized view of one catalog entry."""
    title: str
    artist: str
    culture: str
    century: str
    date: str
    medium: str
    image_url: str = ""

    @classmethod
    def from_raw(cls, raw: dict) -> "ArtworkRecord":
        """Build a record from a raw catalog entry (see safe_value for blanks)."""
        return cls(
            title=safe_value(raw.get("title")),
            artist=artist_of(raw),
            culture=safe_value(raw.get("culture")),
            century=safe_value(raw.get("century")),
            date=safe_value(raw.get("dated")),
            medium=safe_value(raw.get("medium")),
            image_url=image_url_of(raw),
        )

    @classmethod
    def placeholder(cls) -> "ArtworkRecord":
        """Empty record shown before the first discover."""
        return cls(title="", artist="", culture="", century="", date="", medium="")

    @property
    def is_placeholder(self) -> bool:
        """Whether this is the empty pre-discover record."""
        return self == ArtworkRecord.placeholder()

    @property
    def has_image(self) -> bool:
        return bool(self.image_url)

    def value_of(self, attribute: str) -> str:
        """
        Get the field value for a banable attribute.

        Args:
            attribute: One of "Artist", "Culture", "Century"

        Raises:
            InvalidAttributeError: For any other attribute name
        """
        if attribute == ARTIST:
            return self.artist
        if attribute == CULTURE:
            return self.culture
        if attribute == CENTURY:
            return self.century
        raise InvalidAttributeError(attribute)

    def to_dict(self) -> dict:
        """Convert record to a flat dictionary (one table row)."""
        return {
            "title": self.title,
            "artist": self.artist,
            "culture": self.culture,
            "century": self.century,
            "date": self.date,
            "medium": self.medium,
            "image_url": self.image_url,
        }


@dataclass(frozen=True)
class BanSet:
    """Banned values per attribute. Never contains "N/A"."""
    artist: frozenset[str] = field(default_factory=frozenset)
    culture: frozenset[str] = field(default_factory=frozenset)
    century: frozenset[str] = field(default_factory=frozenset)

    def get(self, attribute: str) -> frozenset[str]:
        """
        Get the banned values for one attribute.

        Raises:
            InvalidAttributeError: If attribute is not banable
        """
        if attribute == ARTIST:
            return self.artist
        if attribute == CULTURE:
            return self.culture
        if attribute == CENTURY:
            return self.century
        raise InvalidAttributeError(attribute)

    @property
    def total(self) -> int:
        """Number of banned values across all attributes."""
        return len(self.artist) + len(self.culture) + len(self.century)

    @property
    def is_empty(self) -> bool:
        """Whether nothing is banned."""
        return self.total == 0

    def chips(self) -> list[tuple[str, str]]:
        """
        List bans as (attribute, value) pairs for rendering.

        Ordered by attribute (Artist, Culture, Century), then value.
        """
        result = []
        for attribute in BANNABLE_ATTRIBUTES:
            for value in sorted(self.get(attribute)):
                result.append((attribute, value))
        return result

    def to_dict(self) -> dict:
        """Convert bans to dictionary of sorted lists."""
        return {attribute: sorted(self.get(attribute)) for attribute in BANNABLE_ATTRIBUTES}


@dataclass(frozen=True)
class BatchSummary:
    """How many records of the last batch survived the bans."""
    fetched: int
    eligible: int

    @property
    def banned(self) -> int:
        return self.fetched - self.eligible


@dataclass(frozen=True)
class DiscoverResult:
    """Outcome of one successful discover cycle."""
    artwork: ArtworkRecord
    summary: Optional[BatchSummary] = None
