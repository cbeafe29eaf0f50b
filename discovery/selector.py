"""Ban-aware random selection.

This module picks one artwork from a fetched batch, skipping anything
the user has banned. It performs no I/O; the batch and the random
source are passed in.
"""

import logging
import random
from typing import Iterable, Optional, Protocol

import pandas as pd

from .errors import EmptyResultError
from .models import ArtworkRecord, BanSet, BatchSummary

logger = logging.getLogger(__name__)

RECORD_COLUMNS = ["title", "artist", "culture", "century", "date", "medium", "image_url"]

_default_rng = random.Random()


class RandomSource(Protocol):
    """Anything with random.Random's randrange (e.g. a seeded Random)."""

    def randrange(self, stop: int) -> int:
        ...


def normalize_records(records: Iterable[dict]) -> list[ArtworkRecord]:
    """Normalize raw catalog entries into ArtworkRecords, keeping order."""
    return [ArtworkRecord.from_raw(raw) for raw in records]


def records_frame(artworks: list[ArtworkRecord]) -> pd.DataFrame:
    """Tabular view of a batch, one row per artwork in batch order.

    Args:
        artworks: Normalized records

    Returns:
        DataFrame with RECORD_COLUMNS and a 0..n-1 index
    """
    return pd.DataFrame([a.to_dict() for a in artworks], columns=RECORD_COLUMNS)


def apply_ban_filter(df: pd.DataFrame, bans: BanSet) -> pd.DataFrame:
    """Drop rows whose artist, culture or century is banned.

    Each attribute is checked independently; matching any one ban
    excludes the row.

    Args:
        df: DataFrame from records_frame
        bans: Current ban set

    Returns:
        Filtered DataFrame (original index preserved)
    """
    if bans.is_empty:
        return df

    mask = (
        ~df["artist"].isin(list(bans.artist))
        & ~df["culture"].isin(list(bans.culture))
        & ~df["century"].isin(list(bans.century))
    )
    return df[mask]


def filter_eligible(artworks: list[ArtworkRecord], bans: BanSet) -> list[ArtworkRecord]:
    """Artworks that avoid every ban, in batch order."""
    eligible = apply_ban_filter(records_frame(artworks), bans)
    return [artworks[i] for i in eligible.index]


def summarize_batch(records: Iterable[dict], bans: BanSet) -> BatchSummary:
    """Count fetched vs. eligible records for a raw batch."""
    artworks = normalize_records(records)
    return BatchSummary(
        fetched=len(artworks),
        eligible=len(filter_eligible(artworks, bans)),
    )


def select(
    records: Iterable[dict],
    bans: BanSet,
    rng: Optional[RandomSource] = None,
) -> ArtworkRecord:
    """Pick one artwork uniformly at random from those avoiding the bans.

    Args:
        records: Raw catalog entries from one query (may be empty)
        bans: Current ban set
        rng: Random source; defaults to a module-level random.Random

    Returns:
        The chosen record, normalized

    Raises:
        EmptyResultError: If no record avoids the bans (or the batch is empty)
    """
    if rng is None:
        rng = _default_rng
    artworks = normalize_records(records)
    eligible = filter_eligible(artworks, bans)

    if not eligible:
        logger.info("No eligible artwork: %d fetched, %d bans", len(artworks), bans.total)
        raise EmptyResultError(fetched=len(artworks))

    pick = eligible[rng.randrange(len(eligible))]
    logger.debug(
        "Selected %r from %d eligible of %d fetched", pick.title, len(eligible), len(artworks)
    )
    return pick
