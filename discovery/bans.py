"""Ban list operations.

Every operation takes a BanSet and returns a new one; nothing is mutated.
It is UI-agnostic and can be used by both Streamlit and tests.
"""

import dataclasses

from .config import NA_VALUE, BANNABLE_ATTRIBUTES
from .errors import InvalidAttributeError
from .models import ArtworkRecord, BanSet


def _field_name(attribute: str) -> str:
    if attribute not in BANNABLE_ATTRIBUTES:
        raise InvalidAttributeError(attribute)
    return attribute.lower()


def add_ban(bans: BanSet, attribute: str, value: str) -> BanSet:
    """Ban a value for one attribute.

    Empty values and "N/A" are ignored: banning "unknown" would ban
    every record missing that field.

    Args:
        bans: Current ban set
        attribute: "Artist", "Culture" or "Century"
        value: Displayed value to ban

    Returns:
        Updated ban set (the same object when nothing changes)

    Raises:
        InvalidAttributeError: If attribute is not banable
    """
    name = _field_name(attribute)
    if not value or not str(value).strip() or value == NA_VALUE:
        return bans

    current = getattr(bans, name)
    if value in current:
        return bans
    return dataclasses.replace(bans, **{name: current | {value}})


def remove_ban(bans: BanSet, attribute: str, value: str) -> BanSet:
    """Lift a ban. Removing a value that isn't banned changes nothing.

    Raises:
        InvalidAttributeError: If attribute is not banable
    """
    name = _field_name(attribute)
    current = getattr(bans, name)
    if value not in current:
        return bans
    return dataclasses.replace(bans, **{name: current - {value}})


def clear_bans() -> BanSet:
    """Return an empty ban set."""
    return BanSet()


def is_banned(bans: BanSet, artwork: ArtworkRecord) -> bool:
    """Whether any of the artwork's artist, culture or century is banned."""
    return (
        artwork.artist in bans.artist
        or artwork.culture in bans.culture
        or artwork.century in bans.century
    )
