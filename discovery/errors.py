"""Exceptions raised by the discovery logic."""


class DiscoveryError(Exception):
    """Base class for all discovery failures."""


class MissingConfigurationError(DiscoveryError):
    """No API key is configured, so no fetch can be attempted."""


class FetchError(DiscoveryError):
    """The catalog could not be reached or returned an unusable response."""


class EmptyResultError(DiscoveryError):
    """No record in the batch avoids the current bans."""

    def __init__(self, fetched: int = 0):
        self.fetched = fetched
        super().__init__(
            f"No eligible artwork among {fetched} fetched records"
        )


class InvalidAttributeError(DiscoveryError, ValueError):
    """Ban operation called with an attribute that cannot be banned."""

    def __init__(self, attribute):
        self.attribute = attribute
        super().__init__(f"Cannot ban attribute {attribute!r}")
