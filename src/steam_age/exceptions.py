"""Exception hierarchy for steam_age."""


class SteamAgeError(Exception):
    """Base exception for all steam_age errors."""


class StoreError(SteamAgeError):
    """Cache store operation failed."""


class StoreConflictError(StoreError):
    """The identifier is already cached.

    Concurrent resolutions of the same identifier race to insert it, so
    callers treat this as a benign outcome.
    """

    def __init__(self, identifier: int) -> None:
        self.identifier = identifier
        super().__init__(f"Identifier {identifier} is already cached")


class StoreUnavailableError(StoreError):
    """The backing store could not be reached."""


class InsufficientDataError(SteamAgeError):
    """Not enough distinct reference points to interpolate."""


class UnresolvableError(SteamAgeError):
    """Neither an exact value nor an estimate could be produced."""

    def __init__(self, identifier: int, reason: str) -> None:
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Could not resolve {identifier}: {reason}")
