"""Creation record domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CreationRecord:
    """A cached, upstream-confirmed creation time.

    Records are append-only facts: one per identifier, written the first time
    the identifier is resolved exactly, never updated afterwards.

    Attributes:
        identifier: The steamid64 of the account
        created_at: Account creation time (Unix seconds)
    """

    identifier: int
    created_at: int
