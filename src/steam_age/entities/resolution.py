"""Resolution result domain entity."""

from dataclasses import dataclass
from enum import Enum


class ResolutionSource(str, Enum):
    """Where a resolved creation time came from."""

    CACHE = "cache"
    UPSTREAM = "upstream"
    ESTIMATE = "estimate"


@dataclass(frozen=True)
class ResolutionEntity:
    """Domain entity for the outcome of resolving one identifier.

    Attributes:
        identifier: The steamid64 that was resolved
        created_at: Creation time (Unix seconds), exact or estimated
        error_margin: Estimated error in seconds (0 for exact values)
        source: Provenance of ``created_at``
    """

    identifier: int
    created_at: int
    error_margin: int
    source: ResolutionSource

    @property
    def is_exact(self) -> bool:
        """True when the value came from the cache or the Steam API."""
        return self.source is not ResolutionSource.ESTIMATE
