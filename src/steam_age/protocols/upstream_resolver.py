"""Upstream resolver protocol.

Defines the interface for the identity service that knows the true
creation time of public profiles.
"""

from typing import Protocol, runtime_checkable

from steam_age.entities import UpstreamOutcome


@runtime_checkable
class UpstreamResolver(Protocol):
    """Protocol for upstream creation-time lookups."""

    async def resolve(self, identifier: int) -> UpstreamOutcome:
        """Perform a single lookup for one identifier.

        Implementations make exactly one request per call, never retry,
        and report failures through the outcome instead of raising.

        Args:
            identifier: The steamid64 to look up

        Returns:
            FOUND with the creation time, NOT_FOUND, or TRANSPORT_ERROR
        """
        ...

    async def close(self) -> None:
        """Release network resources."""
        ...
