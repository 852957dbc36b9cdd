"""Creation-time storage protocol.

Defines the interface for the persistent mapping from steamid64 to its
known creation time. Besides point reads and writes, a store must answer
"which two cached identifiers are numerically closest to this one", the
query interpolation is built on.
"""

from typing import Protocol, runtime_checkable

from steam_age.entities import CreationRecord


@runtime_checkable
class CreationStore(Protocol):
    """Protocol for creation-time storage backends.

    Example:
        ```python
        from steam_age.protocols import CreationStore

        repo: CreationStore = RedisCreationRepository.create()
        ```
    """

    async def lookup_exact(self, identifier: int) -> int | None:
        """Read the cached creation time of an identifier.

        Args:
            identifier: The steamid64 to look up

        Returns:
            Creation time in Unix seconds, or None on a miss

        Raises:
            StoreUnavailableError: If the backend cannot be reached
        """
        ...

    async def insert(self, identifier: int, created_at: int) -> None:
        """Insert a record if the identifier is not cached yet.

        Args:
            identifier: The steamid64
            created_at: Creation time in Unix seconds

        Raises:
            StoreConflictError: If the identifier is already cached
            StoreUnavailableError: If the backend cannot be reached
        """
        ...

    async def nearest_two(self, identifier: int) -> list[CreationRecord]:
        """Find up to two records closest to an identifier.

        Args:
            identifier: The target steamid64

        Returns:
            Zero, one or two records ordered by absolute distance, ties
            resolved in favour of the lower identifier

        Raises:
            StoreUnavailableError: If the backend cannot be reached
        """
        ...

    async def count_all(self) -> int:
        """Count cached records."""
        ...

    async def health_check(self) -> bool:
        """Check if the backend is accessible. Never raises."""
        ...

    async def get_stats(self) -> dict:
        """Get backend statistics (implementation-specific)."""
        ...
