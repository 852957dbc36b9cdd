"""Redis implementation of CreationStore.

Two keys back the store:

- ``<prefix>:created``: hash of steamid64 -> creation time, used for point
  lookups and insert-if-absent (HSETNX).
- ``<prefix>:index``: sorted set whose members are the identifiers
  zero-padded to 20 digits, all with score 0. Lexicographic order then
  equals numeric order, so the nearest neighbours on either side of a target
  come from ZRANGEBYLEX / ZREVRANGEBYLEX instead of a full scan. Scores are
  not used for ordering because doubles lose precision above 2**53.
"""

import redis
import structlog
from redis.asyncio import Redis

from steam_age.config import get_redis_client, settings
from steam_age.entities import CreationRecord
from steam_age.exceptions import StoreConflictError, StoreUnavailableError

logger = structlog.get_logger()

# Width of the largest unsigned 64-bit value (18446744073709551615)
_ID_WIDTH = 20


def encode_identifier(identifier: int) -> str:
    """Encode an identifier as an order-preserving sorted set member."""
    return f"{identifier:0{_ID_WIDTH}d}"


class RedisCreationRepository:
    """Redis implementation of the CreationStore protocol.

    This class satisfies the CreationStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis creation repository.

        Args:
            redis_client: Async Redis client instance. If None, creates default.
            key_prefix: Prefix for the hash and index keys.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.cache_key_prefix
        self._hash_key = f"{self._prefix}:created"
        self._index_key = f"{self._prefix}:index"

    @classmethod
    def create(
        cls,
        redis_client: Redis | None = None,
        key_prefix: str | None = None,
    ) -> "RedisCreationRepository":
        """Factory method to create RedisCreationRepository with defaults.

        Args:
            redis_client: Async Redis client. If None, builds one from settings.
            key_prefix: Key prefix. If None, uses settings.

        Returns:
            Configured RedisCreationRepository
        """
        return cls(redis_client=redis_client, key_prefix=key_prefix)

    async def lookup_exact(self, identifier: int) -> int | None:
        """Read the cached creation time of an identifier.

        Args:
            identifier: The steamid64 to look up

        Returns:
            Creation time in Unix seconds, or None on a miss
        """
        try:
            value = await self._client.hget(self._hash_key, str(identifier))
        except redis.RedisError as e:
            raise StoreUnavailableError(f"Redis lookup failed: {e}") from e

        if value is None:
            return None
        return int(value)

    async def insert(self, identifier: int, created_at: int) -> None:
        """Insert a record if the identifier is not cached yet.

        The hash write and the index write run in one MULTI/EXEC
        transaction; ZADD NX makes the index write a no-op on conflict.

        Args:
            identifier: The steamid64
            created_at: Creation time in Unix seconds

        Raises:
            StoreConflictError: If the identifier is already cached
            StoreUnavailableError: If Redis cannot be reached
        """
        pipe = self._client.pipeline(transaction=True)
        pipe.hsetnx(self._hash_key, str(identifier), str(created_at))
        pipe.zadd(self._index_key, {encode_identifier(identifier): 0}, nx=True)
        try:
            created, _ = await pipe.execute()
        except redis.RedisError as e:
            raise StoreUnavailableError(f"Redis insert failed: {e}") from e

        if not created:
            raise StoreConflictError(identifier)

    async def nearest_two(self, identifier: int) -> list[CreationRecord]:
        """Find up to two records closest to an identifier.

        The two nearest records overall are always among the two nearest at
        or above the target and the two nearest below it.

        Args:
            identifier: The target steamid64

        Returns:
            Records ordered by distance, ties going to the lower identifier
        """
        member = encode_identifier(identifier)
        try:
            above = await self._client.zrangebylex(
                self._index_key, f"[{member}", "+", start=0, num=2
            )
            below = await self._client.zrevrangebylex(
                self._index_key, f"({member}", "-", start=0, num=2
            )
        except redis.RedisError as e:
            raise StoreUnavailableError(f"Redis range query failed: {e}") from e

        candidates = sorted(
            {int(m) for m in [*above, *below]},
            key=lambda candidate: (abs(candidate - identifier), candidate),
        )[:2]
        if not candidates:
            return []

        try:
            values = await self._client.hmget(self._hash_key, [str(c) for c in candidates])
        except redis.RedisError as e:
            raise StoreUnavailableError(f"Redis lookup failed: {e}") from e

        records = []
        for candidate, value in zip(candidates, values):
            if value is None:
                # Index member without a hash entry; only reachable if keys were edited by hand
                logger.warning("Index entry without creation time", identifier=candidate)
                continue
            records.append(CreationRecord(identifier=candidate, created_at=int(value)))
        return records

    async def count_all(self) -> int:
        """Count cached records.

        Returns:
            Number of identifiers in the hash
        """
        try:
            return int(await self._client.hlen(self._hash_key))
        except redis.RedisError as e:
            raise StoreUnavailableError(f"Redis count failed: {e}") from e

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except redis.RedisError:
            return False

    async def get_stats(self) -> dict:
        """Get repository statistics.

        Returns:
            Dictionary with stats
        """
        return {
            "key_prefix": self._prefix,
            "total_entries": await self.count_all(),
        }

    async def close(self) -> None:
        """Close the Redis client and its connection pool."""
        await self._client.aclose()
