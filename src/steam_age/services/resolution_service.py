"""Resolution service for core business logic.

This service decides how a steamid64 gets its creation time: from the
cache, from the Steam Web API, or by interpolating between the two cached
identifiers closest to it.
"""

import time

import structlog

from steam_age.entities import ResolutionEntity, ResolutionSource
from steam_age.exceptions import (
    InsufficientDataError,
    StoreConflictError,
    StoreUnavailableError,
    UnresolvableError,
)
from steam_age.models import ResolutionMetrics
from steam_age.protocols import CreationStore, UpstreamResolver
from steam_age.services.estimator import estimate, local_slope

logger = structlog.get_logger()


class ResolutionService:
    """Core resolution orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - CreationStore: Redis by default, in-memory fakes in tests
    - UpstreamResolver: the Steam Web API by default

    The service holds no per-identifier state; everything durable lives in
    the store. Concurrent resolutions of the same identifier are not
    serialized: both may call upstream, and the loser's insert conflict is
    ignored.

    Example:
        ```python
        from steam_age.repositories import RedisCreationRepository, SteamProfileResolver
        from steam_age.services import ResolutionService

        service = ResolutionService.create(
            store=RedisCreationRepository.create(),
            resolver=SteamProfileResolver.create(),
        )
        result = await service.resolve(76561197960287930)
        ```
    """

    def __init__(
        self,
        store: CreationStore,
        resolver: UpstreamResolver,
        metrics: ResolutionMetrics | None = None,
    ) -> None:
        """Initialize the resolution service.

        Args:
            store: Creation-time storage backend (required).
            resolver: Upstream lookup service (required).
            metrics: Counter sink. A fresh one is created if omitted.
        """
        self._store = store
        self._resolver = resolver
        self._metrics = metrics or ResolutionMetrics()

    @classmethod
    def create(
        cls,
        store: CreationStore,
        resolver: UpstreamResolver,
    ) -> "ResolutionService":
        """Factory method to create ResolutionService.

        Args:
            store: Creation-time storage backend (required).
            resolver: Upstream lookup service (required).

        Returns:
            Configured ResolutionService instance
        """
        return cls(store=store, resolver=resolver)

    async def resolve(self, identifier: int) -> ResolutionEntity:
        """Resolve the creation time of one identifier.

        Business logic:
        1. Return the cached value if there is one
        2. Otherwise ask upstream; cache and return an exact hit
        3. Otherwise interpolate between the two nearest cached records
        4. Otherwise fail as unresolvable

        Args:
            identifier: The steamid64 to resolve

        Returns:
            ResolutionEntity, exact (margin 0) or estimated

        Raises:
            UnresolvableError: If no exact value or estimate is available
        """
        start_time = time.time()
        try:
            result = await self._resolve(identifier)
        except UnresolvableError as e:
            self._metrics.record_failure((time.time() - start_time) * 1000)
            logger.warning("Identifier unresolvable", steamid64=identifier, reason=e.reason)
            raise

        self._metrics.record(result.source, (time.time() - start_time) * 1000)
        return result

    async def _resolve(self, identifier: int) -> ResolutionEntity:
        try:
            cached = await self._store.lookup_exact(identifier)
        except StoreUnavailableError as e:
            raise UnresolvableError(identifier, f"cache unavailable: {e}") from e

        if cached is not None:
            logger.debug("Cache hit", steamid64=identifier)
            return ResolutionEntity(
                identifier=identifier,
                created_at=cached,
                error_margin=0,
                source=ResolutionSource.CACHE,
            )

        outcome = await self._resolver.resolve(identifier)
        if outcome.is_found and outcome.created_at is not None:
            await self._remember(identifier, outcome.created_at)
            return ResolutionEntity(
                identifier=identifier,
                created_at=outcome.created_at,
                error_margin=0,
                source=ResolutionSource.UPSTREAM,
            )

        logger.debug(
            "Upstream has no creation time, estimating",
            steamid64=identifier,
            upstream_status=outcome.status.value,
            detail=outcome.detail,
        )
        return await self._estimate(identifier)

    async def _remember(self, identifier: int, created_at: int) -> None:
        """Cache an upstream-confirmed creation time.

        Only exact values reach this method; estimates are never stored.
        """
        try:
            await self._store.insert(identifier, created_at)
        except StoreConflictError:
            logger.debug("Identifier cached concurrently", steamid64=identifier)
        except StoreUnavailableError as e:
            logger.warning("Could not cache creation time", steamid64=identifier, error=str(e))
        else:
            logger.info("Cached creation time", steamid64=identifier, timecreated=created_at)

    async def _estimate(self, identifier: int) -> ResolutionEntity:
        try:
            neighbours = await self._store.nearest_two(identifier)
        except StoreUnavailableError as e:
            raise UnresolvableError(identifier, f"cache unavailable: {e}") from e

        if len(neighbours) != 2:
            raise UnresolvableError(
                identifier, f"need 2 cached reference points, found {len(neighbours)}"
            )

        lower, upper = sorted(neighbours, key=lambda record: record.identifier)
        try:
            result = estimate(identifier, lower, upper)
        except InsufficientDataError as e:
            raise UnresolvableError(identifier, str(e)) from e

        logger.info(
            "Estimated creation time",
            steamid64=identifier,
            lower_id=lower.identifier,
            lower_time=lower.created_at,
            upper_id=upper.identifier,
            upper_time=upper.created_at,
            slope=round(local_slope(lower, upper), 6),
            timecreated=result.created_at,
            error=result.error_margin,
        )
        return ResolutionEntity(
            identifier=identifier,
            created_at=result.created_at,
            error_margin=result.error_margin,
            source=ResolutionSource.ESTIMATE,
        )

    async def get_stats(self) -> dict:
        """Get store statistics and resolution counters.

        Returns:
            Dictionary with ``cache`` and ``resolutions`` sections
        """
        return {
            "cache": await self._store.get_stats(),
            "resolutions": self._metrics.to_dict(),
        }

    async def is_healthy(self) -> bool:
        """Check if the cache store is reachable."""
        return await self._store.health_check()

    @property
    def metrics(self) -> ResolutionMetrics:
        """Get the resolution counters."""
        return self._metrics
