"""HTTP handlers for creation-time lookups.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

import structlog
from fastapi import HTTPException, status

from steam_age.dto import HealthCheckResponse, LookupQuery, LookupResponse, StatsResponse
from steam_age.exceptions import StoreUnavailableError, UnresolvableError
from steam_age.services import ResolutionService

logger = structlog.get_logger()


class LookupHandler:
    """HTTP handlers for creation-time lookups.

    This handler delegates business logic to ResolutionService
    and handles HTTP-specific concerns like:
    - Parsing the raw identifier
    - Converting entities to DTOs
    - Setting appropriate status codes
    """

    def __init__(self, resolution_service: ResolutionService) -> None:
        """Initialize the lookup handler.

        Args:
            resolution_service: The service for business logic (required).
        """
        self._service = resolution_service

    async def lookup(self, steamid64: str) -> LookupResponse:
        """Handle GET /lookup requests.

        Args:
            steamid64: The raw query parameter

        Returns:
            LookupResponse with the exact or estimated creation time

        Raises:
            HTTPException: 400 for a malformed id, 500 if unresolvable
        """
        try:
            query = LookupQuery.parse(steamid64)
        except ValueError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Bad Steam ID.",
            ) from e

        logger.info("Got lookup request", steamid64=query.steamid64)
        try:
            result = await self._service.resolve(query.steamid64)
        except UnresolvableError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Could not get DB estimation.",
            ) from e

        return LookupResponse(
            identifier=str(result.identifier),
            created_at=result.created_at,
            error_margin=result.error_margin,
        )

    async def get_stats(self) -> StatsResponse:
        """Handle GET /stats requests.

        Raises:
            HTTPException: 503 if the cache cannot be reached
        """
        try:
            stats = await self._service.get_stats()
        except StoreUnavailableError as e:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=f"Failed to get stats: {e}",
            ) from e

        cache_stats = stats.get("cache", {})
        return StatsResponse(
            total_entries=cache_stats.get("total_entries", 0),
            key_prefix=cache_stats.get("key_prefix", ""),
            resolutions=stats.get("resolutions", {}),
        )

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = await self._service.is_healthy()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_healthy=is_healthy,
        )
