"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class LookupResponse(BaseModel):
    """Response DTO for a creation-time lookup."""

    identifier: str = Field(
        ...,
        description="The steamid64, as a string so 64-bit values survive JSON clients",
    )
    created_at: int = Field(..., description="Account creation time (Unix seconds)")
    error_margin: int = Field(
        ...,
        description="Estimated error in seconds (0 = exact value)",
        ge=0,
    )


class StatsResponse(BaseModel):
    """Response DTO for service statistics."""

    total_entries: int = Field(..., description="Number of cached creation times", ge=0)
    key_prefix: str = Field(..., description="Redis key prefix of the cache")
    resolutions: dict[str, float | int] = Field(
        default_factory=dict,
        description="Resolution counters since process start",
    )


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
