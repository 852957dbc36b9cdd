"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
Internal domain logic should use entities from the entities package.
"""

from .requests import MAX_STEAMID64, LookupQuery
from .responses import HealthCheckResponse, LookupResponse, StatsResponse

__all__ = [
    "MAX_STEAMID64",
    "LookupQuery",
    "LookupResponse",
    "StatsResponse",
    "HealthCheckResponse",
]
