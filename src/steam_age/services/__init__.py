"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .estimator import estimate, local_slope
from .resolution_service import ResolutionService

__all__ = [
    "ResolutionService",
    "estimate",
    "local_slope",
]
