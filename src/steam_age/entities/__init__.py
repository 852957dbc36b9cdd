"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .creation_record import CreationRecord
from .estimate import Estimate
from .resolution import ResolutionEntity, ResolutionSource
from .upstream_outcome import UpstreamOutcome, UpstreamStatus

__all__ = [
    "CreationRecord",
    "Estimate",
    "ResolutionEntity",
    "ResolutionSource",
    "UpstreamOutcome",
    "UpstreamStatus",
]
