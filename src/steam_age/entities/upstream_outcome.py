"""Upstream lookup outcome domain entity."""

from dataclasses import dataclass
from enum import Enum


class UpstreamStatus(str, Enum):
    """Result category of a single Steam Web API call."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class UpstreamOutcome:
    """Outcome of one upstream profile lookup.

    Attributes:
        status: Result category
        created_at: Creation time (Unix seconds), set only when FOUND
        detail: Human-readable reason for NOT_FOUND / TRANSPORT_ERROR
    """

    status: UpstreamStatus
    created_at: int | None = None
    detail: str = ""

    @classmethod
    def found(cls, created_at: int) -> "UpstreamOutcome":
        return cls(status=UpstreamStatus.FOUND, created_at=created_at)

    @classmethod
    def not_found(cls, detail: str = "") -> "UpstreamOutcome":
        return cls(status=UpstreamStatus.NOT_FOUND, detail=detail)

    @classmethod
    def transport_error(cls, detail: str) -> "UpstreamOutcome":
        return cls(status=UpstreamStatus.TRANSPORT_ERROR, detail=detail)

    @property
    def is_found(self) -> bool:
        return self.status is UpstreamStatus.FOUND
