from dataclasses import dataclass

from steam_age.entities import ResolutionSource


@dataclass
class ResolutionMetrics:
    """Track outcome counters for resolutions served by this process."""

    total_requests: int = 0
    cache_hits: int = 0
    upstream_hits: int = 0
    estimates: int = 0
    failures: int = 0
    total_resolution_time_ms: float = 0.0

    @property
    def cache_hit_rate(self) -> float:
        """Share of requests answered from the cache."""
        if self.total_requests == 0:
            return 0.0
        return self.cache_hits / self.total_requests

    @property
    def avg_resolution_time_ms(self) -> float:
        """Calculate average resolution time."""
        if self.total_requests == 0:
            return 0.0
        return self.total_resolution_time_ms / self.total_requests

    def record(self, source: ResolutionSource, duration_ms: float) -> None:
        """Record a successful resolution."""
        self.total_requests += 1
        self.total_resolution_time_ms += duration_ms
        if source is ResolutionSource.CACHE:
            self.cache_hits += 1
        elif source is ResolutionSource.UPSTREAM:
            self.upstream_hits += 1
        else:
            self.estimates += 1

    def record_failure(self, duration_ms: float) -> None:
        """Record a resolution that ended unresolvable."""
        self.total_requests += 1
        self.failures += 1
        self.total_resolution_time_ms += duration_ms

    def to_dict(self) -> dict[str, float | int]:
        """Convert metrics to dictionary."""
        return {
            "total_requests": self.total_requests,
            "cache_hits": self.cache_hits,
            "upstream_hits": self.upstream_hits,
            "estimates": self.estimates,
            "failures": self.failures,
            "cache_hit_rate": self.cache_hit_rate,
            "avg_resolution_time_ms": self.avg_resolution_time_ms,
        }
