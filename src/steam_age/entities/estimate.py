"""Estimate domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Estimate:
    """Interpolated creation time and its heuristic error margin (seconds)."""

    created_at: int
    error_margin: int
