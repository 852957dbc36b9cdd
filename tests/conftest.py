"""
Shared fixtures: in-memory implementations of the store and resolver
protocols, so the resolution logic can be tested without Redis or Steam.
"""

import asyncio

import pytest

from steam_age.entities import CreationRecord, UpstreamOutcome
from steam_age.exceptions import StoreConflictError, StoreUnavailableError
from steam_age.services import ResolutionService


class InMemoryCreationStore:
    """Dict-backed CreationStore with switchable outages."""

    def __init__(self, records: dict[int, int] | None = None) -> None:
        self.records: dict[int, int] = dict(records or {})
        self.unavailable = False
        self.writes_unavailable = False
        self.insert_calls: list[tuple[int, int]] = []

    def _check(self) -> None:
        if self.unavailable:
            raise StoreUnavailableError("store is down")

    async def lookup_exact(self, identifier: int) -> int | None:
        self._check()
        return self.records.get(identifier)

    async def insert(self, identifier: int, created_at: int) -> None:
        self.insert_calls.append((identifier, created_at))
        self._check()
        if self.writes_unavailable:
            raise StoreUnavailableError("store is read-only")
        # Yield so concurrent resolutions interleave like real network calls
        await asyncio.sleep(0)
        if identifier in self.records:
            raise StoreConflictError(identifier)
        self.records[identifier] = created_at

    async def nearest_two(self, identifier: int) -> list[CreationRecord]:
        self._check()
        ranked = sorted(self.records, key=lambda known: (abs(known - identifier), known))
        return [CreationRecord(known, self.records[known]) for known in ranked[:2]]

    async def count_all(self) -> int:
        self._check()
        return len(self.records)

    async def health_check(self) -> bool:
        return not self.unavailable

    async def get_stats(self) -> dict:
        return {"key_prefix": "memory", "total_entries": await self.count_all()}


class StubResolver:
    """UpstreamResolver returning canned outcomes and recording calls."""

    def __init__(self, outcomes: dict[int, UpstreamOutcome] | None = None) -> None:
        self.outcomes: dict[int, UpstreamOutcome] = dict(outcomes or {})
        self.calls: list[int] = []
        self.closed = False

    async def resolve(self, identifier: int) -> UpstreamOutcome:
        self.calls.append(identifier)
        await asyncio.sleep(0)
        return self.outcomes.get(identifier, UpstreamOutcome.not_found("private profile"))

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def store() -> InMemoryCreationStore:
    """Empty in-memory store."""
    return InMemoryCreationStore()


@pytest.fixture
def resolver() -> StubResolver:
    """Resolver that reports every profile as private unless told otherwise."""
    return StubResolver()


@pytest.fixture
def service(store: InMemoryCreationStore, resolver: StubResolver) -> ResolutionService:
    """Resolution service wired to the in-memory fakes."""
    return ResolutionService.create(store=store, resolver=resolver)
