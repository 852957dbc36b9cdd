"""
Tests for the resolution service.
"""

import asyncio

import pytest

from steam_age.entities import ResolutionEntity, ResolutionSource, UpstreamOutcome
from steam_age.exceptions import UnresolvableError

pytestmark = pytest.mark.asyncio


class TestCacheHit:
    async def test_returns_cached_value_without_upstream_call(self, service, store, resolver):
        store.records[76561197960287930] = 1063407589

        result = await service.resolve(76561197960287930)

        assert result == ResolutionEntity(
            identifier=76561197960287930,
            created_at=1063407589,
            error_margin=0,
            source=ResolutionSource.CACHE,
        )
        assert result.is_exact
        assert resolver.calls == []

    async def test_cache_unavailable_is_unresolvable(self, service, store, resolver):
        store.unavailable = True

        with pytest.raises(UnresolvableError) as exc_info:
            await service.resolve(42)

        assert exc_info.value.identifier == 42
        assert resolver.calls == []


class TestUpstreamHit:
    async def test_empty_cache_upstream_found_caches_value(self, service, store, resolver):
        resolver.outcomes[42] = UpstreamOutcome.found(555)

        result = await service.resolve(42)

        assert result.created_at == 555
        assert result.error_margin == 0
        assert result.source is ResolutionSource.UPSTREAM
        assert store.records == {42: 555}

    async def test_second_resolution_is_served_from_cache(self, service, resolver):
        resolver.outcomes[42] = UpstreamOutcome.found(555)

        first = await service.resolve(42)
        second = await service.resolve(42)

        assert (first.created_at, first.error_margin) == (second.created_at, second.error_margin)
        assert second.source is ResolutionSource.CACHE
        assert resolver.calls == [42]

    async def test_cache_write_failure_still_returns_exact_value(self, service, store, resolver):
        store.writes_unavailable = True
        resolver.outcomes[42] = UpstreamOutcome.found(555)

        result = await service.resolve(42)

        assert (result.created_at, result.error_margin) == (555, 0)
        assert store.records == {}

    async def test_concurrent_resolutions_of_same_identifier(self, service, store, resolver):
        resolver.outcomes[42] = UpstreamOutcome.found(555)

        first, second = await asyncio.gather(service.resolve(42), service.resolve(42))

        assert first.created_at == second.created_at == 555
        assert first.error_margin == second.error_margin == 0
        assert resolver.calls == [42, 42]
        assert len(store.insert_calls) == 2
        assert store.records == {42: 555}


class TestEstimate:
    async def test_interpolates_between_neighbours(self, service, store, resolver):
        store.records.update({100: 1000, 200: 2000})

        result = await service.resolve(150)

        assert (result.created_at, result.error_margin) == (1500, 500)
        assert result.source is ResolutionSource.ESTIMATE
        assert not result.is_exact
        assert resolver.calls == [150]

    async def test_extrapolates_outside_span(self, service, store):
        store.records.update({100: 1000, 200: 2000})

        result = await service.resolve(300)

        assert (result.created_at, result.error_margin) == (3000, 2000)

    async def test_transport_error_also_estimates(self, service, store, resolver):
        store.records.update({100: 1000, 200: 2000})
        resolver.outcomes[150] = UpstreamOutcome.transport_error("timeout")

        result = await service.resolve(150)

        assert (result.created_at, result.error_margin) == (1500, 500)

    async def test_estimates_are_never_cached(self, service, store):
        store.records.update({100: 1000, 200: 2000})

        await service.resolve(150)

        assert store.records == {100: 1000, 200: 2000}
        assert store.insert_calls == []

    async def test_uses_nearest_records_only(self, service, store):
        store.records.update({10: 0, 100: 1000, 200: 2000, 5000: 999999})

        result = await service.resolve(150)

        assert (result.created_at, result.error_margin) == (1500, 500)

    async def test_neighbours_on_same_side_are_ordered_by_identifier(self, service, store):
        # Both neighbours lie below the target and come back nearest-first (200, 100)
        store.records.update({100: 1000, 200: 2000})

        result = await service.resolve(250)

        assert (result.created_at, result.error_margin) == (2500, 1500)

    async def test_deterministic_for_same_neighbours(self, service, store):
        store.records.update({100: 1000, 200: 2000})

        results = [await service.resolve(130) for _ in range(3)]

        assert len({(r.created_at, r.error_margin) for r in results}) == 1
        assert results[0].error_margin >= 0

    async def test_tie_prefers_lower_identifier(self, service, store):
        # 148 is nearest; 140 and 160 tie for second place and 140 wins
        store.records.update({140: 1400, 148: 1480, 160: 1700})

        result = await service.resolve(150)

        # references (140, 1400) and (148, 1480): slope 10, offset 100
        assert (result.created_at, result.error_margin) == (1500, 100)


class TestUnresolvable:
    async def test_empty_cache(self, service):
        with pytest.raises(UnresolvableError):
            await service.resolve(42)

    async def test_single_record(self, service, store):
        store.records[100] = 1000

        with pytest.raises(UnresolvableError) as exc_info:
            await service.resolve(150)

        assert "found 1" in exc_info.value.reason

    async def test_store_down_for_neighbour_query(self, service, store, resolver):
        store.records.update({100: 1000, 200: 2000})
        original_lookup = store.lookup_exact

        async def lookup_then_fail(identifier):
            value = await original_lookup(identifier)
            store.unavailable = True
            return value

        store.lookup_exact = lookup_then_fail

        with pytest.raises(UnresolvableError):
            await service.resolve(150)


class TestMetrics:
    async def test_counts_each_outcome(self, service, store, resolver):
        store.records.update({100: 1000, 200: 2000})
        resolver.outcomes[300] = UpstreamOutcome.found(3100)

        await service.resolve(100)
        await service.resolve(300)
        await service.resolve(150)
        store.records.clear()
        with pytest.raises(UnresolvableError):
            await service.resolve(150)

        metrics = service.metrics
        assert metrics.total_requests == 4
        assert metrics.cache_hits == 1
        assert metrics.upstream_hits == 1
        assert metrics.estimates == 1
        assert metrics.failures == 1
        assert metrics.cache_hit_rate == pytest.approx(0.25)

    async def test_get_stats(self, service, store):
        store.records[100] = 1000
        await service.resolve(100)

        stats = await service.get_stats()

        assert stats["cache"]["total_entries"] == 1
        assert stats["resolutions"]["cache_hits"] == 1
