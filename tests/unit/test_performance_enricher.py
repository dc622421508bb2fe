"""
Unit tests for the performance enricher.

Tests cover:
- Contribution per node
- Zero snapshot for missing data, failures and timeouts
- Concurrent fetches
- Cancellation
"""

import asyncio
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from firefund.services.network import (
    MemberInfo,
    PartialNode,
    PerformanceEnricher,
    SnapshotData,
)


def partial(member_id: str, level: int = 1) -> PartialNode:
    return PartialNode(member=MemberInfo(id=member_id), level=level)


class TestEnrich:
    """Test node enrichment."""

    @pytest.mark.asyncio
    async def test_contribution_from_volume(self, enricher):
        """1,800,000 monthly volume contributes 1,800."""
        nodes = await enricher.enrich([partial("sarah")])

        assert nodes[0].computed_contribution == Decimal("1800")
        assert nodes[0].snapshot.monthly_volume == Decimal("1800000")

    @pytest.mark.asyncio
    async def test_preserves_order_and_levels(self, enricher):
        """Output matches input order and keeps levels."""
        inputs = [partial("mike", 1), partial("emily", 2), partial("sarah", 1)]

        nodes = await enricher.enrich(inputs)

        assert [(n.member.id, n.level) for n in nodes] == [
            ("mike", 1), ("emily", 2), ("sarah", 1),
        ]

    @pytest.mark.asyncio
    async def test_empty_input(self, enricher, sample_source):
        """No nodes means no fetches."""
        assert await enricher.enrich([]) == []
        assert sample_source.snapshot_calls == []

    @pytest.mark.asyncio
    async def test_missing_snapshot_is_zero(self, sample_source):
        """Member without snapshot gets zeros, not None."""
        sample_source.add_member("newbie", upline_id="mike")
        enricher = PerformanceEnricher(sample_source)

        nodes = await enricher.enrich([partial("newbie", 2)])

        snapshot = nodes[0].snapshot
        assert snapshot.is_empty
        assert snapshot.monthly_volume == Decimal("0")
        assert snapshot.monthly_loan_count == 0
        assert nodes[0].computed_contribution == Decimal("0")

    @pytest.mark.asyncio
    async def test_latest_snapshot_used(self, sample_source):
        """Most recent month wins."""
        sample_source.add_snapshot("mike", year=2024, month=9, monthly_volume=2000000)
        sample_source.add_snapshot("mike", year=2023, month=12, monthly_volume=100)
        enricher = PerformanceEnricher(sample_source)

        nodes = await enricher.enrich([partial("mike")])

        assert nodes[0].snapshot.month == 9
        assert nodes[0].computed_contribution == Decimal("2000")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            OperationalError("SELECT 1", {}, Exception("connection lost")),
            ConnectionResetError("reset"),
            RuntimeError("unexpected"),
        ],
    )
    async def test_failed_fetch_degrades_to_zero(self, sample_source, error):
        """One failed fetch zero-defaults only that member."""
        sample_source.fail_snapshot("sarah", error)
        enricher = PerformanceEnricher(sample_source)

        nodes = await enricher.enrich([partial("sarah"), partial("mike")])

        assert nodes[0].snapshot.is_empty
        assert nodes[0].computed_contribution == Decimal("0")
        assert nodes[1].computed_contribution == Decimal("1200")

    @pytest.mark.asyncio
    async def test_timeout_degrades_to_zero(self, sample_source):
        """Fetch exceeding the timeout counts as no data."""
        original = sample_source.get_latest_performance_snapshot

        async def slow_fetch(member_id):
            if member_id == "sarah":
                await asyncio.sleep(1)
            return await original(member_id)

        sample_source.get_latest_performance_snapshot = slow_fetch
        enricher = PerformanceEnricher(sample_source, fetch_timeout=0.01)

        nodes = await enricher.enrich([partial("sarah"), partial("mike")])

        assert nodes[0].snapshot.is_empty
        assert nodes[1].computed_contribution == Decimal("1200")

    @pytest.mark.asyncio
    async def test_fetches_run_concurrently(self, sample_source):
        """All snapshot fetches are in flight together."""
        original = sample_source.get_latest_performance_snapshot
        in_flight = 0
        peak = 0

        async def tracked_fetch(member_id):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return await original(member_id)

        sample_source.get_latest_performance_snapshot = tracked_fetch
        enricher = PerformanceEnricher(sample_source)

        await enricher.enrich([partial("sarah"), partial("mike"), partial("emily", 2)])

        assert peak == 3

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, sample_source):
        """Cancellation is not turned into a zero snapshot."""
        sample_source.fail_snapshot("sarah", asyncio.CancelledError())
        enricher = PerformanceEnricher(sample_source)

        with pytest.raises(asyncio.CancelledError):
            await enricher.enrich([partial("sarah")])

    @pytest.mark.asyncio
    async def test_custom_rate(self, sample_source):
        """Contribution rate is configurable."""
        enricher = PerformanceEnricher(sample_source, contribution_rate=Decimal("0.002"))

        nodes = await enricher.enrich([partial("mike")])

        assert nodes[0].computed_contribution == Decimal("2400")


class TestFetchRootSnapshot:
    """Test root snapshot fetch."""

    @pytest.mark.asyncio
    async def test_root_snapshot(self, enricher):
        """Root snapshot comes from the root fetcher."""
        snapshot = await enricher.fetch_root_snapshot("root")

        assert snapshot.monthly_volume == Decimal("1000000")

    @pytest.mark.asyncio
    async def test_root_snapshot_failure(self, sample_source):
        """Failed root fetch gives the zero snapshot."""
        sample_source.fail_snapshot("root", TimeoutError())
        enricher = PerformanceEnricher(sample_source)

        snapshot = await enricher.fetch_root_snapshot("root")

        assert snapshot == SnapshotData.zero("root")


class TestBoundedConcurrency:
    """Test the in-flight fetch limit."""

    @pytest.mark.asyncio
    async def test_in_flight_fetches_bounded(self, fake_source):
        """A wide level never has more fetches in flight than the limit."""
        for i in range(50):
            fake_source.add_member(f"m{i}", upline_id="root")
            fake_source.add_snapshot(f"m{i}", monthly_volume=1000)
        original = fake_source.get_latest_performance_snapshot
        in_flight = 0
        peak = 0

        async def tracked_fetch(member_id):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.001)
            in_flight -= 1
            return await original(member_id)

        fake_source.get_latest_performance_snapshot = tracked_fetch
        enricher = PerformanceEnricher(fake_source, max_concurrency=5)

        nodes = await enricher.enrich([partial(f"m{i}") for i in range(50)])

        assert peak == 5
        assert len(nodes) == 50
        assert all(n.computed_contribution == Decimal("1") for n in nodes)

    @pytest.mark.asyncio
    async def test_fetch_latest_snapshots_keeps_order(self, enricher):
        """Snapshots come back in member order."""
        snapshots = await enricher.fetch_latest_snapshots(["mike", "ghost", "sarah"])

        assert [s.member_id for s in snapshots] == ["mike", "ghost", "sarah"]
        assert snapshots[1].is_empty

    @pytest.mark.parametrize("limit", [0, -3])
    def test_invalid_limit(self, sample_source, limit):
        """Limit below one is rejected."""
        with pytest.raises(ValueError):
            PerformanceEnricher(sample_source, max_concurrency=limit)
