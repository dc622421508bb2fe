"""
Performance enricher.

Attaches each resolved member's latest performance snapshot and its
FIRE Fund contribution. Snapshot fetches run concurrently, at most
max_concurrency at a time; a failed fetch degrades to a zero snapshot instead of failing the batch.
"""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from decimal import Decimal

from loguru import logger

from firefund.config.business_constants import (
    DEFAULT_FETCH_CONCURRENCY,
    FIRE_FUND_CONTRIBUTION_RATE,
)
from firefund.services.network.data_access import NetworkDataSource
from firefund.services.network.models import (
    NetworkNode,
    PartialNode,
    SnapshotData,
)
from firefund.services.network.policy import compute_contribution
from firefund.utils.exceptions import is_recoverable_fetch_error

SnapshotFetcher = Callable[[str], Awaitable[SnapshotData | None]]


class PerformanceEnricher:
    """Fetches snapshots for resolved nodes and computes contributions."""

    def __init__(
        self,
        data_source: NetworkDataSource,
        contribution_rate: Decimal = FIRE_FUND_CONTRIBUTION_RATE,
        fetch_timeout: float | None = None,
        max_concurrency: int = DEFAULT_FETCH_CONCURRENCY,
    ) -> None:
        """
        Initialize enricher.

        Args:
            data_source: Snapshot source
            contribution_rate: Share of monthly volume contributed upward
            fetch_timeout: Per-fetch timeout in seconds (None = no limit)
            max_concurrency: Fetches in flight at once

        Raises:
            ValueError: If max_concurrency < 1
        """
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be >= 1, got {max_concurrency}")

        self.data_source = data_source
        self.contribution_rate = contribution_rate
        self.fetch_timeout = fetch_timeout
        self.max_concurrency = max_concurrency

    async def enrich(self, nodes: Sequence[PartialNode]) -> list[NetworkNode]:
        """
        Enrich every node with its latest snapshot.

        Waits for all fetches before returning. Order of the result
        matches the input order.

        Args:
            nodes: Resolved nodes

        Returns:
            Enriched nodes
        """
        if not nodes:
            return []

        snapshots = await self.fetch_latest_snapshots(
            [node.member.id for node in nodes]
        )

        enriched = [
            NetworkNode(
                member=node.member,
                level=node.level,
                snapshot=snapshot,
                computed_contribution=compute_contribution(
                    snapshot.monthly_volume, self.contribution_rate
                ),
            )
            for node, snapshot in zip(nodes, snapshots, strict=True)
        ]

        logger.debug(
            "Network enriched",
            extra={
                "node_count": len(enriched),
                "without_data": sum(1 for s in snapshots if s.is_empty),
            },
        )
        return enriched

    async def fetch_latest_snapshots(
        self, member_ids: Sequence[str]
    ) -> list[SnapshotData]:
        """
        Fetch latest snapshots, zero-defaulted, in input order.

        At most max_concurrency fetches are in flight. If the caller is
        cancelled, every pending fetch is cancelled with it.

        Args:
            member_ids: Member IDs

        Returns:
            One snapshot per member ID
        """
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def bounded_fetch(member_id: str) -> SnapshotData:
            async with semaphore:
                return await self.fetch_snapshot(
                    member_id, self.data_source.get_latest_performance_snapshot
                )

        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(bounded_fetch(member_id)) for member_id in member_ids]

        return [task.result() for task in tasks]

    async def fetch_root_snapshot(self, root_id: str) -> SnapshotData:
        """Fetch the root's own snapshot with the same zero fallback."""
        return await self.fetch_snapshot(
            root_id, self.data_source.get_root_performance_snapshot
        )

    async def fetch_snapshot(
        self, member_id: str, fetcher: SnapshotFetcher
    ) -> SnapshotData:
        """
        Fetch one snapshot, zero-defaulting on absence or failure.

        Args:
            member_id: Member ID
            fetcher: Data source coroutine function

        Returns:
            Snapshot, or the zero snapshot
        """
        try:
            if self.fetch_timeout is not None:
                snapshot = await asyncio.wait_for(
                    fetcher(member_id), timeout=self.fetch_timeout
                )
            else:
                snapshot = await fetcher(member_id)
        except Exception as e:
            if is_recoverable_fetch_error(e):
                logger.warning(
                    f"Snapshot fetch failed for member {member_id}: {e!r}"
                )
            else:
                logger.exception(
                    f"Unexpected snapshot fetch error for member {member_id}"
                )
            return SnapshotData.zero(member_id)

        if snapshot is None:
            return SnapshotData.zero(member_id)
        return snapshot
