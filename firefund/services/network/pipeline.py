"""
Network rollup service.

Runs the four stages in order: resolve the downline, enrich it with
snapshots, aggregate per level, and evaluate the root's threshold.
Read-only; every run starts from fresh data.
"""

import asyncio
from datetime import date

from loguru import logger

from firefund.config.business_constants import (
    DEFAULT_FETCH_CONCURRENCY,
    DEFAULT_NETWORK_DEPTH,
)
from firefund.services.network.aggregator import aggregate
from firefund.services.network.data_access import NetworkDataSource
from firefund.services.network.enricher import PerformanceEnricher
from firefund.services.network.history import (
    ChartMetric,
    ChartPeriod,
    build_chart_series,
    default_chart_count,
    history_window_start,
)
from firefund.services.network.models import (
    ChartPoint,
    NetworkCounts,
    NetworkRollupReport,
    RankedMember,
    UplineEntry,
)
from firefund.services.network.policy import (
    DEFAULT_EXTRAPOLATION,
    FixedMultiplierExtrapolation,
)
from firefund.services.network.ranking import (
    RankingMetric,
    RankingPeriod,
    rank_members,
)
from firefund.services.network.resolver import NetworkResolver
from firefund.services.network.threshold import evaluate_threshold
from firefund.utils.datetime_utils import utc_now
from firefund.utils.exceptions import InvalidDepthError


class NetworkRollupService:
    """Entry point used by the FIRE Fund, Leaderboard and Profile views."""

    def __init__(
        self,
        data_source: NetworkDataSource,
        fetch_timeout: float | None = None,
        extrapolation: FixedMultiplierExtrapolation = DEFAULT_EXTRAPOLATION,
        max_concurrency: int = DEFAULT_FETCH_CONCURRENCY,
    ) -> None:
        """
        Initialize rollup service.

        Args:
            data_source: Read-only member/relationship/snapshot source
            fetch_timeout: Per-snapshot fetch timeout in seconds
            extrapolation: YTD / annual projection policy
            max_concurrency: Data source calls in flight per fan-out
        """
        self.data_source = data_source
        self.resolver = NetworkResolver(data_source, max_concurrency=max_concurrency)
        self.enricher = PerformanceEnricher(
            data_source,
            fetch_timeout=fetch_timeout,
            max_concurrency=max_concurrency,
        )
        self.extrapolation = extrapolation

    async def run(
        self, root_id: str, max_depth: int = DEFAULT_NETWORK_DEPTH
    ) -> NetworkRollupReport:
        """
        Compute the network rollup for a root member.

        Args:
            root_id: Acting member ID
            max_depth: Deepest downline level included

        Returns:
            NetworkRollupReport (is_empty when there are no recruits)

        Raises:
            MemberNotFoundError: If the root does not exist
            InvalidDepthError: If max_depth < 1
            ExceptionGroup: If recruit lookups fail (pending lookups are
                cancelled first)
        """
        if max_depth < 1:
            raise InvalidDepthError(max_depth)

        root = await self.resolver.get_root(root_id)

        async with asyncio.TaskGroup() as tg:
            expand_task = tg.create_task(self.resolver.expand(root.id, max_depth))
            root_snapshot_task = tg.create_task(
                self.enricher.fetch_root_snapshot(root.id)
            )
        partial_nodes = expand_task.result()
        root_snapshot = root_snapshot_task.result()
        nodes = await self.enricher.enrich(partial_nodes)

        rollup = aggregate(nodes, self.extrapolation)
        threshold = evaluate_threshold(root_snapshot.monthly_volume)

        logger.debug(
            "Network rollup computed",
            extra={
                "root_id": root.id,
                "max_depth": max_depth,
                "node_count": len(nodes),
                "threshold_reached": threshold.reached,
            },
        )

        return NetworkRollupReport(
            root=root,
            max_depth=max_depth,
            root_snapshot=root_snapshot,
            nodes=tuple(nodes),
            rollup=rollup,
            threshold=threshold,
        )

    async def resolve_upline(
        self, member_id: str, max_levels: int = DEFAULT_NETWORK_DEPTH
    ) -> list[UplineEntry]:
        """Members above member_id, nearest first."""
        return await self.resolver.resolve_upline(member_id, max_levels)

    async def get_network_summary(self, member_id: str) -> NetworkCounts:
        """
        Get upline, downline and direct recruit counts.

        Raises:
            MemberNotFoundError: If the member does not exist
        """
        await self.resolver.get_root(member_id)
        return await self.data_source.count_network(member_id)

    async def get_chart_series(
        self,
        member_id: str,
        period: ChartPeriod = ChartPeriod.MONTHS,
        metric: ChartMetric = ChartMetric.VOLUME,
        count: int | None = None,
        today: date | None = None,
    ) -> list[ChartPoint]:
        """
        Get a member's performance chart points.

        Args:
            member_id: Member ID
            period: Chart grouping
            metric: Plotted field
            count: Number of periods back (default depends on period)
            today: Reference date (defaults to current UTC date)

        Returns:
            Chart points in chronological order

        Raises:
            MemberNotFoundError: If the member does not exist
        """
        today = today or utc_now().date()
        if count is None:
            count = default_chart_count(period)
        await self.resolver.get_root(member_id)

        since_year, since_month = history_window_start(today, period, count)
        snapshots = await self.data_source.get_performance_history(
            member_id, since_year, since_month
        )
        return build_chart_series(snapshots, period, metric, today)

    async def get_leaderboard(
        self,
        metric: RankingMetric = RankingMetric.VOLUME,
        period: RankingPeriod = RankingPeriod.MONTHLY,
    ) -> list[RankedMember]:
        """
        Rank every member by volume or loan count.

        Snapshots are fetched with the enricher's bounded fan-out and
        zero fallback.

        Args:
            metric: Volume or loan count
            period: Monthly or year-to-date fields

        Returns:
            Ranked members, best first
        """
        members = await self.data_source.list_members()
        snapshots = await self.enricher.fetch_latest_snapshots(
            [member.id for member in members]
        )
        ranked = rank_members(
            list(zip(members, snapshots, strict=True)), metric, period
        )

        logger.debug(
            "Leaderboard ranked",
            extra={"metric": metric.value, "period": period.value, "size": len(ranked)},
        )
        return ranked
