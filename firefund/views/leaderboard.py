"""
Leaderboard view adapters.

Ranked officer list, and the selected officer's performance card,
tenure, network contribution and chart.
"""

from datetime import date
from typing import Any

from firefund.config.business_constants import DEFAULT_NETWORK_DEPTH
from firefund.services.network.history import (
    ChartMetric,
    ChartPeriod,
    default_chart_count,
)
from firefund.services.network.models import (
    ChartPoint,
    NetworkRollupReport,
    RankedMember,
)
from firefund.services.network.pipeline import NetworkRollupService
from firefund.services.network.ranking import (
    RankingMetric,
    RankingPeriod,
    filter_members,
)
from firefund.utils.datetime_utils import tenure_months, utc_now
from firefund.utils.exceptions import MemberNotFoundError
from firefund.views.base import member_card
from firefund.views.formatters import rank_badge, tier_label
from firefund.views.state import ViewState


class LeaderboardDetailView:
    """Selected loan officer detail on the leaderboard."""

    def __init__(
        self,
        service: NetworkRollupService,
        max_depth: int = DEFAULT_NETWORK_DEPTH,
        chart_period: ChartPeriod = ChartPeriod.MONTHS,
        chart_metric: ChartMetric = ChartMetric.VOLUME,
        chart_count: int | None = None,
    ) -> None:
        self.service = service
        self.max_depth = max_depth
        self.chart_period = chart_period
        self.chart_metric = chart_metric
        if chart_count is None:
            chart_count = default_chart_count(chart_period)
        self.chart_count = chart_count

    async def load(self, member_id: str, today: date | None = None) -> ViewState:
        """Load detail data for one member."""
        today = today or utc_now().date()
        try:
            report = await self.service.run(member_id, self.max_depth)
            chart = await self.service.get_chart_series(
                member_id,
                period=self.chart_period,
                metric=self.chart_metric,
                count=self.chart_count,
                today=today,
            )
        except MemberNotFoundError:
            return ViewState.not_found(member_id)

        data = self.build(report, chart, today)
        if report.is_empty:
            return ViewState.empty_network(data)
        return ViewState.ready(data)

    def build(
        self,
        report: NetworkRollupReport,
        chart: list[ChartPoint],
        today: date,
    ) -> dict[str, Any]:
        """Map report and chart points to display data."""
        snapshot = report.root_snapshot

        return {
            **member_card(report.root),
            "tenure_months": tenure_months(report.root.created_at, today),
            "monthly_volume": snapshot.monthly_volume,
            "monthly_loans": snapshot.monthly_loan_count,
            "ytd_volume": snapshot.ytd_volume,
            "ytd_loans": snapshot.ytd_loan_count,
            "compensation": snapshot.compensation,
            "fire_fund_balance": snapshot.fire_fund_balance,
            "recruitment_tier": snapshot.recruitment_tier,
            "tier_label": tier_label(snapshot.recruitment_tier),
            "active_recruits": snapshot.active_recruit_count,
            "rank": snapshot.rank,
            "network_contribution": report.rollup.total_contribution,
            "network_size": report.rollup.member_count,
            "chart": {
                "period": self.chart_period.value,
                "metric": self.chart_metric.value,
                "points": [
                    {"label": point.label, "value": point.value}
                    for point in chart
                ],
            },
        }


class LeaderboardView:
    """Ranked loan officer list."""

    def __init__(
        self,
        service: NetworkRollupService,
        metric: RankingMetric = RankingMetric.VOLUME,
        period: RankingPeriod = RankingPeriod.MONTHLY,
    ) -> None:
        self.service = service
        self.metric = metric
        self.period = period

    async def load(self, search: str | None = None) -> ViewState:
        """Load the leaderboard, optionally filtered by a search term."""
        ranked = await self.service.get_leaderboard(self.metric, self.period)
        return ViewState.ready(self.build(filter_members(ranked, search)))

    def build(self, ranked: list[RankedMember]) -> dict[str, Any]:
        """Map ranked members to display rows."""
        return {
            "period": self.period.value,
            "metric": self.metric.value,
            "officers": [
                {
                    **member_card(row.member),
                    "position": row.position,
                    "rank": row.rank,
                    "badge": rank_badge(row.rank),
                    "value": row.value,
                    "monthly_volume": row.snapshot.monthly_volume,
                    "monthly_loans": row.snapshot.monthly_loan_count,
                    "ytd_volume": row.snapshot.ytd_volume,
                    "ytd_loans": row.snapshot.ytd_loan_count,
                    "tier_label": tier_label(row.snapshot.recruitment_tier),
                }
                for row in ranked
            ],
        }
