"""
FIRE Fund view adapter.

Downline earnings, per-level breakdown and the threshold panel.
"""

from typing import Any

from firefund.config.business_constants import DEFAULT_NETWORK_DEPTH
from firefund.services.network.aggregator import level_breakdown
from firefund.services.network.models import NetworkRollupReport
from firefund.services.network.pipeline import NetworkRollupService
from firefund.utils.exceptions import MemberNotFoundError
from firefund.views.base import node_row
from firefund.views.formatters import (
    format_currency,
    format_millions,
    recruitment_status_label,
)
from firefund.views.state import ViewState


class FireFundView:
    """FIRE Fund workspace data."""

    def __init__(
        self,
        service: NetworkRollupService,
        max_depth: int = DEFAULT_NETWORK_DEPTH,
    ) -> None:
        self.service = service
        self.max_depth = max_depth

    async def load(self, member_id: str) -> ViewState:
        """Load FIRE Fund data for the acting member."""
        try:
            report = await self.service.run(member_id, self.max_depth)
        except MemberNotFoundError:
            return ViewState.not_found(member_id)

        data = self.build(report)
        if report.is_empty:
            return ViewState.empty_network(data)
        return ViewState.ready(data)

    def build(self, report: NetworkRollupReport) -> dict[str, Any]:
        """Map a rollup report to display data."""
        rollup = report.rollup
        threshold = report.threshold

        return {
            "member_id": report.root.id,
            "monthly_volume": threshold.monthly_volume,
            "threshold": {
                "state": threshold.state.value,
                "reached": threshold.reached,
                "outgoing_contribution": threshold.outgoing_contribution,
                "bonus_compensation": threshold.bonus_compensation,
                "remaining": threshold.remaining_to_threshold,
                "progress_percent": threshold.progress_percent,
            },
            "recruitment_status": recruitment_status_label(
                report.root_snapshot.recruitment_tier
            ),
            "total_contribution": rollup.total_contribution,
            "ytd_total": rollup.ytd_total,
            "projected_annual": rollup.projected_annual,
            "network_size": rollup.member_count,
            "levels": [
                {"level": level, "contribution": amount, "member_count": count}
                for level, amount, count in level_breakdown(rollup, report.max_depth)
            ],
            "members": [node_row(node) for node in report.nodes],
            "display": {
                "monthly_volume": format_millions(threshold.monthly_volume),
                "remaining": format_millions(threshold.remaining_to_threshold),
                "total_contribution": format_currency(rollup.total_contribution),
                "ytd_total": format_currency(rollup.ytd_total),
                "projected_annual": format_currency(rollup.projected_annual),
                "bonus_compensation": format_currency(threshold.bonus_compensation),
            },
        }
