"""
Profile team view adapter.

Upline chain, downline grouped by level and relationship counts.
"""

from typing import Any

from firefund.config.business_constants import DEFAULT_NETWORK_DEPTH
from firefund.services.network.models import (
    NetworkCounts,
    NetworkRollupReport,
    UplineEntry,
)
from firefund.services.network.pipeline import NetworkRollupService
from firefund.utils.exceptions import MemberNotFoundError
from firefund.views.base import member_card, node_row
from firefund.views.state import ViewState


class ProfileTeamView:
    """Team section of the profile workspace."""

    def __init__(
        self,
        service: NetworkRollupService,
        max_depth: int = DEFAULT_NETWORK_DEPTH,
    ) -> None:
        self.service = service
        self.max_depth = max_depth

    async def load(self, member_id: str) -> ViewState:
        """Load team data for the acting member."""
        try:
            report = await self.service.run(member_id, self.max_depth)
            upline = await self.service.resolve_upline(member_id, self.max_depth)
            summary = await self.service.get_network_summary(member_id)
        except MemberNotFoundError:
            return ViewState.not_found(member_id)

        data = self.build(report, upline, summary)
        if report.is_empty:
            return ViewState.empty_network(data)
        return ViewState.ready(data)

    def build(
        self,
        report: NetworkRollupReport,
        upline: list[UplineEntry],
        summary: NetworkCounts,
    ) -> dict[str, Any]:
        """Map team data to display data."""
        return {
            "member_id": report.root.id,
            "upline": [
                {"level": entry.level, **member_card(entry.member)}
                for entry in upline
            ],
            "downline": [
                {
                    "level": level,
                    "members": [node_row(node) for node in report.nodes_at_level(level)],
                }
                for level in range(1, report.max_depth + 1)
            ],
            "direct_recruits": len(report.nodes_at_level(1)),
            "summary": {
                "upline_levels": summary.upline_count,
                "downline_members": summary.downline_count,
                "direct_recruits": summary.direct_recruits_count,
            },
        }
