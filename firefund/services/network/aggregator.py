"""
Level aggregator.

Sums enriched node contributions per level and across the network.
"""

from collections.abc import Iterable
from decimal import Decimal

from firefund.services.network.models import NetworkNode, RollupResult
from firefund.services.network.policy import (
    DEFAULT_EXTRAPOLATION,
    FixedMultiplierExtrapolation,
)


def aggregate(
    nodes: Iterable[NetworkNode],
    extrapolation: FixedMultiplierExtrapolation = DEFAULT_EXTRAPOLATION,
) -> RollupResult:
    """
    Aggregate contributions by level.

    total_contribution is the sum of the per-level totals, so the two
    always agree. Only levels that have members appear in the per-level
    dicts. Result does not depend on node order.

    Args:
        nodes: Enriched nodes
        extrapolation: YTD / annual projection policy

    Returns:
        RollupResult
    """
    per_level_contribution: dict[int, Decimal] = {}
    per_level_member_count: dict[int, int] = {}

    for node in nodes:
        per_level_contribution[node.level] = (
            per_level_contribution.get(node.level, Decimal("0"))
            + node.computed_contribution
        )
        per_level_member_count[node.level] = (
            per_level_member_count.get(node.level, 0) + 1
        )

    levels = sorted(per_level_contribution)
    per_level_contribution = {lvl: per_level_contribution[lvl] for lvl in levels}
    per_level_member_count = {lvl: per_level_member_count[lvl] for lvl in levels}

    total = sum(per_level_contribution.values(), Decimal("0"))

    return RollupResult(
        total_contribution=total,
        per_level_contribution=per_level_contribution,
        per_level_member_count=per_level_member_count,
        ytd_total=extrapolation.ytd_total(total),
        projected_annual=extrapolation.projected_annual(total),
    )


def level_breakdown(
    result: RollupResult, max_depth: int
) -> list[tuple[int, Decimal, int]]:
    """
    Per-level rows for display, zero-filled for levels without members.

    Args:
        result: Aggregated rollup
        max_depth: Deepest level shown

    Returns:
        (level, contribution, member_count) for levels 1..max_depth
    """
    return [
        (
            level,
            result.per_level_contribution.get(level, Decimal("0")),
            result.per_level_member_count.get(level, 0),
        )
        for level in range(1, max_depth + 1)
    ]
