"""
Leaderboard ranking.

Orders loan officers by monthly or year-to-date volume or loan count.
Members without a snapshot rank on zeros.
"""

from collections.abc import Sequence
from decimal import Decimal
from enum import StrEnum

from firefund.services.network.models import (
    MemberInfo,
    RankedMember,
    SnapshotData,
)


class RankingPeriod(StrEnum):
    """Snapshot fields the leaderboard ranks on."""

    MONTHLY = "monthly"
    YTD = "ytd"


class RankingMetric(StrEnum):
    """Leaderboard ranking measure."""

    VOLUME = "volume"
    LOANS = "loans"


def ranking_value(
    snapshot: SnapshotData, metric: RankingMetric, period: RankingPeriod
) -> Decimal:
    """Value a member is ranked by."""
    if period == RankingPeriod.YTD:
        if metric == RankingMetric.LOANS:
            return Decimal(snapshot.ytd_loan_count)
        return snapshot.ytd_volume

    if metric == RankingMetric.LOANS:
        return Decimal(snapshot.monthly_loan_count)
    return snapshot.monthly_volume


def rank_members(
    entries: Sequence[tuple[MemberInfo, SnapshotData | None]],
    metric: RankingMetric = RankingMetric.VOLUME,
    period: RankingPeriod = RankingPeriod.MONTHLY,
) -> list[RankedMember]:
    """
    Rank members for the leaderboard.

    Sorted by the chosen value, highest first; ties keep the listing
    order. ``rank`` is the stored rank when the snapshot has one,
    otherwise the member's 1-based place in the listing.

    Args:
        entries: (member, latest snapshot or None) in listing order
        metric: Volume or loan count
        period: Monthly or year-to-date fields

    Returns:
        Ranked members, best first
    """
    rows = []
    for index, (member, snapshot) in enumerate(entries):
        snapshot = snapshot or SnapshotData.zero(member.id)
        rows.append(
            RankedMember(
                member=member,
                snapshot=snapshot,
                position=1,
                rank=snapshot.rank or index + 1,
                value=ranking_value(snapshot, metric, period),
            )
        )

    ordered = sorted(rows, key=lambda row: row.value, reverse=True)
    return [
        row.model_copy(update={"position": position})
        for position, row in enumerate(ordered, start=1)
    ]


def filter_members(
    ranked: Sequence[RankedMember], search: str | None
) -> list[RankedMember]:
    """
    Keep ranked members whose name, email or role contains the term.

    Ranks are kept; positions are renumbered over the kept members.
    """
    if not search:
        return list(ranked)

    term = search.lower()
    kept = [
        row for row in ranked
        if term in row.member.name.lower()
        or term in (row.member.email or "").lower()
        or term in (row.member.role or "").lower()
    ]
    return [
        row.model_copy(update={"position": position})
        for position, row in enumerate(kept, start=1)
    ]
