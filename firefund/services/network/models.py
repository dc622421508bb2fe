"""Pydantic value objects for the network rollup pipeline."""

from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class MemberInfo(BaseModel):
    """Member as seen by the rollup.

    Display fields are carried through untouched; only ``id`` and
    ``upline_id`` matter for traversal.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable member identifier")
    name: str = Field(default="Unknown User", description="Display name")
    email: str | None = Field(default=None)
    role: str | None = Field(default=None, description="Role or title")
    client_facing_title: str | None = Field(default=None)
    avatar: str | None = Field(default=None, description="Avatar reference")
    upline_id: str | None = Field(default=None, description="Recruiter member ID")
    is_producing: bool = Field(default=True)
    created_at: datetime | None = Field(default=None, description="Used for tenure")


class SnapshotData(BaseModel):
    """One month of performance for a member.

    Missing values are always zero, never None.
    """

    model_config = ConfigDict(frozen=True)

    member_id: str
    year: int | None = Field(default=None, description="None for the zero snapshot")
    month: int | None = Field(default=None, ge=1, le=12)
    monthly_volume: Decimal = Field(default=Decimal("0"), ge=0)
    monthly_loan_count: int = Field(default=0, ge=0)
    ytd_volume: Decimal = Field(default=Decimal("0"), ge=0)
    ytd_loan_count: int = Field(default=0, ge=0)
    compensation: Decimal = Field(default=Decimal("0"))
    fire_fund_contribution: Decimal = Field(default=Decimal("0"))
    fire_fund_balance: Decimal = Field(default=Decimal("0"))
    fire_fund_receipt: Decimal = Field(default=Decimal("0"))
    recruitment_tier: int = Field(default=0, ge=0)
    active_recruit_count: int = Field(default=0, ge=0)
    rank: int | None = Field(default=None)

    @classmethod
    def zero(cls, member_id: str) -> "SnapshotData":
        """Snapshot used for members with no data or a failed fetch."""
        return cls(member_id=member_id)

    @property
    def is_empty(self) -> bool:
        """True for the zero-default snapshot."""
        return self.year is None


class PartialNode(BaseModel):
    """Resolved tree position before enrichment."""

    model_config = ConfigDict(frozen=True)

    member: MemberInfo
    level: int = Field(..., ge=1, description="Depth below the root (1 = direct recruit)")


class NetworkNode(BaseModel):
    """Enriched node: member, level, snapshot and its FIRE Fund contribution."""

    model_config = ConfigDict(frozen=True)

    member: MemberInfo
    level: int = Field(..., ge=1)
    snapshot: SnapshotData
    computed_contribution: Decimal = Field(..., ge=0)


class RollupResult(BaseModel):
    """Per-level and whole-network contribution totals."""

    model_config = ConfigDict(frozen=True)

    total_contribution: Decimal = Field(default=Decimal("0"))
    per_level_contribution: dict[int, Decimal] = Field(default_factory=dict)
    per_level_member_count: dict[int, int] = Field(default_factory=dict)
    ytd_total: Decimal = Field(
        default=Decimal("0"),
        description="Extrapolated, not an actual year-to-date sum",
    )
    projected_annual: Decimal = Field(default=Decimal("0"))

    @property
    def member_count(self) -> int:
        """Members across all levels."""
        return sum(self.per_level_member_count.values())


class ThresholdState(StrEnum):
    """Compensation regime of a member."""

    BELOW_THRESHOLD = "below_threshold"
    ABOVE_THRESHOLD = "above_threshold"


class ThresholdEvaluation(BaseModel):
    """Outcome of the FIRE Fund threshold step function."""

    model_config = ConfigDict(frozen=True)

    monthly_volume: Decimal
    reached: bool
    outgoing_contribution: Decimal
    bonus_compensation: Decimal
    remaining_to_threshold: Decimal
    progress_percent: Decimal = Field(..., ge=0, le=100)

    @property
    def state(self) -> ThresholdState:
        """Regime derived from ``reached``."""
        if self.reached:
            return ThresholdState.ABOVE_THRESHOLD
        return ThresholdState.BELOW_THRESHOLD


class NetworkCounts(BaseModel):
    """Relationship counts shown on the profile."""

    model_config = ConfigDict(frozen=True)

    upline_count: int = Field(default=0, ge=0)
    downline_count: int = Field(default=0, ge=0)
    direct_recruits_count: int = Field(default=0, ge=0)


class UplineEntry(BaseModel):
    """One member above another in the relationship tree."""

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1)
    member: MemberInfo


class ChartPoint(BaseModel):
    """A (label, value) point for the chart renderer."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: Decimal


class RankedMember(BaseModel):
    """Leaderboard entry."""

    model_config = ConfigDict(frozen=True)

    member: MemberInfo
    snapshot: SnapshotData
    position: int = Field(..., ge=1, description="Place in the sorted leaderboard")
    rank: int = Field(
        ..., ge=1, description="Stored rank, or listing place when none is stored"
    )
    value: Decimal = Field(..., description="Ranked measure")


class NetworkRollupReport(BaseModel):
    """Everything one pipeline run produces for a root member."""

    model_config = ConfigDict(frozen=True)

    root: MemberInfo
    max_depth: int = Field(..., ge=1)
    root_snapshot: SnapshotData
    nodes: tuple[NetworkNode, ...] = Field(default_factory=tuple)
    rollup: RollupResult
    threshold: ThresholdEvaluation

    @property
    def is_empty(self) -> bool:
        """True when the root has no recruits at any level."""
        return not self.nodes

    def nodes_at_level(self, level: int) -> list[NetworkNode]:
        """Nodes at one level, in traversal order."""
        return [node for node in self.nodes if node.level == level]
