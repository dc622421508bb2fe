"""
Data access contract for the network rollup.

Defines the read-only NetworkDataSource protocol the pipeline depends on
and its SQLAlchemy-backed implementation.
"""

from decimal import Decimal
from typing import Protocol

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from firefund.models.member import Member
from firefund.models.performance import PerformanceSnapshot
from firefund.repositories.member_repository import MemberRepository
from firefund.repositories.performance_repository import (
    PerformanceRepository,
)
from firefund.repositories.relationship_repository import (
    RelationshipRepository,
)
from firefund.services.network.models import (
    MemberInfo,
    NetworkCounts,
    SnapshotData,
    UplineEntry,
)


class NetworkDataSource(Protocol):
    """Read-only access to members, relationships and snapshots."""

    async def get_member(self, member_id: str) -> MemberInfo | None:
        ...

    async def get_direct_recruits(self, upline_id: str) -> list[MemberInfo]:
        ...

    async def list_members(self) -> list[MemberInfo]:
        ...

    async def get_latest_performance_snapshot(
        self, member_id: str
    ) -> SnapshotData | None:
        ...

    async def get_root_performance_snapshot(
        self, root_id: str
    ) -> SnapshotData | None:
        ...

    async def get_performance_history(
        self, member_id: str, since_year: int, since_month: int
    ) -> list[SnapshotData]:
        ...

    async def get_upline(
        self, member_id: str, max_levels: int
    ) -> list[UplineEntry]:
        ...

    async def count_network(self, member_id: str) -> NetworkCounts:
        ...


def _money(value: Decimal | None) -> Decimal:
    return value if value is not None else Decimal("0")


def member_to_info(member: Member) -> MemberInfo:
    """Map a Member row to its value object."""
    return MemberInfo(
        id=member.id,
        name=member.name or "Unknown User",
        email=member.email,
        role=member.role,
        client_facing_title=member.client_facing_title,
        avatar=member.avatar,
        upline_id=member.recruiter_id,
        is_producing=bool(member.is_producing),
        created_at=member.created_at,
    )


def snapshot_to_data(row: PerformanceSnapshot) -> SnapshotData:
    """Map a PerformanceSnapshot row, zero-defaulting NULL columns."""
    return SnapshotData(
        member_id=row.user_id,
        year=row.year,
        month=row.month,
        monthly_volume=_money(row.monthly_volume),
        monthly_loan_count=row.monthly_loans or 0,
        ytd_volume=_money(row.ytd_volume),
        ytd_loan_count=row.ytd_loans or 0,
        compensation=_money(row.compensation),
        fire_fund_contribution=_money(row.fire_fund_contribution),
        fire_fund_balance=_money(row.fire_fund_balance),
        fire_fund_receipt=_money(row.fire_fund_receipt),
        recruitment_tier=row.recruitment_tier or 0,
        active_recruit_count=row.active_recruits or 0,
        rank=row.rank,
    )


class SqlAlchemyNetworkDataSource:
    """
    NetworkDataSource over the hosted PostgreSQL tables.

    Each call opens its own short-lived session: an AsyncSession does not
    allow concurrent operations, and the enricher fetches sibling
    snapshots concurrently.
    """

    def __init__(
        self, session_maker: async_sessionmaker[AsyncSession]
    ) -> None:
        """
        Initialize data source.

        Args:
            session_maker: Factory for async sessions
        """
        self.session_maker = session_maker

    async def get_member(self, member_id: str) -> MemberInfo | None:
        """Get a member by ID."""
        async with self.session_maker() as session:
            member = await MemberRepository(session).get_by_id(member_id)
            return member_to_info(member) if member else None

    async def get_direct_recruits(self, upline_id: str) -> list[MemberInfo]:
        """Get all members whose recruiter is upline_id."""
        async with self.session_maker() as session:
            recruits = await MemberRepository(session).get_direct_recruits(
                upline_id
            )
            return [member_to_info(m) for m in recruits]

    async def list_members(self) -> list[MemberInfo]:
        """Get all members, newest first."""
        async with self.session_maker() as session:
            members = await MemberRepository(session).list_members()
            return [member_to_info(m) for m in members]

    async def get_latest_performance_snapshot(
        self, member_id: str
    ) -> SnapshotData | None:
        """Get the member's most recent snapshot."""
        async with self.session_maker() as session:
            row = await PerformanceRepository(session).get_latest(member_id)
            return snapshot_to_data(row) if row else None

    async def get_root_performance_snapshot(
        self, root_id: str
    ) -> SnapshotData | None:
        """Get the root member's own most recent snapshot."""
        return await self.get_latest_performance_snapshot(root_id)

    async def get_performance_history(
        self, member_id: str, since_year: int, since_month: int
    ) -> list[SnapshotData]:
        """Get snapshots from (since_year, since_month) onwards."""
        async with self.session_maker() as session:
            rows = await PerformanceRepository(session).get_history(
                member_id, since_year, since_month
            )
            return [snapshot_to_data(row) for row in rows]

    async def get_upline(
        self, member_id: str, max_levels: int
    ) -> list[UplineEntry]:
        """Get uplines of a member up to max_levels."""
        async with self.session_maker() as session:
            edges = await RelationshipRepository(session).get_upline(
                member_id, max_levels
            )

            entries = []
            for edge in edges:
                if edge.upline_user is None:
                    logger.warning(
                        "Relationship edge without upline member",
                        extra={"member_id": member_id, "edge_id": edge.id},
                    )
                    continue
                entries.append(
                    UplineEntry(
                        level=edge.relationship_level,
                        member=member_to_info(edge.upline_user),
                    )
                )
            return entries

    async def count_network(self, member_id: str) -> NetworkCounts:
        """Count upline edges, downline edges and direct recruits."""
        async with self.session_maker() as session:
            relationship_repo = RelationshipRepository(session)
            upline_count = await relationship_repo.count_upline(member_id)
            downline_count = await relationship_repo.count_downline(member_id)
            direct_count = await MemberRepository(
                session
            ).count_direct_recruits(member_id)

        return NetworkCounts(
            upline_count=upline_count,
            downline_count=downline_count,
            direct_recruits_count=direct_count,
        )
