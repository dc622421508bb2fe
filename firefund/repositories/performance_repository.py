"""
Performance repository.

Data access layer for PerformanceSnapshot model.
"""

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from firefund.models.performance import PerformanceSnapshot
from firefund.repositories.base import BaseRepository


class PerformanceRepository(BaseRepository[PerformanceSnapshot]):
    """Performance snapshot repository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize performance repository."""
        super().__init__(PerformanceSnapshot, session)

    async def get_latest(self, user_id: str) -> PerformanceSnapshot | None:
        """
        Get the most recent snapshot for a member.

        Args:
            user_id: Member ID

        Returns:
            Latest snapshot by (year, month) or None
        """
        stmt = (
            select(PerformanceSnapshot)
            .where(PerformanceSnapshot.user_id == user_id)
            .order_by(
                PerformanceSnapshot.year.desc(),
                PerformanceSnapshot.month.desc(),
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_history(
        self, user_id: str, since_year: int, since_month: int
    ) -> list[PerformanceSnapshot]:
        """
        Get snapshots from a starting period onwards.

        Args:
            user_id: Member ID
            since_year: First year included
            since_month: First month included in since_year

        Returns:
            Snapshots ordered by (year, month) ascending
        """
        stmt = (
            select(PerformanceSnapshot)
            .where(
                PerformanceSnapshot.user_id == user_id,
                or_(
                    PerformanceSnapshot.year > since_year,
                    and_(
                        PerformanceSnapshot.year == since_year,
                        PerformanceSnapshot.month >= since_month,
                    ),
                ),
            )
            .order_by(
                PerformanceSnapshot.year.asc(),
                PerformanceSnapshot.month.asc(),
            )
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
