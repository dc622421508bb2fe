"""
Member repository.

Data access layer for Member model.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from firefund.models.member import Member
from firefund.repositories.base import BaseRepository


class MemberRepository(BaseRepository[Member]):
    """Member repository with recruiter queries."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize member repository."""
        super().__init__(Member, session)

    async def get_direct_recruits(self, recruiter_id: str) -> list[Member]:
        """
        Get members recruited directly by a member.

        Args:
            recruiter_id: Recruiter (upline) member ID

        Returns:
            Recruits, newest first
        """
        stmt = (
            select(Member)
            .where(Member.recruiter_id == recruiter_id)
            .order_by(Member.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_direct_recruits(self, recruiter_id: str) -> int:
        """Count direct recruits of a member."""
        return await self.count(recruiter_id=recruiter_id)

    async def list_members(self) -> list[Member]:
        """All members, newest first."""
        stmt = select(Member).order_by(Member.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
