"""
Relationship repository.

Data access layer for MemberRelationship model.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from firefund.models.relationship import MemberRelationship
from firefund.repositories.base import BaseRepository


class RelationshipRepository(BaseRepository[MemberRelationship]):
    """Relationship repository with upline/downline queries."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize relationship repository."""
        super().__init__(MemberRelationship, session)

    async def get_upline(
        self, user_id: str, max_levels: int
    ) -> list[MemberRelationship]:
        """
        Get edges from a member up to its uplines.

        Args:
            user_id: Downline member ID
            max_levels: Highest relationship level to include

        Returns:
            Edges ordered by level ascending, upline members eager loaded
        """
        stmt = (
            select(MemberRelationship)
            .options(selectinload(MemberRelationship.upline_user))
            .where(
                MemberRelationship.user_id == user_id,
                MemberRelationship.relationship_level <= max_levels,
            )
            .order_by(MemberRelationship.relationship_level)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_upline(self, user_id: str) -> int:
        """Count edges where the member is the downline."""
        return await self.count(user_id=user_id)

    async def count_downline(self, upline_user_id: str) -> int:
        """Count edges where the member is the upline."""
        return await self.count(upline_user_id=upline_user_id)
