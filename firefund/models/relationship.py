"""
MemberRelationship model.

Materialized recruiter -> recruit edge at a given level
(1 = direct recruit, 2 = recruit of recruit, ...).
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from firefund.models.base import Base

if TYPE_CHECKING:
    from firefund.models.member import Member


class MemberRelationship(Base):
    """Upline/downline edge - rows of ``user_relationships``."""

    __tablename__ = "user_relationships"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "upline_user_id", name="uq_user_relationships_pair"
        ),
        CheckConstraint(
            "relationship_level >= 1",
            name="check_relationship_level_positive",
        ),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )

    # Recruit (downline member)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Upline member at relationship_level above the recruit
    upline_user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    relationship_level: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    # Relationships
    user: Mapped["Member"] = relationship(
        "Member", foreign_keys=[user_id], lazy="selectin"
    )
    upline_user: Mapped["Member"] = relationship(
        "Member", foreign_keys=[upline_user_id], lazy="selectin"
    )

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<MemberRelationship(user_id={self.user_id!r}, "
            f"upline_user_id={self.upline_user_id!r}, "
            f"level={self.relationship_level})>"
        )
