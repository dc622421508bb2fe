"""
Member model.

Represents a loan officer who can originate or receive business volume.
"""

from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from firefund.models.base import Base


class Member(Base):
    """Member model - rows of the hosted ``users`` table."""

    __tablename__ = "users"

    # Primary key (opaque identifier issued by the hosted backend)
    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    # Display data
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True
    )
    role: Mapped[str] = mapped_column(
        String(100), nullable=False, default="Loan Officer"
    )
    client_facing_title: Mapped[str | None] = mapped_column(
        String(255), nullable=True
    )
    avatar: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    # Recruiter (upline) - weak back-reference used only for traversal
    recruiter_id: Mapped[str | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    is_producing: Mapped[bool] = mapped_column(
        Boolean, default=True, nullable=False
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Member(id={self.id!r}, name={self.name!r})>"
