"""
PerformanceSnapshot model.

One immutable monthly performance fact row per member, written by an
external process. The rollup only reads these rows.
"""

from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from firefund.models.base import Base
from firefund.models.types import MoneyType


class PerformanceSnapshot(Base):
    """Monthly performance row - ``user_performance`` table."""

    __tablename__ = "user_performance"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "year", "month", name="uq_user_performance_period"
        ),
        CheckConstraint(
            "month >= 1 AND month <= 12", name="check_performance_month"
        ),
        CheckConstraint(
            "monthly_volume IS NULL OR monthly_volume >= 0",
            name="check_performance_volume_non_negative",
        ),
        Index("ix_user_performance_user_period", "user_id", "year", "month"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    # Period
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    month: Mapped[int] = mapped_column(Integer, nullable=False)

    # Production (nullable in the hosted schema)
    monthly_volume: Mapped[Decimal | None] = mapped_column(
        MoneyType, nullable=True
    )
    monthly_loans: Mapped[int | None] = mapped_column(Integer, nullable=True)
    ytd_volume: Mapped[Decimal | None] = mapped_column(
        MoneyType, nullable=True
    )
    ytd_loans: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Compensation and FIRE Fund
    compensation: Mapped[Decimal | None] = mapped_column(
        MoneyType, nullable=True
    )
    fire_fund_balance: Mapped[Decimal | None] = mapped_column(
        MoneyType, nullable=True
    )
    fire_fund_contribution: Mapped[Decimal | None] = mapped_column(
        MoneyType, nullable=True
    )
    fire_fund_receipt: Mapped[Decimal | None] = mapped_column(
        MoneyType, nullable=True
    )

    # Recruitment
    recruitment_tier: Mapped[int | None] = mapped_column(
        Integer, nullable=True
    )
    active_recruits: Mapped[int | None] = mapped_column(
        Integer, nullable=True
    )
    rank: Mapped[int | None] = mapped_column(Integer, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<PerformanceSnapshot(user_id={self.user_id!r}, "
            f"period={self.year}-{self.month:02d})>"
        )
