"""
Datetime utilities.

Provides timezone-aware datetime functions.
"""

from datetime import UTC, date, datetime


def utc_now() -> datetime:
    """
    Get current UTC datetime with timezone info.

    Returns:
        Current datetime in UTC with timezone awareness
    """
    return datetime.now(UTC)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """
    Shift a (year, month) pair by delta months.

    Args:
        year: Calendar year
        month: Month (1-12)
        delta: Months to add (negative to go back)

    Returns:
        Shifted (year, month)
    """
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def tenure_months(created_at: datetime | None, today: date) -> int:
    """
    Whole months between member creation and today.

    Args:
        created_at: Member creation timestamp
        today: Reference date

    Returns:
        Completed months, never negative (0 when unknown)
    """
    if created_at is None:
        return 0

    start = created_at.date()
    months = (today.year - start.year) * 12 + (today.month - start.month)
    if today.day < start.day:
        months -= 1
    return max(months, 0)
