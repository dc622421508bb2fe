"""
Display formatters.

Presentation-only formatting of raw rollup values.
"""

from decimal import ROUND_HALF_UP, Decimal

from firefund.config.business_constants import (
    BASIC_STATUS_LABEL,
    NO_TIER_LABEL,
    PODIUM_RANK_STYLES,
    QUALIFYING_RANK_LIMIT,
    RECRUITMENT_STATUS_LABELS,
    RECRUITMENT_TIER_LABELS,
)


def format_currency(amount: Decimal) -> str:
    """
    Format amount as whole dollars with thousands separators.

    Example:
        >>> format_currency(Decimal("1800.000"))
        '$1,800'
    """
    rounded = amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"${rounded:,}"


def format_millions(amount: Decimal) -> str:
    """
    Format amount in millions with one decimal.

    Example:
        >>> format_millions(Decimal("2500000"))
        '$2.5M'
    """
    millions = (amount / Decimal("1000000")).quantize(
        Decimal("0.1"), rounding=ROUND_HALF_UP
    )
    return f"${millions}M"


def tier_label(tier: int) -> str:
    """Leaderboard tier badge label: 1 Bronze, 2 Silver, 3 Gold, else No Tier."""
    return RECRUITMENT_TIER_LABELS.get(tier, NO_TIER_LABEL)


def recruitment_status_label(tier: int) -> str:
    """Dashboard status card label, where tier 1 is Gold."""
    return RECRUITMENT_STATUS_LABELS.get(tier, BASIC_STATUS_LABEL)


def rank_badge(rank: int) -> dict[str, str]:
    """
    Leaderboard rank badge.

    Ranks 1-3 are podium places (P1-P3), ranks up to 20 qualify
    (P4-P20), everything else is a plain position.

    Args:
        rank: 1-based leaderboard rank

    Returns:
        Dict with ``label`` and ``style``
    """
    if rank in PODIUM_RANK_STYLES:
        return {"label": f"P{rank}", "style": PODIUM_RANK_STYLES[rank]}
    if 4 <= rank <= QUALIFYING_RANK_LIMIT:
        return {"label": f"P{rank}", "style": "qualifying"}
    return {"label": f"#{rank}", "style": "basic"}
