"""
FIRE Fund compensation policy.

Contribution rate and the YTD/annual extrapolation used by the level
aggregator. The extrapolation multiplies one month of contributions by a
fixed number of months; it is an approximation of a year-to-date sum and
is kept behind FixedMultiplierExtrapolation so it can be replaced.
"""

from dataclasses import dataclass
from decimal import Decimal

from firefund.config.business_constants import (
    ANNUAL_MONTHS_MULTIPLIER,
    FIRE_FUND_CONTRIBUTION_RATE,
    YTD_MONTHS_MULTIPLIER,
)


def compute_contribution(
    monthly_volume: Decimal,
    rate: Decimal = FIRE_FUND_CONTRIBUTION_RATE,
) -> Decimal:
    """
    Calculate a member's FIRE Fund contribution.

    Formula: monthly_volume * rate

    Args:
        monthly_volume: Member's monthly volume
        rate: Contribution rate (default 0.1%)

    Returns:
        Contribution amount (0 for non-positive volume)

    Example:
        >>> compute_contribution(Decimal("1800000"))
        Decimal('1800.000')
    """
    if monthly_volume <= 0:
        return Decimal("0")
    return monthly_volume * rate


@dataclass(frozen=True)
class FixedMultiplierExtrapolation:
    """Extrapolate one month of contributions by fixed month counts."""

    ytd_months: int = YTD_MONTHS_MULTIPLIER
    annual_months: int = ANNUAL_MONTHS_MULTIPLIER

    def ytd_total(self, monthly_total: Decimal) -> Decimal:
        """Approximate year-to-date total."""
        return monthly_total * self.ytd_months

    def projected_annual(self, monthly_total: Decimal) -> Decimal:
        """Projected full-year total."""
        return monthly_total * self.annual_months


DEFAULT_EXTRAPOLATION = FixedMultiplierExtrapolation()
