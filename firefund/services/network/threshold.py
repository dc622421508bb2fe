"""
Threshold policy evaluator.

Below the threshold a member contributes 0.1% of their monthly volume
to their upline. At or above it the contribution stops and a flat 2%
bonus tier applies. Pure step function of the current monthly volume,
no hysteresis.
"""

from decimal import Decimal

from firefund.config.business_constants import (
    FIRE_FUND_THRESHOLD,
    THRESHOLD_BONUS_RATE,
)
from firefund.services.network.models import ThresholdEvaluation
from firefund.services.network.policy import compute_contribution
from firefund.utils.decimal_utils import to_decimal


def evaluate_threshold(
    root_monthly_volume: Decimal | int | float,
    threshold: Decimal = FIRE_FUND_THRESHOLD,
    bonus_rate: Decimal = THRESHOLD_BONUS_RATE,
) -> ThresholdEvaluation:
    """
    Evaluate the FIRE Fund threshold for a monthly volume.

    Args:
        root_monthly_volume: Member's own monthly volume
        threshold: Volume at which the regime switches
        bonus_rate: Bonus share of volume above the threshold

    Returns:
        ThresholdEvaluation

    Raises:
        ValueError: If volume is negative
    """
    volume = to_decimal(root_monthly_volume)
    if volume < 0:
        raise ValueError(f"Monthly volume cannot be negative: {volume}")

    reached = volume >= threshold

    if reached:
        outgoing = Decimal("0")
        bonus = volume * bonus_rate
    else:
        outgoing = compute_contribution(volume)
        bonus = Decimal("0")

    progress = min(volume / threshold * 100, Decimal("100"))

    return ThresholdEvaluation(
        monthly_volume=volume,
        reached=reached,
        outgoing_contribution=outgoing,
        bonus_compensation=bonus,
        remaining_to_threshold=max(threshold - volume, Decimal("0")),
        progress_percent=progress,
    )
