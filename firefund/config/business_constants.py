"""
Business constants for the FIRE Fund network rollup.

Single source of truth for compensation policy values.
These are business rules, not deployment settings.
"""

from decimal import Decimal

# Network traversal
DEFAULT_NETWORK_DEPTH = 3  # levels below the root (1 = direct recruits)
MAX_NETWORK_DEPTH = 10

# FIRE Fund contribution: 0.1% of a member's monthly volume
FIRE_FUND_CONTRIBUTION_RATE = Decimal("0.001")

# Personal monthly volume at which upline contribution stops
FIRE_FUND_THRESHOLD = Decimal("2500000")

# Flat bonus tier unlocked at the threshold: 2% of monthly volume
THRESHOLD_BONUS_RATE = Decimal("0.02")

# Extrapolation multipliers applied to a single month of contributions.
# Approximation: not a true year-to-date sum of monthly snapshots.
YTD_MONTHS_MULTIPLIER = 8
ANNUAL_MONTHS_MULTIPLIER = 12

# Performance chart windows (periods back, per chart period)
DEFAULT_CHART_HISTORY_MONTHS = 12
DEFAULT_CHART_HISTORY_QUARTERS = 8
DEFAULT_CHART_HISTORY_YEARS = 5

# Concurrent data source calls per fan-out (one connection each)
DEFAULT_FETCH_CONCURRENCY = 10

# Leaderboard recruitment tier badge; any other tier has no badge
RECRUITMENT_TIER_LABELS = {
    1: "Bronze",
    2: "Silver",
    3: "Gold",
}
NO_TIER_LABEL = "No Tier"

# Dashboard recruitment status card (1 is the top tier)
RECRUITMENT_STATUS_LABELS = {
    1: "Gold Status",
    2: "Silver Status",
    3: "Bronze Status",
}
BASIC_STATUS_LABEL = "Basic Status"

# Leaderboard rank badges
PODIUM_RANK_STYLES = {
    1: "gold",
    2: "silver",
    3: "bronze",
}
QUALIFYING_RANK_LIMIT = 20
