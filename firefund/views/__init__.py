"""
View adapters.

Thin presentation adapters over NetworkRollupService. Each view maps a
rollup to display data and reports one of the loading states.
"""

from firefund.views.fire_fund import FireFundView
from firefund.views.leaderboard import LeaderboardDetailView, LeaderboardView
from firefund.views.profile_team import ProfileTeamView
from firefund.views.state import ViewState, ViewStatus


__all__ = [
    "FireFundView",
    "LeaderboardDetailView",
    "LeaderboardView",
    "ProfileTeamView",
    "ViewState",
    "ViewStatus",
]
