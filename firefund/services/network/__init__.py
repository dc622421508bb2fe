"""
Network rollup services package.

Four-stage downline rollup pipeline:
- resolver: Relationship Resolver (bounded-depth downline walk, upline chain)
- enricher: Performance Enricher (concurrent snapshot fetch, zero fallback)
- aggregator: Level Aggregator (per-level and total contributions)
- threshold: Threshold Policy Evaluator (FIRE Fund regime switch)
- pipeline: NetworkRollupService tying the stages together
- history: performance chart series
- ranking: leaderboard ordering and stored-rank fallback
- data_access: NetworkDataSource contract and SQLAlchemy implementation
"""

from firefund.services.network.aggregator import aggregate, level_breakdown
from firefund.services.network.data_access import (
    NetworkDataSource,
    SqlAlchemyNetworkDataSource,
)
from firefund.services.network.enricher import PerformanceEnricher
from firefund.services.network.history import (
    ChartMetric,
    ChartPeriod,
    build_chart_series,
    default_chart_count,
    history_window_start,
)
from firefund.services.network.models import (
    ChartPoint,
    MemberInfo,
    NetworkCounts,
    NetworkNode,
    NetworkRollupReport,
    PartialNode,
    RankedMember,
    RollupResult,
    SnapshotData,
    ThresholdEvaluation,
    ThresholdState,
    UplineEntry,
)
from firefund.services.network.pipeline import NetworkRollupService
from firefund.services.network.policy import (
    DEFAULT_EXTRAPOLATION,
    FixedMultiplierExtrapolation,
    compute_contribution,
)
from firefund.services.network.ranking import (
    RankingMetric,
    RankingPeriod,
    filter_members,
    rank_members,
    ranking_value,
)
from firefund.services.network.resolver import NetworkResolver
from firefund.services.network.threshold import evaluate_threshold


__all__ = [
    # Stages
    "NetworkResolver",
    "PerformanceEnricher",
    "aggregate",
    "level_breakdown",
    "evaluate_threshold",
    # Orchestration
    "NetworkRollupService",
    # Data access
    "NetworkDataSource",
    "SqlAlchemyNetworkDataSource",
    # Policy
    "compute_contribution",
    "FixedMultiplierExtrapolation",
    "DEFAULT_EXTRAPOLATION",
    # Charts
    "ChartMetric",
    "ChartPeriod",
    "build_chart_series",
    "default_chart_count",
    "history_window_start",
    # Leaderboard
    "RankingMetric",
    "RankingPeriod",
    "filter_members",
    "rank_members",
    "ranking_value",
    # Models
    "ChartPoint",
    "MemberInfo",
    "NetworkCounts",
    "NetworkNode",
    "NetworkRollupReport",
    "PartialNode",
    "RankedMember",
    "RollupResult",
    "SnapshotData",
    "ThresholdEvaluation",
    "ThresholdState",
    "UplineEntry",
]
