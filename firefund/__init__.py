"""
FIRE Fund network performance rollup.

Resolves a member's downline, enriches it with performance snapshots,
aggregates contributions per level and evaluates the FIRE Fund threshold.
"""

__version__ = "1.0.0"
