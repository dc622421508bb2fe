"""
Repositories package.

Read-only data access layer over the hosted tables.
"""

from firefund.repositories.base import BaseRepository
from firefund.repositories.member_repository import MemberRepository
from firefund.repositories.performance_repository import (
    PerformanceRepository,
)
from firefund.repositories.relationship_repository import (
    RelationshipRepository,
)


__all__ = [
    "BaseRepository",
    "MemberRepository",
    "PerformanceRepository",
    "RelationshipRepository",
]
