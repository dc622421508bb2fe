"""
Database models.

Exports all SQLAlchemy models for easy imports.
"""

from firefund.models.base import Base
from firefund.models.member import Member
from firefund.models.performance import PerformanceSnapshot
from firefund.models.relationship import MemberRelationship


__all__ = [
    "Base",
    "Member",
    "MemberRelationship",
    "PerformanceSnapshot",
]
