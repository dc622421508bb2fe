"""
Exception handling utilities.

Defines the rollup error taxonomy and categorized exception types
for snapshot fetch failures.
"""

from sqlalchemy.exc import SQLAlchemyError


class FireFundError(Exception):
    """Base error for the network rollup."""
    pass


class MemberNotFoundError(FireFundError):
    """Raised when a root member id does not exist."""

    def __init__(self, member_id: str) -> None:
        self.member_id = member_id
        super().__init__(f"Member not found: {member_id}")


class InvalidDepthError(FireFundError, ValueError):
    """Raised when a traversal depth is not a positive integer."""

    def __init__(self, depth: int) -> None:
        self.depth = depth
        super().__init__(f"Network depth must be >= 1, got {depth}")


# Exception categories based on handling strategy

# Expected transient failures - degrade to zeros and log a warning
RECOVERABLE_FETCH_ERRORS = (
    SQLAlchemyError,   # Database errors
    TimeoutError,      # Fetch exceeded its timeout
    OSError,           # Connection resets
)


def is_recoverable_fetch_error(exc: BaseException) -> bool:
    """
    Check if a snapshot fetch failure is an expected transient error.

    Args:
        exc: Exception to check

    Returns:
        True if exception is a known transient failure
    """
    return isinstance(exc, RECOVERABLE_FETCH_ERRORS)
