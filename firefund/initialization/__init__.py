"""
Initialization package.

Logging configuration and database session factory.
"""

from firefund.initialization.database import (
    create_engine_from_settings,
    create_session_maker,
)
from firefund.initialization.logging import setup_logging


__all__ = [
    "create_engine_from_settings",
    "create_session_maker",
    "setup_logging",
]
