"""
View loading states.

Loading, no network yet, and unknown member are separate states; a view
must never render one as another.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class ViewStatus(StrEnum):
    """State of a view's data."""

    LOADING = "loading"
    READY = "ready"
    EMPTY_NETWORK = "empty_network"
    NOT_FOUND = "not_found"


@dataclass
class ViewState:
    """Status plus display data for a view."""

    status: ViewStatus
    data: dict[str, Any] = field(default_factory=dict)
    message: str | None = None

    @classmethod
    def loading(cls) -> "ViewState":
        """Initial state before the first load completes."""
        return cls(status=ViewStatus.LOADING)

    @classmethod
    def ready(cls, data: dict[str, Any]) -> "ViewState":
        """Loaded with a non-empty network."""
        return cls(status=ViewStatus.READY, data=data)

    @classmethod
    def empty_network(cls, data: dict[str, Any]) -> "ViewState":
        """Member exists but has no recruits yet."""
        return cls(
            status=ViewStatus.EMPTY_NETWORK,
            data=data,
            message="No downline network yet",
        )

    @classmethod
    def not_found(cls, member_id: str) -> "ViewState":
        """Member could not be loaded."""
        return cls(
            status=ViewStatus.NOT_FOUND,
            data={"member_id": member_id},
            message="Could not load member",
        )

    @property
    def is_loaded(self) -> bool:
        """True once a load has finished."""
        return self.status != ViewStatus.LOADING
