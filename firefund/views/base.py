"""Shared helpers for view adapters."""

from typing import Any

from firefund.services.network.models import MemberInfo, NetworkNode


def member_card(member: MemberInfo) -> dict[str, Any]:
    """Display fields of a member."""
    return {
        "id": member.id,
        "name": member.name,
        "role": member.role or "Unknown Role",
        "title": member.client_facing_title,
        "avatar": member.avatar,
    }


def node_row(node: NetworkNode) -> dict[str, Any]:
    """Display row of an enriched downline node."""
    return {
        **member_card(node.member),
        "level": node.level,
        "is_producing": node.member.is_producing,
        "monthly_volume": node.snapshot.monthly_volume,
        "monthly_loans": node.snapshot.monthly_loan_count,
        "contribution": node.computed_contribution,
    }
