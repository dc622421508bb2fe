"""
Relationship resolver.

Walks the recruiter -> recruit relation below a root member, one level
at a time, up to a maximum depth.
"""

import asyncio

from loguru import logger

from firefund.config.business_constants import (
    DEFAULT_FETCH_CONCURRENCY,
    DEFAULT_NETWORK_DEPTH,
)
from firefund.services.network.data_access import NetworkDataSource
from firefund.services.network.models import (
    MemberInfo,
    PartialNode,
    UplineEntry,
)
from firefund.utils.exceptions import InvalidDepthError, MemberNotFoundError


class NetworkResolver:
    """Resolves downline trees and upline chains."""

    def __init__(
        self,
        data_source: NetworkDataSource,
        max_concurrency: int = DEFAULT_FETCH_CONCURRENCY,
    ) -> None:
        """
        Initialize resolver.

        Args:
            data_source: Member and recruit source
            max_concurrency: Recruit lookups in flight at once

        Raises:
            ValueError: If max_concurrency < 1
        """
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be >= 1, got {max_concurrency}")

        self.data_source = data_source
        self.max_concurrency = max_concurrency

    async def get_root(self, root_id: str) -> MemberInfo:
        """
        Load the root member.

        Args:
            root_id: Member ID

        Returns:
            Root member

        Raises:
            MemberNotFoundError: If no member has this ID
        """
        root = await self.data_source.get_member(root_id)
        if root is None:
            logger.info("Root member not found", extra={"member_id": root_id})
            raise MemberNotFoundError(root_id)
        return root

    async def resolve_network(
        self, root_id: str, max_depth: int = DEFAULT_NETWORK_DEPTH
    ) -> list[PartialNode]:
        """
        Resolve the downline of a root member.

        Args:
            root_id: Root member ID
            max_depth: Deepest level to include (1 = direct recruits only)

        Returns:
            Nodes with 1 <= level <= max_depth, level by level;
            empty list if the root has no recruits

        Raises:
            InvalidDepthError: If max_depth < 1
            MemberNotFoundError: If the root does not exist
        """
        if max_depth < 1:
            raise InvalidDepthError(max_depth)

        root = await self.get_root(root_id)
        return await self.expand(root.id, max_depth)

    async def expand(
        self, root_id: str, max_depth: int
    ) -> list[PartialNode]:
        """
        Breadth-first expansion from an existing root.

        Recruits of a level are fetched concurrently, at most
        max_concurrency at a time; if one lookup fails the others are
        cancelled and the failures are raised together as an
        ExceptionGroup. Members found at max_depth are leaves even if
        they have recruits of their own. A member reachable twice is
        kept at its first (shallowest) position.

        Args:
            root_id: Root member ID (not included in the result)
            max_depth: Deepest level to include

        Returns:
            Resolved nodes in level order
        """
        if max_depth < 1:
            raise InvalidDepthError(max_depth)

        nodes: list[PartialNode] = []
        seen = {root_id}
        frontier = [root_id]
        level = 1

        while frontier and level <= max_depth:
            recruits_by_parent = await self.fetch_recruits(frontier)

            next_frontier = []
            for recruits in recruits_by_parent:
                for member in recruits:
                    if member.id in seen:
                        continue
                    seen.add(member.id)
                    nodes.append(PartialNode(member=member, level=level))
                    next_frontier.append(member.id)

            frontier = next_frontier
            level += 1

        logger.debug(
            "Network resolved",
            extra={
                "root_id": root_id,
                "max_depth": max_depth,
                "node_count": len(nodes),
            },
        )
        return nodes

    async def fetch_recruits(
        self, parent_ids: list[str]
    ) -> list[list[MemberInfo]]:
        """Direct recruits of each parent, in parent order."""
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def bounded_fetch(parent_id: str) -> list[MemberInfo]:
            async with semaphore:
                return await self.data_source.get_direct_recruits(parent_id)

        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(bounded_fetch(parent_id)) for parent_id in parent_ids]

        return [task.result() for task in tasks]

    async def resolve_upline(
        self, member_id: str, max_levels: int = DEFAULT_NETWORK_DEPTH
    ) -> list[UplineEntry]:
        """
        Get the members above a member, nearest first.

        Args:
            member_id: Member ID
            max_levels: Highest upline level to include

        Returns:
            Upline entries ordered by level; empty if none

        Raises:
            InvalidDepthError: If max_levels < 1
            MemberNotFoundError: If the member does not exist
        """
        if max_levels < 1:
            raise InvalidDepthError(max_levels)

        await self.get_root(member_id)
        entries = await self.data_source.get_upline(member_id, max_levels)
        return sorted(
            (entry for entry in entries if entry.level <= max_levels),
            key=lambda entry: entry.level,
        )
