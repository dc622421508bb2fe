#!/usr/bin/env python3
"""
Print the FIRE Fund network rollup for a member.

Usage:
    python scripts/network_report.py <member_id> [--depth 3]
"""

import argparse
import asyncio
import sys
from pathlib import Path


# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger

from firefund.config.settings import get_settings
from firefund.initialization import (
    create_engine_from_settings,
    create_session_maker,
    setup_logging,
)
from firefund.services.network import (
    NetworkRollupService,
    SqlAlchemyNetworkDataSource,
    level_breakdown,
)
from firefund.utils.exceptions import InvalidDepthError, MemberNotFoundError


async def report(member_id: str, depth: int | None) -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    engine = create_engine_from_settings(settings)
    service = NetworkRollupService(
        SqlAlchemyNetworkDataSource(create_session_maker(engine)),
        fetch_timeout=settings.snapshot_fetch_timeout,
        max_concurrency=settings.snapshot_fetch_concurrency,
    )
    max_depth = settings.network_max_depth if depth is None else depth

    try:
        result = await service.run(member_id, max_depth)
    except MemberNotFoundError:
        logger.error(f"Member {member_id} not found")
        return 1
    except InvalidDepthError as e:
        logger.error(str(e))
        return 2
    finally:
        await engine.dispose()

    rollup = result.rollup
    threshold = result.threshold

    logger.info(f"Member: {result.root.name} ({result.root.id})")
    logger.info(
        f"Monthly volume: {threshold.monthly_volume} "
        f"(threshold {'reached' if threshold.reached else 'not reached'})"
    )
    logger.info(f"Outgoing contribution: {threshold.outgoing_contribution}")
    logger.info(f"Bonus compensation: {threshold.bonus_compensation}")

    if result.is_empty:
        logger.info("No downline network yet")
        return 0

    for level, amount, count in level_breakdown(rollup, max_depth):
        logger.info(f"  Level {level}: {count} members, contribution {amount}")
    logger.info(f"Total contribution: {rollup.total_contribution}")
    logger.info(f"YTD (estimated): {rollup.ytd_total}")
    logger.info(f"Projected annual: {rollup.projected_annual}")
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Print the FIRE Fund network rollup for a member"
    )
    parser.add_argument("member_id", help="Root member ID")
    parser.add_argument(
        "--depth",
        type=int,
        default=None,
        help="Downline levels to include (default: NETWORK_MAX_DEPTH)",
    )
    args = parser.parse_args()

    sys.exit(asyncio.run(report(args.member_id, args.depth)))


if __name__ == "__main__":
    main()
