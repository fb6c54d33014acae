#!/usr/bin/env python3
"""
Command line tools for Scout Quest.

Usage:
    scoutquest seed                     # Upsert bundled ranks, rewards and achievements
    scoutquest seed --only ranks        # Upsert one reference table
    scoutquest standing 215             # Show rank and reward progress for 215 points
"""

import argparse
import logging
import sys
from typing import List, Optional

from scoutquest.core.errors import BackendError
from scoutquest.core.logging import configure_logging
from scoutquest.data import ACHIEVEMENTS, RANKS, REWARDS
from scoutquest.db import repository
from scoutquest.services.ranks import get_rank_standing
from scoutquest.services.rewards import get_reward_standing

logger = logging.getLogger(__name__)

TABLES = ["ranks", "rewards", "achievements"]


def seed(client, only: Optional[str] = None) -> dict:
    """Upsert the bundled reference data. Returns row counts per table."""
    tables = [only] if only else TABLES
    counts = {}

    if "ranks" in tables:
        for rank in RANKS:
            repository.upsert_rank(client, rank)
        counts["ranks"] = len(RANKS)

    if "rewards" in tables:
        for reward in REWARDS:
            repository.upsert_reward(client, reward)
        counts["rewards"] = len(REWARDS)

    if "achievements" in tables:
        for achievement in ACHIEVEMENTS:
            repository.upsert_achievement(client, achievement)
        counts["achievements"] = len(ACHIEVEMENTS)

    for table, count in counts.items():
        logger.info(f"Seeded {count} {table}")

    return counts


def print_standing(points: int) -> None:
    rank = get_rank_standing(points)
    rewards = get_reward_standing(points)

    print(f"Points:     {points}")
    print(f"Rank:       {rank.current_rank.name} ({rank.progress}% to next rank)")
    if rank.next_rank:
        print(
            f"Next rank:  {rank.next_rank.name} at {rank.next_rank.min_points} "
            f"({rank.points_to_next_rank} to go)"
        )
    else:
        print("Next rank:  none, highest rank reached")

    print(f"Rewards:    {rewards.unlocked_count}/{len(rewards.rewards)} unlocked")
    if rewards.next_reward:
        print(
            f"Next:       {rewards.next_reward.name} at "
            f"{rewards.next_reward.points_required} ({rewards.next_reward.progress}%)"
        )
    else:
        print("Next:       none, every reward unlocked")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Scout Quest - reference data and progress tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  scoutquest seed                   # Seed ranks, rewards and achievements
  scoutquest seed --only rewards    # Seed only rewards
  scoutquest standing 215           # Progress for 215 points
        """,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    seed_parser = subparsers.add_parser("seed", help="Upsert bundled reference data")
    seed_parser.add_argument(
        "--only",
        choices=TABLES,
        help="Seed a single table (default: all)",
    )

    standing_parser = subparsers.add_parser(
        "standing", help="Show rank and reward progress for a point total"
    )
    standing_parser.add_argument("points", type=int, help="Cumulative points")

    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else "INFO")

    if args.command == "standing":
        if args.points < 0:
            print("Error: points must not be negative")
            return 1
        print_standing(args.points)
        return 0

    # Imported here so 'standing' works without Supabase settings
    from scoutquest.db.supabase import get_supabase_client

    try:
        counts = seed(get_supabase_client(), args.only)
    except BackendError as e:
        logger.error(f"Seeding failed: {e}")
        return 1

    print(f"\n✅ Seeded {', '.join(f'{n} {t}' for t, n in counts.items())}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
