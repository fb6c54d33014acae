"""Rank ladder calculations.

Ranks are mutually exclusive tiers: a point total sits in exactly one rank,
the highest one whose ``min_points`` it reaches.
"""

from typing import Optional, Sequence

from scoutquest.data.ranks import RANKS
from scoutquest.schemas.rank import Rank, RankStanding
from scoutquest.services.percent import percentage


def get_current_rank(points: int, ranks: Sequence[Rank] = RANKS) -> Rank:
    """Get the highest rank the points qualify for.

    Falls back to the first rank in list order when nothing qualifies
    (only possible for negative points). Total for any non-empty ladder;
    an empty ``ranks`` raises ValueError. Ladders read through
    ``repository.list_ranks`` are never empty, since an empty table falls
    back to the bundled ranks.
    """
    if not ranks:
        raise ValueError("Rank list is empty")

    qualifying = [rank for rank in ranks if rank.min_points <= points]
    if not qualifying:
        return ranks[0]
    return max(qualifying, key=lambda rank: rank.min_points)


def get_next_rank(points: int, ranks: Sequence[Rank] = RANKS) -> Optional[Rank]:
    """Get the lowest rank the points don't yet qualify for, or None at the top."""
    remaining = [rank for rank in ranks if rank.min_points > points]
    if not remaining:
        return None
    return min(remaining, key=lambda rank: rank.min_points)


def calculate_progress(points: int, ranks: Sequence[Rank] = RANKS) -> int:
    """Percentage of the way from the current rank to the next one."""
    current_rank = get_current_rank(points, ranks)
    next_rank = get_next_rank(points, ranks)

    if next_rank is None:
        return 100  # At max rank

    points_needed = next_rank.min_points - current_rank.min_points
    if points_needed <= 0:
        # Duplicate thresholds, or negative points below the first rank
        return 0 if points < current_rank.min_points else 100

    return percentage(points - current_rank.min_points, points_needed)


def get_rank_standing(points: int, ranks: Sequence[Rank] = RANKS) -> RankStanding:
    next_rank = get_next_rank(points, ranks)
    return RankStanding(
        points=points,
        current_rank=get_current_rank(points, ranks),
        next_rank=next_rank,
        progress=calculate_progress(points, ranks),
        points_to_next_rank=next_rank.min_points - points if next_rank else None,
    )
