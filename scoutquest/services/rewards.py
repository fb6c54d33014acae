"""Reward unlocking.

Unlike ranks, rewards accumulate: every reward at or below a scout's point
total is unlocked at the same time.
"""

from typing import List, Optional, Sequence

from scoutquest.data.rewards import REWARDS
from scoutquest.schemas.reward import Reward, RewardStanding, RewardStatus
from scoutquest.services.percent import percentage


def is_unlocked(reward: Reward, points: int) -> bool:
    return points >= reward.points_required


def get_next_reward(points: int, rewards: Sequence[Reward] = REWARDS) -> Optional[Reward]:
    """Get the cheapest reward not yet unlocked, or None if all are unlocked."""
    locked = [reward for reward in rewards if not is_unlocked(reward, points)]
    if not locked:
        return None
    return min(locked, key=lambda reward: reward.points_required)


def calculate_reward_progress(
    points: int, reward: Reward, rewards: Sequence[Reward] = REWARDS
) -> int:
    """Progress towards ``reward``, measured from the reward just below it.

    The previous threshold is the largest ``points_required`` under the
    target's (0 when there is none).
    """
    previous_threshold = max(
        (r.points_required for r in rewards if r.points_required < reward.points_required),
        default=0,
    )
    points_needed = reward.points_required - previous_threshold

    if points_needed <= 0:
        return 100 if points >= previous_threshold else 0

    points_earned = max(0, points - previous_threshold)
    return percentage(points_earned, points_needed)


def get_unlocked_rewards(points: int, rewards: Sequence[Reward] = REWARDS) -> List[RewardStatus]:
    """All rewards, cheapest first, with this point total's unlocked flag and progress."""
    return [
        RewardStatus(
            **reward.model_dump(),
            unlocked=is_unlocked(reward, points),
            progress=calculate_reward_progress(points, reward, rewards),
        )
        for reward in sorted(rewards, key=lambda r: r.points_required)
    ]


def get_reward_standing(points: int, rewards: Sequence[Reward] = REWARDS) -> RewardStanding:
    statuses = get_unlocked_rewards(points, rewards)
    next_reward = get_next_reward(points, rewards)

    next_status = None
    if next_reward is not None:
        next_status = next(s for s in statuses if s.id == next_reward.id)

    return RewardStanding(
        points=points,
        rewards=statuses,
        unlocked_count=sum(1 for status in statuses if status.unlocked),
        next_reward=next_status,
    )
