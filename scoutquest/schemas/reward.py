from typing import List, Optional

from pydantic import BaseModel, Field


class Reward(BaseModel):
    id: str
    name: str
    description: str
    points_required: int = Field(..., ge=0)
    image: str = "/placeholder.svg"

    model_config = {"from_attributes": True}


class RewardStatus(Reward):
    """A reward as seen by one scout. Never persisted."""

    unlocked: bool
    progress: int = Field(..., ge=0, le=100)


class RewardStanding(BaseModel):
    points: int
    rewards: List[RewardStatus] = []
    unlocked_count: int = 0
    next_reward: Optional[RewardStatus] = None  # None = everything unlocked
