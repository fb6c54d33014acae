from typing import Optional

from pydantic import BaseModel, Field


class Rank(BaseModel):
    id: int
    name: str
    color: str
    min_points: int = Field(..., ge=0)
    image: str = "/placeholder.svg"
    description: str = ""

    model_config = {"from_attributes": True}


class RankStanding(BaseModel):
    """Where a point total sits on the rank ladder."""

    points: int
    current_rank: Rank
    next_rank: Optional[Rank] = None  # None = highest rank reached
    progress: int = Field(..., ge=0, le=100)
    points_to_next_rank: Optional[int] = None
