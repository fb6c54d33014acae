from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from scoutquest.schemas.rank import RankStanding
from scoutquest.schemas.reward import RewardStanding


class ScoutBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class ScoutCreate(ScoutBase):
    # Admin-created scouts may not have an auth account yet
    user_id: Optional[str] = None
    points: int = Field(default=0, ge=0)
    is_admin: bool = False


class ScoutUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    points: Optional[int] = Field(None, ge=0)
    is_admin: Optional[bool] = None


class Scout(ScoutBase):
    id: str
    user_id: str
    rank_id: int = 1
    points: int = Field(default=0, ge=0)
    is_admin: bool = False
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ScoutProfile(BaseModel):
    scout: Scout
    rank: RankStanding
    rewards: RewardStanding
