from typing import List

from fastapi import APIRouter, Depends, Query

from scoutquest.db import repository
from scoutquest.db.supabase import get_db
from scoutquest.schemas.reward import Reward, RewardStanding
from scoutquest.services.rewards import get_reward_standing
from supabase import Client

router = APIRouter()


@router.get("", response_model=List[Reward])
def get_rewards(client: Client = Depends(get_db)):
    """Get all rewards, cheapest first."""
    return repository.list_rewards(client)


@router.get("/standing", response_model=RewardStanding)
def get_standing(points: int = Query(..., ge=0), client: Client = Depends(get_db)):
    """Get which rewards a point total unlocks and the progress towards the next one."""
    return get_reward_standing(points, repository.list_rewards(client))
