from typing import List

from fastapi import APIRouter, Depends, Query

from scoutquest.db import repository
from scoutquest.db.supabase import get_db
from scoutquest.schemas.rank import Rank, RankStanding
from scoutquest.services.ranks import get_rank_standing
from supabase import Client

router = APIRouter()


@router.get("", response_model=List[Rank])
def get_ranks(client: Client = Depends(get_db)):
    """Get the rank ladder, lowest rank first."""
    return repository.list_ranks(client)


@router.get("/standing", response_model=RankStanding)
def get_standing(points: int = Query(..., ge=0), client: Client = Depends(get_db)):
    """Get the rank, next rank and progress for a point total."""
    return get_rank_standing(points, repository.list_ranks(client))
