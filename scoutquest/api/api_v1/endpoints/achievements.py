from typing import List, Optional

from fastapi import APIRouter, Depends

from scoutquest.db import repository
from scoutquest.db.supabase import get_db
from scoutquest.schemas.achievement import Achievement, AchievementCategory
from scoutquest.services.catalog import filter_achievements, list_categories
from supabase import Client

router = APIRouter()


@router.get("", response_model=List[Achievement])
def get_achievements(
    search: Optional[str] = None,
    category: Optional[str] = None,
    level: Optional[str] = None,
    client: Client = Depends(get_db),
):
    """Get the achievement catalog.

    Args:
        search: Case-insensitive text matched against name and description
        category: Category id, or 'all'
        level: 'beginner', 'intermediate', 'advanced', or 'all'
    """
    return filter_achievements(
        repository.list_achievements(client),
        search=search,
        category=category,
        level=level,
    )


@router.get("/categories", response_model=List[AchievementCategory])
def get_categories(client: Client = Depends(get_db)):
    return list_categories(repository.list_achievements(client))


@router.get("/{achievement_id}", response_model=Achievement)
def get_achievement(achievement_id: str, client: Client = Depends(get_db)):
    return repository.get_achievement(client, achievement_id)
