"""Endpoints for the signed-in scout."""

from typing import List, Optional

from fastapi import APIRouter, Depends

from scoutquest.core.auth import ScoutSession, get_scout_session
from scoutquest.db import repository
from scoutquest.db.supabase import get_db
from scoutquest.schemas.achievement import CategoryProgress
from scoutquest.schemas.application import (
    ApplicationCreate,
    ScoutAchievement,
    ScoutAchievementLists,
)
from scoutquest.schemas.scout import ScoutProfile
from scoutquest.services.applications import apply_for_achievement
from scoutquest.services.catalog import (
    AchievementFilter,
    get_category_progress,
    latest_statuses,
    list_categories,
    partition_achievements,
)
from scoutquest.services.ranks import get_rank_standing
from scoutquest.services.rewards import get_reward_standing
from supabase import Client

router = APIRouter()


@router.get("", response_model=ScoutProfile)
def get_profile(
    session: ScoutSession = Depends(get_scout_session),
    client: Client = Depends(get_db),
):
    """Get the scout's profile with rank and reward progress."""
    points = session.scout.points
    return ScoutProfile(
        scout=session.scout,
        rank=get_rank_standing(points, repository.list_ranks(client)),
        rewards=get_reward_standing(points, repository.list_rewards(client)),
    )


@router.get("/achievements", response_model=ScoutAchievementLists)
def get_my_achievements(
    search: Optional[str] = None,
    category: Optional[str] = None,
    level: Optional[str] = None,
    session: ScoutSession = Depends(get_scout_session),
    client: Client = Depends(get_db),
):
    """Get the catalog split into available, pending, completed and rejected."""
    return partition_achievements(
        repository.list_achievements(client),
        repository.list_applications(client, scout_id=session.scout.id),
        AchievementFilter(search=search, category=category, level=level),
    )


@router.get("/categories", response_model=List[CategoryProgress])
def get_my_categories(
    session: ScoutSession = Depends(get_scout_session),
    client: Client = Depends(get_db),
):
    """Get how much of each category the scout has completed."""
    achievements = repository.list_achievements(client)
    statuses = latest_statuses(
        repository.list_applications(client, scout_id=session.scout.id)
    )
    completed_ids = [aid for aid, status in statuses.items() if status == "approved"]

    return get_category_progress(
        list_categories(achievements), achievements, completed_ids
    )


@router.get("/applications", response_model=List[ScoutAchievement])
def get_my_applications(
    session: ScoutSession = Depends(get_scout_session),
    client: Client = Depends(get_db),
):
    return repository.list_applications(client, scout_id=session.scout.id)


@router.post("/applications", response_model=ScoutAchievement, status_code=201)
def apply(
    body: ApplicationCreate,
    session: ScoutSession = Depends(get_scout_session),
    client: Client = Depends(get_db),
):
    """Apply for an achievement. An admin reviews the application."""
    return apply_for_achievement(client, session.scout, body.achievement_id)
