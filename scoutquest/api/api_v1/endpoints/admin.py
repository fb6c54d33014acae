"""Admin-only endpoints. Every route requires a scout with is_admin set."""

import logging
import uuid
from typing import List

from fastapi import APIRouter, Depends, Query

from scoutquest.core.auth import ScoutSession, require_admin
from scoutquest.db import repository
from scoutquest.db.supabase import get_db
from scoutquest.schemas.achievement import (
    Achievement,
    AchievementCreate,
    AchievementUpdate,
)
from scoutquest.schemas.application import ApplicationReview, ScoutAchievement
from scoutquest.schemas.scout import Scout, ScoutCreate, ScoutUpdate
from scoutquest.services.applications import approve_application, reject_application
from scoutquest.services.ranks import get_current_rank
from supabase import Client

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(require_admin)])


# Applications


@router.get("/applications", response_model=List[ApplicationReview])
def get_applications(
    status: str = Query("pending", pattern="^(pending|approved|rejected)$"),
    client: Client = Depends(get_db),
):
    """Get applications for review, newest first."""
    return repository.list_application_reviews(client, status=status)


@router.post("/applications/{application_id}/approve", response_model=ScoutAchievement)
def approve(application_id: str, client: Client = Depends(get_db)):
    """Approve a pending application and award its points to the scout."""
    return approve_application(client, application_id)


@router.post("/applications/{application_id}/reject", response_model=ScoutAchievement)
def reject(application_id: str, client: Client = Depends(get_db)):
    return reject_application(client, application_id)


# Scouts


@router.get("/scouts", response_model=List[Scout])
def get_scouts(client: Client = Depends(get_db)):
    return repository.list_scouts(client)


@router.post("/scouts", response_model=Scout, status_code=201)
def create_scout(
    scout_in: ScoutCreate,
    session: ScoutSession = Depends(require_admin),
    client: Client = Depends(get_db),
):
    """Create a scout. Without a user_id the scout gets a placeholder account id."""
    rank = get_current_rank(scout_in.points, repository.list_ranks(client))
    scout = repository.create_scout(
        client,
        {
            "user_id": scout_in.user_id or str(uuid.uuid4()),
            "name": scout_in.name,
            "points": scout_in.points,
            "rank_id": rank.id,
            "is_admin": scout_in.is_admin,
        },
    )
    logger.info(f"Admin {session.scout.id} created scout {scout.id}")
    return scout


@router.put("/scouts/{scout_id}", response_model=Scout)
def update_scout(
    scout_id: str,
    scout_in: ScoutUpdate,
    session: ScoutSession = Depends(require_admin),
    client: Client = Depends(get_db),
):
    values = scout_in.model_dump(exclude_unset=True, exclude_none=True)
    if scout_in.points is not None:
        values["rank_id"] = get_current_rank(
            scout_in.points, repository.list_ranks(client)
        ).id

    if not values:
        return repository.get_scout(client, scout_id)

    scout = repository.update_scout(client, scout_id, values)
    logger.info(f"Admin {session.scout.id} updated scout {scout_id}: {sorted(values)}")
    return scout


@router.delete("/scouts/{scout_id}")
def delete_scout(
    scout_id: str,
    session: ScoutSession = Depends(require_admin),
    client: Client = Depends(get_db),
):
    """Delete a scout and all of their applications."""
    repository.delete_scout(client, scout_id)
    logger.info(f"Admin {session.scout.id} deleted scout {scout_id}")
    return {"message": "Scout deleted successfully"}


# Achievements


@router.post("/achievements", response_model=Achievement, status_code=201)
def create_achievement(
    achievement_in: AchievementCreate,
    session: ScoutSession = Depends(require_admin),
    client: Client = Depends(get_db),
):
    achievement = repository.create_achievement(client, achievement_in.model_dump())
    logger.info(f"Admin {session.scout.id} created achievement {achievement.id}")
    return achievement


@router.put("/achievements/{achievement_id}", response_model=Achievement)
def update_achievement(
    achievement_id: str,
    achievement_in: AchievementUpdate,
    session: ScoutSession = Depends(require_admin),
    client: Client = Depends(get_db),
):
    values = achievement_in.model_dump(exclude_unset=True, exclude_none=True)
    if not values:
        return repository.get_achievement(client, achievement_id)

    achievement = repository.update_achievement(client, achievement_id, values)
    logger.info(f"Admin {session.scout.id} updated achievement {achievement_id}")
    return achievement


@router.delete("/achievements/{achievement_id}")
def delete_achievement(
    achievement_id: str,
    session: ScoutSession = Depends(require_admin),
    client: Client = Depends(get_db),
):
    """Delete an achievement and every application for it."""
    repository.delete_achievement(client, achievement_id)
    logger.info(f"Admin {session.scout.id} deleted achievement {achievement_id}")
    return {"message": "Achievement deleted successfully"}
