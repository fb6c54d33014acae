"""
Achievement application workflow.

    [no application] --apply--> pending --approve--> approved
                                pending --reject---> rejected

approved and rejected are terminal. Scouts create applications, only admins
move them on.
"""

import logging
from datetime import datetime, timezone

from scoutquest.core.errors import (
    ApplicationStateError,
    BackendError,
    DuplicateApplicationError,
)
from scoutquest.db import repository
from scoutquest.schemas.application import ScoutAchievement
from scoutquest.schemas.scout import Scout
from supabase import Client

logger = logging.getLogger(__name__)

TRANSITIONS = {
    "pending": ("approved", "rejected"),
    "approved": (),
    "rejected": (),
}


def can_transition(current: str, target: str) -> bool:
    return target in TRANSITIONS.get(current, ())


def ensure_transition(current: str, target: str) -> None:
    if not can_transition(current, target):
        raise ApplicationStateError(current, target)


def apply_for_achievement(client: Client, scout: Scout, achievement_id: str) -> ScoutAchievement:
    """Create a pending application. A scout gets one application per achievement."""
    achievement = repository.get_achievement(client, achievement_id)

    existing = repository.find_application(client, scout.id, achievement.id)
    if existing is not None:
        raise DuplicateApplicationError(achievement.id, existing.status)

    application = repository.create_application(client, scout.id, achievement.id)
    logger.info(
        f"Scout {scout.id} applied for achievement {achievement.id} "
        f"(application {application.id})"
    )
    return application


def approve_application(client: Client, application_id: str) -> ScoutAchievement:
    """
    Approve a pending application and award the achievement's points.

    The status change only applies while the row is still pending. If the
    point increment then fails, the status change is reverted so that
    neither change is kept.
    """
    application = repository.get_application(client, application_id)
    ensure_transition(application.status, "approved")

    achievement = repository.get_achievement(client, application.achievement_id)

    approved = repository.transition_application(
        client,
        application_id,
        "pending",
        {"status": "approved", "approved_at": datetime.now(timezone.utc).isoformat()},
    )
    if approved is None:
        current = repository.get_application(client, application_id)
        raise ApplicationStateError(current.status, "approved")

    try:
        new_total = repository.increment_points(
            client, application.scout_id, achievement.points
        )
    except BackendError as increment_error:
        logger.warning(
            f"Reverting approval of application {application_id} after failed point increment"
        )
        try:
            repository.transition_application(
                client, application_id, "approved", {"status": "pending", "approved_at": None}
            )
        except BackendError as revert_error:
            logger.error(
                f"Application {application_id} left approved without awarding "
                f"{achievement.points} points to scout {application.scout_id}: {revert_error}"
            )
            raise increment_error from revert_error
        raise

    logger.info(
        f"Approved application {application_id}: +{achievement.points} points "
        f"for scout {application.scout_id} (total {new_total})"
    )
    return approved


def reject_application(client: Client, application_id: str) -> ScoutAchievement:
    """Reject a pending application. Points are untouched."""
    application = repository.get_application(client, application_id)
    ensure_transition(application.status, "rejected")

    rejected = repository.transition_application(
        client, application_id, "pending", {"status": "rejected"}
    )
    if rejected is None:
        current = repository.get_application(client, application_id)
        raise ApplicationStateError(current.status, "rejected")

    logger.info(f"Rejected application {application_id} of scout {application.scout_id}")
    return rejected
