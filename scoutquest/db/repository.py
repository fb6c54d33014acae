"""
Typed access to the Supabase tables.

Every function takes the client explicitly and returns schema models, never
raw rows. Client failures are logged and re-raised as BackendError.

Tables:
    scouts(id, user_id, name, rank_id, points, is_admin, created_at)
    achievements(id, name, description, points, category, level, requirements, badge_image)
    scout_achievements(id, scout_id, achievement_id, status, approved_at, created_at)
    ranks(id, name, color, min_points, image, description)
    rewards(id, name, description, points_required, image)
"""

import logging
from typing import Any, Dict, List, Optional

from scoutquest.core.errors import BackendError, NotFoundError
from scoutquest.data.ranks import RANKS
from scoutquest.data.rewards import REWARDS
from scoutquest.schemas.achievement import Achievement
from scoutquest.schemas.application import ApplicationReview, ScoutAchievement
from scoutquest.schemas.rank import Rank
from scoutquest.schemas.reward import Reward
from scoutquest.schemas.scout import Scout
from supabase import Client

logger = logging.getLogger(__name__)


def _execute(operation: str, query):
    try:
        return query.execute()
    except Exception as e:
        logger.error(f"{operation} failed: {e}")
        raise BackendError(operation, str(e)) from e


def _first(response) -> Optional[dict]:
    rows = response.data or []
    return rows[0] if rows else None


# Row mapping


def _split_requirements(value: Any) -> List[str]:
    # Stored as newline separated text; older rows may already hold a JSON list
    if not value:
        return []
    if isinstance(value, list):
        return [str(item).strip() for item in value if str(item).strip()]
    return [line.strip() for line in str(value).splitlines() if line.strip()]


def row_to_achievement(row: dict) -> Achievement:
    return Achievement(
        id=str(row["id"]),
        name=row["name"],
        description=row.get("description") or "",
        points=row["points"],
        category=row.get("category") or "",
        level=row.get("level") or "beginner",
        requirements=_split_requirements(row.get("requirements")),
        badge_image=row.get("badge_image") or "",
    )


def achievement_to_row(values: Dict[str, Any]) -> dict:
    row = dict(values)
    if "requirements" in row and row["requirements"] is not None:
        row["requirements"] = "\n".join(row["requirements"])
    return row


def row_to_rank(row: dict) -> Rank:
    return Rank(
        id=row["id"],
        name=row["name"],
        color=row.get("color") or "",
        min_points=row["min_points"],
        image=row.get("image") or "/placeholder.svg",
        description=row.get("description") or "",
    )


def row_to_reward(row: dict) -> Reward:
    return Reward(
        id=str(row["id"]),
        name=row["name"],
        description=row.get("description") or "",
        points_required=row["points_required"],
        image=row.get("image") or "/placeholder.svg",
    )


def row_to_scout(row: dict) -> Scout:
    return Scout(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        name=row["name"],
        rank_id=row.get("rank_id") or 1,
        points=row.get("points") or 0,
        is_admin=bool(row.get("is_admin")),
        created_at=row.get("created_at"),
    )


def row_to_application(row: dict) -> ScoutAchievement:
    return ScoutAchievement(
        id=str(row["id"]),
        scout_id=str(row["scout_id"]),
        achievement_id=str(row["achievement_id"]),
        status=row.get("status") or "pending",
        applied_at=row.get("created_at"),
        approved_at=row.get("approved_at"),
    )


# Reference data


def list_ranks(client: Client) -> List[Rank]:
    """Ranks ordered by threshold. Falls back to the bundled ladder if the table is empty."""
    response = _execute(
        "list ranks", client.table("ranks").select("*").order("min_points")
    )
    if not response.data:
        logger.warning("ranks table is empty, using bundled ranks")
        return list(RANKS)
    return [row_to_rank(row) for row in response.data]


def list_rewards(client: Client) -> List[Reward]:
    """Rewards ordered by threshold. Falls back to the bundled rewards if the table is empty."""
    response = _execute(
        "list rewards", client.table("rewards").select("*").order("points_required")
    )
    if not response.data:
        logger.warning("rewards table is empty, using bundled rewards")
        return list(REWARDS)
    return [row_to_reward(row) for row in response.data]


def upsert_rank(client: Client, rank: Rank) -> None:
    _execute(
        f"upsert rank {rank.id}",
        client.table("ranks").upsert(rank.model_dump(), on_conflict="id"),
    )


def upsert_reward(client: Client, reward: Reward) -> None:
    _execute(
        f"upsert reward {reward.id}",
        client.table("rewards").upsert(reward.model_dump(), on_conflict="id"),
    )


def upsert_achievement(client: Client, achievement: Achievement) -> None:
    _execute(
        f"upsert achievement {achievement.id}",
        client.table("achievements").upsert(
            achievement_to_row(achievement.model_dump()), on_conflict="id"
        ),
    )


# Achievements


def list_achievements(client: Client) -> List[Achievement]:
    response = _execute(
        "list achievements",
        client.table("achievements").select("*").order("category").order("name"),
    )
    return [row_to_achievement(row) for row in (response.data or [])]


def get_achievements_by_ids(client: Client, achievement_ids: List[str]) -> List[Achievement]:
    if not achievement_ids:
        return []
    response = _execute(
        "get achievements",
        client.table("achievements").select("*").in_("id", achievement_ids),
    )
    return [row_to_achievement(row) for row in (response.data or [])]


def get_achievement(client: Client, achievement_id: str) -> Achievement:
    response = _execute(
        f"get achievement {achievement_id}",
        client.table("achievements").select("*").eq("id", achievement_id).limit(1),
    )
    row = _first(response)
    if row is None:
        raise NotFoundError("Achievement", achievement_id)
    return row_to_achievement(row)


def create_achievement(client: Client, values: Dict[str, Any]) -> Achievement:
    response = _execute(
        "create achievement",
        client.table("achievements").insert(achievement_to_row(values)),
    )
    row = _first(response)
    if row is None:
        raise BackendError("create achievement", "no row returned")
    return row_to_achievement(row)


def update_achievement(
    client: Client, achievement_id: str, values: Dict[str, Any]
) -> Achievement:
    response = _execute(
        f"update achievement {achievement_id}",
        client.table("achievements")
        .update(achievement_to_row(values))
        .eq("id", achievement_id),
    )
    row = _first(response)
    if row is None:
        raise NotFoundError("Achievement", achievement_id)
    return row_to_achievement(row)


def delete_achievement(client: Client, achievement_id: str) -> None:
    """Delete an achievement together with every application for it."""
    get_achievement(client, achievement_id)

    _execute(
        f"delete applications for achievement {achievement_id}",
        client.table("scout_achievements").delete().eq("achievement_id", achievement_id),
    )
    _execute(
        f"delete achievement {achievement_id}",
        client.table("achievements").delete().eq("id", achievement_id),
    )


# Scouts


def get_scout_by_user_id(client: Client, user_id: str) -> Optional[Scout]:
    response = _execute(
        f"get scout for user {user_id}",
        client.table("scouts").select("*").eq("user_id", user_id).limit(1),
    )
    row = _first(response)
    return row_to_scout(row) if row else None


def get_scout(client: Client, scout_id: str) -> Scout:
    response = _execute(
        f"get scout {scout_id}",
        client.table("scouts").select("*").eq("id", scout_id).limit(1),
    )
    row = _first(response)
    if row is None:
        raise NotFoundError("Scout", scout_id)
    return row_to_scout(row)


def list_scouts(client: Client) -> List[Scout]:
    response = _execute("list scouts", client.table("scouts").select("*").order("name"))
    return [row_to_scout(row) for row in (response.data or [])]


def get_scouts_by_ids(client: Client, scout_ids: List[str]) -> List[Scout]:
    if not scout_ids:
        return []
    response = _execute(
        "get scouts", client.table("scouts").select("*").in_("id", scout_ids)
    )
    return [row_to_scout(row) for row in (response.data or [])]


def create_scout(client: Client, values: Dict[str, Any]) -> Scout:
    response = _execute("create scout", client.table("scouts").insert(values))
    row = _first(response)
    if row is None:
        raise BackendError("create scout", "no row returned")
    return row_to_scout(row)


def update_scout(client: Client, scout_id: str, values: Dict[str, Any]) -> Scout:
    response = _execute(
        f"update scout {scout_id}",
        client.table("scouts").update(values).eq("id", scout_id),
    )
    row = _first(response)
    if row is None:
        raise NotFoundError("Scout", scout_id)
    return row_to_scout(row)


def delete_scout(client: Client, scout_id: str) -> None:
    """Delete a scout together with all of their applications."""
    get_scout(client, scout_id)

    _execute(
        f"delete applications for scout {scout_id}",
        client.table("scout_achievements").delete().eq("scout_id", scout_id),
    )
    _execute(
        f"delete scout {scout_id}", client.table("scouts").delete().eq("id", scout_id)
    )


def increment_points(client: Client, scout_id: str, points: int) -> Optional[int]:
    """
    Add ``points`` to a scout's total with the ``increment_points`` procedure.

    The addition happens inside the database, so concurrent approvals for the
    same scout can't overwrite each other. Returns the new total.
    """
    response = _execute(
        f"increment points for scout {scout_id}",
        client.rpc("increment_points", {"row_id": scout_id, "points_to_add": points}),
    )
    return response.data


# Applications


def list_applications(
    client: Client, scout_id: Optional[str] = None, status: Optional[str] = None
) -> List[ScoutAchievement]:
    query = client.table("scout_achievements").select("*")

    if scout_id:
        query = query.eq("scout_id", scout_id)
    if status:
        query = query.eq("status", status)

    response = _execute("list applications", query.order("created_at", desc=True))
    return [row_to_application(row) for row in (response.data or [])]


def list_application_reviews(
    client: Client, status: Optional[str] = "pending"
) -> List[ApplicationReview]:
    """Applications joined with the scout's name and the achievement, newest first."""
    applications = list_applications(client, status=status)
    if not applications:
        return []

    scouts = {
        s.id: s
        for s in get_scouts_by_ids(client, sorted({a.scout_id for a in applications}))
    }
    achievements = {
        a.id: a
        for a in get_achievements_by_ids(
            client, sorted({a.achievement_id for a in applications})
        )
    }

    reviews = []
    for application in applications:
        scout = scouts.get(application.scout_id)
        reviews.append(
            ApplicationReview(
                **application.model_dump(),
                scout_name=scout.name if scout else None,
                achievement=achievements.get(application.achievement_id),
            )
        )
    return reviews


def get_application(client: Client, application_id: str) -> ScoutAchievement:
    response = _execute(
        f"get application {application_id}",
        client.table("scout_achievements").select("*").eq("id", application_id).limit(1),
    )
    row = _first(response)
    if row is None:
        raise NotFoundError("Application", application_id)
    return row_to_application(row)


def find_application(
    client: Client, scout_id: str, achievement_id: str
) -> Optional[ScoutAchievement]:
    response = _execute(
        f"find application of scout {scout_id} for {achievement_id}",
        client.table("scout_achievements")
        .select("*")
        .eq("scout_id", scout_id)
        .eq("achievement_id", achievement_id)
        .limit(1),
    )
    row = _first(response)
    return row_to_application(row) if row else None


def create_application(client: Client, scout_id: str, achievement_id: str) -> ScoutAchievement:
    response = _execute(
        "create application",
        client.table("scout_achievements").insert(
            {"scout_id": scout_id, "achievement_id": achievement_id, "status": "pending"}
        ),
    )
    row = _first(response)
    if row is None:
        raise BackendError("create application", "no row returned")
    return row_to_application(row)


def transition_application(
    client: Client, application_id: str, from_status: str, values: Dict[str, Any]
) -> Optional[ScoutAchievement]:
    """
    Update an application only while it still has ``from_status``.

    Returns None when no row matched, i.e. another reviewer got there first.
    """
    response = _execute(
        f"update application {application_id}",
        client.table("scout_achievements")
        .update(values)
        .eq("id", application_id)
        .eq("status", from_status),
    )
    row = _first(response)
    return row_to_application(row) if row else None
