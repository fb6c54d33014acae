"""Achievement catalog: filtering, per-scout partitioning and category completion."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from scoutquest.data.achievements import CATEGORIES
from scoutquest.schemas.achievement import (
    Achievement,
    AchievementCategory,
    CategoryProgress,
)
from scoutquest.schemas.application import ScoutAchievement, ScoutAchievementLists
from scoutquest.services.percent import percentage

ALL = "all"

# When a scout somehow has several records for one achievement, the
# strongest status decides which list it lands in.
_STATUS_PRECEDENCE = {"approved": 3, "pending": 2, "rejected": 1}


def _is_unset(value: Optional[str]) -> bool:
    return value is None or value == "" or value == ALL


@dataclass(frozen=True)
class AchievementFilter:
    """Conjunction of an optional search term, category and level.

    ``None``, an empty string and ``"all"`` each mean "don't filter on this".
    """

    search: Optional[str] = None
    category: Optional[str] = None
    level: Optional[str] = None

    def matches(self, achievement: Achievement) -> bool:
        if not _is_unset(self.search):
            term = self.search.lower()
            if (
                term not in achievement.name.lower()
                and term not in achievement.description.lower()
            ):
                return False

        if not _is_unset(self.category) and achievement.category != self.category:
            return False

        if not _is_unset(self.level) and achievement.level != self.level:
            return False

        return True

    def apply(self, achievements: Iterable[Achievement]) -> List[Achievement]:
        return [a for a in achievements if self.matches(a)]


def filter_achievements(
    achievements: Iterable[Achievement],
    search: Optional[str] = None,
    category: Optional[str] = None,
    level: Optional[str] = None,
) -> List[Achievement]:
    return AchievementFilter(search=search, category=category, level=level).apply(
        achievements
    )


def get_achievements_by_category(
    achievements: Iterable[Achievement], category_id: str
) -> List[Achievement]:
    return [a for a in achievements if a.category == category_id]


def list_categories(achievements: Iterable[Achievement]) -> List[AchievementCategory]:
    """Known categories plus any free-text category an admin has used."""
    categories = list(CATEGORIES)
    known = {c.id for c in categories}

    for achievement in achievements:
        if achievement.category and achievement.category not in known:
            known.add(achievement.category)
            categories.append(
                AchievementCategory(
                    id=achievement.category,
                    name=achievement.category.replace("-", " ").title(),
                )
            )

    return categories


def latest_statuses(applications: Iterable[ScoutAchievement]) -> Dict[str, str]:
    """Map achievement id -> the scout's effective application status."""
    statuses: Dict[str, str] = {}
    for application in applications:
        current = statuses.get(application.achievement_id)
        if current is None or (
            _STATUS_PRECEDENCE[application.status] > _STATUS_PRECEDENCE[current]
        ):
            statuses[application.achievement_id] = application.status
    return statuses


def partition_achievements(
    achievements: Sequence[Achievement],
    applications: Iterable[ScoutAchievement],
    achievement_filter: Optional[AchievementFilter] = None,
) -> ScoutAchievementLists:
    """Split the catalog into available / pending / completed / rejected for one scout.

    An achievement is available only while the scout has no application for it.
    """
    statuses = latest_statuses(applications)
    lists = ScoutAchievementLists()

    for achievement in achievements:
        if achievement_filter is not None and not achievement_filter.matches(achievement):
            continue

        status = statuses.get(achievement.id)
        if status is None:
            lists.available.append(achievement)
        elif status == "pending":
            lists.pending.append(achievement)
        elif status == "approved":
            lists.completed.append(achievement)
        else:
            lists.rejected.append(achievement)

    return lists


def category_completion_percent(completed: int, total: int) -> int:
    return percentage(completed, total)


def get_category_progress(
    categories: Sequence[AchievementCategory],
    achievements: Sequence[Achievement],
    completed_ids: Iterable[str],
) -> List[CategoryProgress]:
    """Completion per category, counting only approved achievements."""
    completed_ids = set(completed_ids)
    progress = []

    for category in categories:
        in_category = get_achievements_by_category(achievements, category.id)
        completed = sum(1 for a in in_category if a.id in completed_ids)
        progress.append(
            CategoryProgress(
                category=category,
                completed=completed,
                total=len(in_category),
                percent=category_completion_percent(completed, len(in_category)),
            )
        )

    return progress
