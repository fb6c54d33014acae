"""Tests for row mapping and the data access functions."""

import pytest

from scoutquest.core.errors import BackendError, NotFoundError
from scoutquest.db import repository
from scoutquest.db.repository import achievement_to_row, row_to_achievement, row_to_scout


class TestMapping:
    def test_requirements_text_becomes_list(self):
        achievement = row_to_achievement(
            {
                "id": "knots",
                "name": "Knots",
                "description": "Tie knots.",
                "points": 10,
                "category": "outdoor",
                "requirements": "Tie a bowline\n\n  Tie a clove hitch  \n",
                "badge_image": None,
            }
        )

        assert achievement.requirements == ["Tie a bowline", "Tie a clove hitch"]
        assert achievement.level == "beginner"
        assert achievement.badge_image == ""

    def test_requirements_list_is_accepted(self):
        achievement = row_to_achievement(
            {
                "id": 7,
                "name": "Knots",
                "description": "Tie knots.",
                "points": 10,
                "category": "outdoor",
                "level": "advanced",
                "requirements": ["Tie a bowline"],
            }
        )

        assert achievement.id == "7"
        assert achievement.level == "advanced"
        assert achievement.requirements == ["Tie a bowline"]

    def test_requirements_are_stored_as_text(self):
        row = achievement_to_row({"name": "Knots", "requirements": ["One", "Two"]})
        assert row["requirements"] == "One\nTwo"

    def test_scout_defaults(self):
        scout = row_to_scout({"id": 3, "user_id": "u", "name": "Kim", "points": None})
        assert scout.id == "3"
        assert scout.points == 0
        assert scout.rank_id == 1
        assert scout.is_admin is False


class TestReferenceData:
    def test_ranks_are_ordered(self, db):
        ranks = repository.list_ranks(db)
        assert [r.min_points for r in ranks] == [0, 100, 250, 500, 1000]

    def test_bundled_ranks_when_table_is_empty(self, db):
        db.tables["ranks"] = []
        assert [r.name for r in repository.list_ranks(db)][0] == "Scout"

    def test_rewards_are_ordered(self, db):
        rewards = repository.list_rewards(db)
        assert rewards[0].id == "bronze-pin"
        assert rewards[-1].points_required == 1500

    def test_backend_failure(self, db):
        db.failing.add("rewards")
        with pytest.raises(BackendError):
            repository.list_rewards(db)


class TestScoutsAndAchievements:
    def test_get_scout_by_user_id(self, db):
        assert repository.get_scout_by_user_id(db, "user-1").name == "Alex Johnson"
        assert repository.get_scout_by_user_id(db, "nobody") is None

    def test_get_missing_achievement(self, db):
        with pytest.raises(NotFoundError):
            repository.get_achievement(db, "missing")

    def test_delete_scout_removes_applications(self, db):
        db.add_application("scout-1", "fire-building")
        db.add_application("scout-2", "fire-building")

        repository.delete_scout(db, "scout-1")

        assert [s.id for s in repository.list_scouts(db)] == ["scout-2", "scout-admin"]
        assert [r["scout_id"] for r in db.tables["scout_achievements"]] == ["scout-2"]

    def test_delete_achievement_removes_applications(self, db):
        db.add_application("scout-1", "fire-building")
        db.add_application("scout-1", "robotics")

        repository.delete_achievement(db, "fire-building")

        assert [r["achievement_id"] for r in db.tables["scout_achievements"]] == ["robotics"]
        with pytest.raises(NotFoundError):
            repository.get_achievement(db, "fire-building")

    def test_increment_points_returns_total(self, db):
        assert repository.increment_points(db, "scout-2", 40) == 40


class TestApplicationReviews:
    def test_joined_with_scout_and_achievement(self, db):
        db.add_application("scout-1", "fire-building")
        db.add_application("scout-2", "robotics")
        db.add_application("scout-2", "leadership", status="approved")

        reviews = repository.list_application_reviews(db)

        assert [r.achievement_id for r in reviews] == ["robotics", "fire-building"]
        assert reviews[0].scout_name == "Sam Rivera"
        assert reviews[0].achievement.points == 45

    def test_no_pending_applications(self, db):
        assert repository.list_application_reviews(db) == []

    def test_transition_only_matches_expected_status(self, db):
        row = db.add_application("scout-1", "fire-building", status="rejected")
        assert (
            repository.transition_application(db, row["id"], "pending", {"status": "approved"})
            is None
        )
