from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel

from scoutquest.schemas.achievement import Achievement

ApplicationStatus = Literal["pending", "approved", "rejected"]


class ApplicationCreate(BaseModel):
    achievement_id: str


class ScoutAchievement(BaseModel):
    """One scout's application for one achievement."""

    id: str
    scout_id: str
    achievement_id: str
    status: ApplicationStatus = "pending"
    applied_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ApplicationReview(ScoutAchievement):
    """Application as listed for an admin reviewer."""

    scout_name: Optional[str] = None
    achievement: Optional[Achievement] = None


class ScoutAchievementLists(BaseModel):
    available: List[Achievement] = []
    pending: List[Achievement] = []
    completed: List[Achievement] = []
    rejected: List[Achievement] = []
