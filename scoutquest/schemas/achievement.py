from typing import List, Literal, Optional

from pydantic import BaseModel, Field

AchievementLevel = Literal["beginner", "intermediate", "advanced"]


class AchievementCategory(BaseModel):
    id: str
    name: str
    description: str = ""
    color: str = ""


class AchievementBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    points: int = Field(..., ge=1)
    category: str = Field(..., min_length=1)
    level: AchievementLevel = "beginner"
    requirements: List[str] = []


class AchievementCreate(AchievementBase):
    badge_image: str = ""


class AchievementUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1)
    points: Optional[int] = Field(None, ge=1)
    category: Optional[str] = Field(None, min_length=1)
    level: Optional[AchievementLevel] = None
    requirements: Optional[List[str]] = None
    badge_image: Optional[str] = None


class Achievement(AchievementBase):
    id: str
    badge_image: str = ""

    model_config = {"from_attributes": True}


class CategoryProgress(BaseModel):
    category: AchievementCategory
    completed: int
    total: int
    percent: int = Field(..., ge=0, le=100)
