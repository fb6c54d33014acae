# Schemas package
from scoutquest.schemas.achievement import (
    Achievement,
    AchievementCategory,
    AchievementCreate,
    AchievementUpdate,
    CategoryProgress,
)
from scoutquest.schemas.application import (
    ApplicationCreate,
    ApplicationReview,
    ScoutAchievement,
    ScoutAchievementLists,
)
from scoutquest.schemas.auth import (
    SignInRequest,
    SignUpRequest,
    SignUpResponse,
    TokenResponse,
)
from scoutquest.schemas.rank import Rank, RankStanding
from scoutquest.schemas.reward import Reward, RewardStanding, RewardStatus
from scoutquest.schemas.scout import Scout, ScoutCreate, ScoutProfile, ScoutUpdate

__all__ = [
    "Achievement",
    "AchievementCategory",
    "AchievementCreate",
    "AchievementUpdate",
    "CategoryProgress",
    "ApplicationCreate",
    "ApplicationReview",
    "ScoutAchievement",
    "ScoutAchievementLists",
    "SignInRequest",
    "SignUpRequest",
    "SignUpResponse",
    "TokenResponse",
    "Rank",
    "RankStanding",
    "Reward",
    "RewardStanding",
    "RewardStatus",
    "Scout",
    "ScoutCreate",
    "ScoutProfile",
    "ScoutUpdate",
]
