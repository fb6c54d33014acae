"""Bundled reference data, used when the backend tables are empty and by ``scoutquest seed``."""

from scoutquest.data.achievements import ACHIEVEMENTS, CATEGORIES
from scoutquest.data.ranks import RANKS
from scoutquest.data.rewards import REWARDS

__all__ = ["ACHIEVEMENTS", "CATEGORIES", "RANKS", "REWARDS"]
