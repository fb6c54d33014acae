# Rewards unlocked by cumulative achievement points.

from scoutquest.schemas.reward import Reward

REWARDS = [
    Reward(
        id="bronze-pin",
        name="Bronze Scout Pin",
        description="Awarded to scouts who have earned 50 achievement points. "
        "A symbol of dedication to the scouting path.",
        points_required=50,
    ),
    Reward(
        id="silver-pin",
        name="Silver Scout Pin",
        description="Awarded to scouts who have earned 150 achievement points. "
        "A mark of growing expertise in scouting skills.",
        points_required=150,
    ),
    Reward(
        id="gold-pin",
        name="Gold Scout Pin",
        description="Awarded to scouts who have earned 300 achievement points. "
        "Represents significant accomplishment in the scouting program.",
        points_required=300,
    ),
    Reward(
        id="bronze-medal",
        name="Bronze Medal of Achievement",
        description="A prestigious award for scouts who have earned 500 achievement points. "
        "Signifies exceptional dedication to scouting ideals.",
        points_required=500,
    ),
    Reward(
        id="silver-medal",
        name="Silver Medal of Achievement",
        description="A rare honor bestowed upon scouts who have earned 750 achievement points. "
        "Demonstrates remarkable commitment and skill.",
        points_required=750,
    ),
    Reward(
        id="gold-medal",
        name="Gold Medal of Achievement",
        description="The pinnacle achievement for scouts who have earned 1000 achievement points. "
        "Reserved for those who exemplify scouting at its finest.",
        points_required=1000,
    ),
    Reward(
        id="ultimate-award",
        name="Ultimate Scout Award",
        description="The rarest and most prestigious recognition, awarded to scouts who have "
        "earned 1500 achievement points. A testament to extraordinary dedication "
        "and mastery of scouting skills.",
        points_required=1500,
    ),
]
