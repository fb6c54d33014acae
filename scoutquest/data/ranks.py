# Rank ladder, ordered by the points needed to reach each rank.
# Everyone starts as a Scout.

from scoutquest.schemas.rank import Rank

RANKS = [
    Rank(
        id=1,
        name="Scout",
        color="bg-scout-sky",
        min_points=0,
        description="The beginning of your journey. Learn the basic skills and values of scouting.",
    ),
    Rank(
        id=2,
        name="Pathfinder",
        color="bg-scout-moss",
        min_points=100,
        description="You've mastered the basics and are ready to explore more advanced skills.",
    ),
    Rank(
        id=3,
        name="Adventurer",
        color="bg-scout-earth",
        min_points=250,
        description="An experienced scout who has demonstrated proficiency in multiple skill areas.",
    ),
    Rank(
        id=4,
        name="Ranger",
        color="bg-scout-sunset",
        min_points=500,
        description="A highly skilled scout who can lead others and tackle complex challenges.",
    ),
    Rank(
        id=5,
        name="Eagle",
        color="bg-scout-ruby",
        min_points=1000,
        description="The highest rank. You embody the values and skills of scouting at their finest.",
    ),
]
