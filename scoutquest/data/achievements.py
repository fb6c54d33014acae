from scoutquest.schemas.achievement import Achievement, AchievementCategory

CATEGORIES = [
    AchievementCategory(
        id="outdoor",
        name="Outdoor Skills",
        description="Develop skills for outdoor living, survival, and appreciation of nature.",
        color="bg-scout-pine",
    ),
    AchievementCategory(
        id="citizenship",
        name="Citizenship",
        description="Learn about your community, country, and role as a responsible citizen.",
        color="bg-scout-sky",
    ),
    AchievementCategory(
        id="personal-development",
        name="Personal Development",
        description="Focus on personal growth, leadership, and character building.",
        color="bg-scout-sunset",
    ),
    AchievementCategory(
        id="stem",
        name="STEM",
        description="Explore science, technology, engineering, and mathematics.",
        color="bg-scout-moss",
    ),
    AchievementCategory(
        id="emergency",
        name="Emergency Preparedness",
        description="Learn critical skills for handling emergencies and providing assistance.",
        color="bg-scout-ruby",
    ),
]

ACHIEVEMENTS = [
    # Outdoor Skills
    Achievement(
        id="fire-building",
        name="Fire Building",
        description="Learn to safely build, maintain, and extinguish a campfire.",
        points=25,
        category="outdoor",
        level="beginner",
        requirements=[
            "Demonstrate knowledge of fire safety rules",
            "Successfully build and light a fire using only natural materials",
            "Properly maintain a fire for cooking",
            "Safely extinguish a fire and leave no trace",
        ],
    ),
    Achievement(
        id="wilderness-survival",
        name="Wilderness Survival",
        description="Master the essential skills needed to survive in the wilderness.",
        points=75,
        category="outdoor",
        level="advanced",
        requirements=[
            "Build an emergency shelter using natural materials",
            "Identify 5 edible plants in your region",
            "Demonstrate three methods of water purification",
            "Create and follow an emergency action plan",
        ],
    ),
    # Citizenship
    Achievement(
        id="community-service",
        name="Community Service",
        description="Contribute meaningful service to improve your community.",
        points=50,
        category="citizenship",
        level="intermediate",
        requirements=[
            "Complete 10 hours of community service",
            "Identify a community need and develop a plan to address it",
            "Recruit at least two peers to join your service effort",
            "Document and reflect on your service experience",
        ],
    ),
    Achievement(
        id="civic-awareness",
        name="Civic Awareness",
        description="Understand how government works and the responsibilities of citizenship.",
        points=30,
        category="citizenship",
        level="beginner",
        requirements=[
            "Explain the structure of your local government",
            "Attend a civic meeting or event",
            "Interview an elected official",
            "Create a presentation on a current civic issue",
        ],
    ),
    # Personal Development
    Achievement(
        id="leadership",
        name="Leadership",
        description="Develop and demonstrate effective leadership skills.",
        points=60,
        category="personal-development",
        level="intermediate",
        requirements=[
            "Serve in a leadership role for at least 3 months",
            "Plan and lead a group activity or project",
            "Mentor a younger scout",
            "Create a personal leadership development plan",
        ],
    ),
    Achievement(
        id="public-speaking",
        name="Public Speaking",
        description="Learn to communicate effectively in front of groups.",
        points=40,
        category="personal-development",
        level="intermediate",
        requirements=[
            "Prepare and deliver a 5-minute speech on a scouting topic",
            "Lead a skill demonstration for your troop",
            "Create and present a visual presentation",
            "Give an impromptu speech on an assigned topic",
        ],
    ),
    # STEM
    Achievement(
        id="robotics",
        name="Robotics",
        description="Explore the world of robotics through hands-on projects.",
        points=45,
        category="stem",
        level="advanced",
        requirements=[
            "Build a simple robot that can complete a basic task",
            "Program a robot to navigate an obstacle course",
            "Explain the components and principles of your robot",
            "Demonstrate your robot to your troop",
        ],
    ),
    Achievement(
        id="environmental-science",
        name="Environmental Science",
        description="Study ecosystems and learn about environmental conservation.",
        points=35,
        category="stem",
        level="intermediate",
        requirements=[
            "Conduct an environmental impact study of a local area",
            "Monitor a specific environmental factor over two weeks",
            "Participate in an environmental conservation project",
            "Create a presentation on an environmental issue",
        ],
    ),
    # Emergency Preparedness
    Achievement(
        id="first-aid",
        name="First Aid",
        description="Learn essential first aid skills to help in emergency situations.",
        points=55,
        category="emergency",
        level="intermediate",
        requirements=[
            "Demonstrate proper treatment for common injuries",
            "Create a comprehensive first aid kit",
            "Role-play emergency response scenarios",
            "Earn CPR certification",
        ],
    ),
    Achievement(
        id="emergency-planning",
        name="Emergency Planning",
        description="Develop comprehensive plans for various emergency situations.",
        points=40,
        category="emergency",
        level="beginner",
        requirements=[
            "Create emergency plans for home, school, and outdoor activities",
            "Build an emergency supplies kit",
            "Demonstrate knowledge of natural disaster preparedness",
            "Lead an emergency drill with your troop",
        ],
    ),
]
