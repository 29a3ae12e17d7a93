# liftlog/utils/taxonomy.py

EQUIPMENT_TYPES: tuple[str, ...] = (
    "barbell",
    "dumbbell",
    "cable",
    "machine",
    "bodyweight",
    "other",
)

CABLE_ACCESSORIES: tuple[str, ...] = (
    "straight_bar",
    "ez_bar",
    "rope",
    "v_bar",
    "d_handle",
    "ankle_strap",
    "lat_bar",
    "other",
)

TEMPLATE_TYPES: tuple[str, ...] = ("push", "pull", "lower")

# Order matters: analytics output follows it.
MUSCLE_GROUPS: tuple[str, ...] = (
    "chest",
    "lats",
    "upper_back",
    "front_delts",
    "side_delts",
    "rear_delts",
    "triceps",
    "biceps",
    "quads",
    "hamstrings",
    "glutes",
    "calves",
    "abs",
    "forearms",
    "traps",
    "lower_back",
    "miscellaneous",
)

MUSCLE_GROUP_DISPLAY_NAMES: dict[str, str] = {
    "chest": "Chest",
    "lats": "Lats",
    "upper_back": "Upper Back",
    "front_delts": "Front Delts",
    "side_delts": "Side Delts",
    "rear_delts": "Rear Delts",
    "triceps": "Triceps",
    "biceps": "Biceps",
    "quads": "Quads",
    "hamstrings": "Hamstrings",
    "glutes": "Glutes",
    "calves": "Calves",
    "abs": "Abs",
    "forearms": "Forearms",
    "traps": "Traps",
    "lower_back": "Lower Back",
    "miscellaneous": "Miscellaneous",
}

# (category, display name, member muscle groups)
ANALYTICS_CATEGORIES: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("back", "Back", ("lats", "upper_back", "traps")),
    ("shoulders", "Shoulders", ("front_delts", "side_delts", "rear_delts")),
    ("chest", "Chest", ("chest",)),
    ("arms", "Arms", ("triceps", "biceps", "forearms")),
    ("legs", "Legs", ("quads", "hamstrings", "calves")),
    ("core", "Core", ("abs", "glutes", "lower_back")),
)

DEFAULT_PRIMARY_MUSCLE_GROUP = "chest"

PORTABLE_EQUIPMENT: frozenset[str] = frozenset({"bodyweight", "dumbbell"})


def location_ids_for_equipment(equipment: str | None) -> list[str]:
    """
    Where an exercise can be performed, judged from its equipment alone.
    Unknown equipment stays at the gym.
    """
    if equipment in PORTABLE_EQUIPMENT:
        return ["gym", "home"]
    return ["gym"]
