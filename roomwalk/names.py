"""Static pool of candidate room names.

Seven of these are drawn (without replacement) for every new maze.
"""

DEFAULT_ROOM_NAMES: tuple[str, ...] = (
    "Lila's Room",
    "Lila's Cell",
    "Mother's Secret Office",
    "Kitchen",
    "Basement Torture Chamber",
    "Rooftop Deck",
    "Master Bedroom",
    "Dark Closet",
    "Basement Work Shop",
    "Dining Room",
)
