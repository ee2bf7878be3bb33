"""
Single place for default contest configuration.
The host picks from these when creating a new game; a game's config is fixed once it starts.
"""

DEFAULT_MODE = "siege"  # "elimination" (Option B) or "siege" (Option E)
DEFAULT_NUM_PLAYERS = 4
DEFAULT_MAX_HEALTH = 10
DEFAULT_TOTAL_HOLES = 18

MIN_PLAYERS = 2
MAX_PLAYERS = 4
MIN_HOLES = 1
MAX_HOLES = 36

# Fort damage capacity choices offered to the host
DAMAGE_CAP_OPTIONS = (5, 10, 15, 20, 25)

DEFAULT_NAMES = ("Player A", "Player B", "Player C", "Player D")
