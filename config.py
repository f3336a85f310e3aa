"""Central configuration for the bracket pool engine."""

import os

# Bracket structure
NUM_GAMES = 63
NUM_REGIONS = 4
NUM_ROUNDS = 6
TEAMS_PER_REGION = 16
REGION_NAMES = ["South", "West", "East", "Midwest"]
FINAL_FOUR_REGION = "Final Four"
CHAMPIONSHIP_REGION = "Championship"

# Number of games per round
GAMES_PER_ROUND = {1: 32, 2: 16, 3: 8, 4: 4, 5: 2, 6: 1}

# First matchup id of each round. Ids are handed out round by round, so
# round r owns ids ROUND_ID_BASE[r] .. ROUND_ID_BASE[r] + GAMES_PER_ROUND[r] - 1
ROUND_ID_BASE = {1: 0, 2: 32, 3: 48, 4: 56, 5: 60, 6: 62}

ROUND_NAMES = {
    1: "First Round",
    2: "Second Round",
    3: "Sweet 16",
    4: "Elite 8",
    5: "Final Four",
    6: "Championship",
}

# Seeds placed in bracket order within a region (adjacent pairs play round 1)
SEED_ORDER = [1, 16, 8, 9, 5, 12, 4, 13, 6, 11, 3, 14, 7, 10, 2, 15]

# Paths
ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.environ.get("BRACKET_DATA_DIR", os.path.join(ROOT_DIR, "data"))
DEFAULT_REGIONS_FILE = os.path.join(ROOT_DIR, "data", "regions_2025.json")
BRACKET_FILE = "bracket.json"
RESULTS_FILE = "results.json"

# Logging
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL = os.environ.get("BRACKET_LOG_LEVEL", "WARNING")
