# FILE: config.py
"""Central configuration file for the JPS grid planner."""

# --- Search Limits ---
# None means the search runs until the frontier is exhausted.
JPS_MAX_EXPANSIONS = None
A_STAR_MAX_EXPANSIONS = None

# --- Planner Selection ---
DEFAULT_ALGORITHM = "jps"
SUPPORTED_ALGORITHMS = ("jps", "astar")

# --- Map Loading (MovingAI benchmark format) ---
MOVINGAI_TRAVERSABLE_TERRAIN = ".GS"
MOVINGAI_SCENARIO_VERSION = "1"

# --- Benchmarking ---
# Scenario optimal lengths are stored with limited precision.
BENCHMARK_COST_TOLERANCE = 1e-3

# --- Logging ---
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
