"""Central configuration defaults and constants for litsim."""

import os

# Batch sizes
DEFAULT_COMBAT_TRIALS = int(os.getenv("LITSIM_COMBAT_TRIALS", "1000"))
DEFAULT_LOOT_TRIALS = int(os.getenv("LITSIM_LOOT_TRIALS", "100"))
DEFAULT_STORY_LENGTH = int(os.getenv("LITSIM_STORY_LENGTH", "50"))  # Chapters
DEFAULT_MAX_TRIALS = int(os.getenv("LITSIM_MAX_TRIALS", "100000"))  # Upper bound accepted by the API
DEFAULT_MAX_STORY_LENGTH = int(os.getenv("LITSIM_MAX_STORY_LENGTH", "1000"))  # Chapters accepted by the API

# Randomness - unset means seed from OS entropy
_seed_env = os.getenv("LITSIM_RANDOM_SEED")
DEFAULT_RANDOM_SEED = int(_seed_env) if _seed_env else None

# Progression defaults (designer-facing starting values)
DEFAULT_EXPERIENCE_RATE = float(os.getenv("LITSIM_EXPERIENCE_RATE", "1000"))
DEFAULT_LEVELING_CURVE = os.getenv("LITSIM_LEVELING_CURVE", "exponential")
DEFAULT_STAT_GROWTH_RATE = float(os.getenv("LITSIM_STAT_GROWTH_RATE", "1.5"))
DEFAULT_SKILL_UNLOCK_RATE = float(os.getenv("LITSIM_SKILL_UNLOCK_RATE", "0.3"))

# Logging / API
DEFAULT_LOG_LEVEL = os.getenv("LITSIM_LOG_LEVEL", "INFO").upper()
DEFAULT_API_PORT = int(os.getenv("LITSIM_API_PORT", "5000"))
DEFAULT_API_DEBUG = os.getenv("LITSIM_API_DEBUG", "false").lower() in ("true", "1", "yes", "on")
