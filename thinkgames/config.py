"""
Runtime configuration.

Environment values are read once at import time. Game tuning constants live
with each game's rules dataclass, not here.
"""

import os

THINKGAMES_ENV = os.getenv("THINKGAMES_ENV", "development")
THINKGAMES_LOG_LEVEL = os.getenv("THINKGAMES_LOG_LEVEL", "INFO")
# Directory holding one <game>.json results file per game
THINKGAMES_RESULTS_DIR = os.getenv("THINKGAMES_RESULTS_DIR", ".")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
