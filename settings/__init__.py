"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("ACCOUNTABILITY_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("ACCOUNTABILITY_LOG_LEVEL", "INFO")
LOG_JSON = os.getenv("ACCOUNTABILITY_LOG_JSON", "") == "1"

# Synthesis - unset means non-reproducible synthetic votes
_seed = os.getenv("ACCOUNTABILITY_SEED")
RANDOM_SEED = int(_seed) if _seed else None

# Report - top-N cap per tier
TIER_CAPS = {
    "CRITICAL": int(os.getenv("ACCOUNTABILITY_CAP_CRITICAL", "5")),
    "HIGH": int(os.getenv("ACCOUNTABILITY_CAP_HIGH", "8")),
    "MEDIUM": int(os.getenv("ACCOUNTABILITY_CAP_MEDIUM", "10")),
    "LOW": int(os.getenv("ACCOUNTABILITY_CAP_LOW", "10")),
}
