"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


# Randomness (unset = seeded from time / OS entropy)
SEED = _optional_int("BLACKJACK_SEED")

# Logging
LOG_LEVEL = os.getenv("BLACKJACK_LOG_LEVEL", "WARNING").upper()

# Terminal size required by the table
MIN_COLS = int(os.getenv("BLACKJACK_MIN_COLS", "80"))
MIN_ROWS = int(os.getenv("BLACKJACK_MIN_ROWS", "24"))

# Rules
DEALER_STANDS_ON = int(os.getenv("BLACKJACK_DEALER_STANDS", "17"))

# Self-check: draws made after the first generation and the 53rd card
CHECK_EXTRA_DRAWS = int(os.getenv("BLACKJACK_CHECK_DRAWS", "200"))
