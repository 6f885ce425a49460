"""
Runtime settings read from the environment (``.env`` is loaded by server.py).

  TESTDATA_SEED        – integer seed; makes every tool call reproducible
  TESTDATA_MAX_COUNT   – upper bound for the ``count`` tool argument (default 100)
  TESTDATA_LOG_DIR     – log directory (read by utils.logger)
"""

from __future__ import annotations

import os
import random
from typing import Optional

from utils.logger import logger

DEFAULT_MAX_COUNT = 100


def _int_env(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s is not an integer (%r), ignoring it.", name, raw)
        return None


def max_count() -> int:
    value = _int_env("TESTDATA_MAX_COUNT")
    if value is None or value < 1:
        return DEFAULT_MAX_COUNT
    return value


def clamp_count(count: int) -> int:
    return max(1, min(int(count), max_count()))


def make_rng() -> random.Random:
    """A fresh generator per tool call, seeded from TESTDATA_SEED when set."""
    seed = _int_env("TESTDATA_SEED")
    return random.Random(seed)
