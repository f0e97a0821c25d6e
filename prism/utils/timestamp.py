"""Timestamp helpers for theme identifiers and log directories."""

import time
from datetime import datetime


def now() -> str:
    """Current local time as a filesystem-safe string (e.g. "20251114_123456")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def epoch_millis() -> int:
    """Milliseconds since the Unix epoch, used to suffix generated theme ids."""
    return int(time.time() * 1000)
