"""Timezone utilities for US/Eastern market time."""

from datetime import datetime, timezone
from typing import Optional

import pytz

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def from_epoch_ms(value: Optional[int]) -> Optional[datetime]:
    """Convert epoch milliseconds to a US/Eastern datetime (None passes through)."""
    if value is None:
        return None
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc).astimezone(EASTERN_TZ)
