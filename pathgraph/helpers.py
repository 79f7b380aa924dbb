import math
import threading
from numbers import Real
from typing import Any, Optional
from datetime import datetime, timezone

from pathgraph import config
from pathgraph.models import STATE, Event

# one log shared by every store in the process
_LOG_LOCK = threading.Lock()

# -----------------------------
# Input normalization
# -----------------------------

def normalize_id(value: Any) -> str:
    """Node ids are case-insensitive labels: strip whitespace, upper-case."""
    if not isinstance(value, str):
        return ""
    return value.strip().upper()

def coerce_weight(value: Any) -> Optional[float]:
    """
    Return value as a finite, non-negative float, or None if it is not one.

    Numeric strings such as "2.5" are accepted; booleans, NaN and infinity are not.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            weight = float(value.strip())
        except ValueError:
            return None
    elif isinstance(value, Real):
        weight = float(value)
    else:
        return None
    if not math.isfinite(weight) or weight < 0:
        return None
    return weight

# logger
def log_event(type_: str, detail: dict) -> Event:
    event = Event(
        time=datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z",
        type=type_,
        detail=detail,
    )
    with _LOG_LOCK:
        events = STATE["events"]
        events.append(event)
        # keep only the newest entries
        overflow = len(events) - config.EVENT_LOG_LIMIT
        if overflow > 0:
            del events[:overflow]
    return event
