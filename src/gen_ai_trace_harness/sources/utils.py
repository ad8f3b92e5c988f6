"""
Utility functions for source connectors.
"""

from typing import Optional, Union
from datetime import datetime, timezone
import logging
import time

logger = logging.getLogger(__name__)

Timestamp = Union[datetime, float, int]


def to_epoch_millis(timestamp: Timestamp) -> int:
    """
    Convert a timestamp to milliseconds since the epoch.

    Args:
        timestamp: Aware or naive (treated as UTC) datetime, or epoch seconds

    Returns:
        Milliseconds since the epoch
    """
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return int(timestamp.timestamp() * 1000)
    return int(float(timestamp) * 1000)


def now_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def calculate_lookback_millis(end_ms: int, since: Optional[Timestamp], default_lookback_seconds: int) -> int:
    """
    Calculate the Zipkin ``lookback`` window ending at ``end_ms``.

    Args:
        end_ms: End of the window in epoch milliseconds
        since: Start of the window, or None to use the default lookback
        default_lookback_seconds: Window size when ``since`` is not given

    Returns:
        Window size in milliseconds, at least 1
    """
    if since is None:
        return max(1, default_lookback_seconds * 1000)

    since_ms = to_epoch_millis(since)
    if since_ms > end_ms:
        logger.warning(f"Lookback start {since_ms} is after window end {end_ms}; using a 1ms window")
    return max(1, end_ms - since_ms)
