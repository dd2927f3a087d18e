"""
Timestamp conversion utilities.

Provides conversions between wire `Timestamp` values (seconds + nanos) and
timezone-aware `datetime` objects, plus RFC 3339 rendering that keeps the full
nanosecond precision.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from src.schemas.common import Timestamp

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def timestamp_from_datetime(dt: Optional[datetime]) -> Optional[Timestamp]:
    """
    Convert a datetime to a wire timestamp.

    Naive datetimes are treated as UTC.

    Parameters
    ----------
    dt : datetime or None
        The datetime to convert

    Returns
    -------
    Timestamp or None
        Equivalent timestamp, or None if input is None

    Examples
    --------
    >>> timestamp_from_datetime(datetime(2018, 11, 25, 15, 38, 18, 100000, tzinfo=timezone.utc))
    Timestamp(seconds=1543160298, nanos=100000000)
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    # Integer arithmetic on the delta avoids float rounding of dt.timestamp()
    delta = dt - _EPOCH
    return Timestamp(
        seconds=delta.days * 86400 + delta.seconds,
        nanos=delta.microseconds * 1000,
    )


def timestamp_to_datetime(ts: Optional[Timestamp]) -> Optional[datetime]:
    """
    Convert a wire timestamp to a UTC datetime.

    Sub-microsecond precision is truncated since `datetime` cannot hold it.
    Instants outside the range `datetime` supports return None.
    """
    if ts is None:
        return None

    try:
        return _EPOCH + timedelta(seconds=ts.seconds, microseconds=ts.nanos // 1000)
    except OverflowError:
        logger.warning(
            "timestamps.to_datetime_failed",
            extra={"seconds": ts.seconds, "nanos": ts.nanos},
        )
        return None


def timestamp_to_iso8601(ts: Optional[Timestamp]) -> Optional[str]:
    """
    Render a timestamp as RFC 3339 with a 'Z' suffix.

    The fractional part uses 0, 3, 6 or 9 digits, whichever is the shortest
    exact representation of ``nanos``.

    Examples
    --------
    >>> timestamp_to_iso8601(Timestamp(seconds=1543160298, nanos=100000090))
    '2018-11-25T15:38:18.100000090Z'
    >>> timestamp_to_iso8601(Timestamp(seconds=0))
    '1970-01-01T00:00:00Z'
    """
    if ts is None:
        return None

    try:
        whole = _EPOCH + timedelta(seconds=ts.seconds)
    except OverflowError:
        logger.warning(
            "timestamps.to_iso8601_failed",
            extra={"seconds": ts.seconds, "nanos": ts.nanos},
        )
        return None

    base = whole.strftime("%Y-%m-%dT%H:%M:%S")
    if ts.nanos == 0:
        return base + "Z"
    if ts.nanos % 1_000_000 == 0:
        return f"{base}.{ts.nanos // 1_000_000:03d}Z"
    if ts.nanos % 1_000 == 0:
        return f"{base}.{ts.nanos // 1_000:06d}Z"
    return f"{base}.{ts.nanos:09d}Z"


def timestamp_now() -> Timestamp:
    """Current time as a wire timestamp."""
    return timestamp_from_datetime(datetime.now(timezone.utc))
