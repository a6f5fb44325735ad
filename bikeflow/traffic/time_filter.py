# bikeflow/traffic/time_filter.py
from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Sequence

from bikeflow.traffic.types import Trip

ANY_TIME = -1
MINUTES_PER_DAY = 1440
WINDOW_MINUTES = 60


def minutes_since_midnight(dt: datetime) -> int:
    return dt.hour * 60 + dt.minute


def filter_trips_by_time(trips: Sequence[Trip], time_filter: int) -> List[Trip]:
    """
    Keep trips that started or ended within WINDOW_MINUTES of time_filter.

    The difference is a plain absolute value on minutes-since-midnight,
    it does not wrap around midnight (23:50 is 1430 minutes away from 00:10).
    time_filter == ANY_TIME returns every trip.
    """
    if time_filter == ANY_TIME:
        return list(trips)

    kept = []
    for trip in trips:
        start_min = minutes_since_midnight(trip.started_at)
        end_min = minutes_since_midnight(trip.ended_at)

        if (
            abs(start_min - time_filter) <= WINDOW_MINUTES
            or abs(end_min - time_filter) <= WINDOW_MINUTES
        ):
            kept.append(trip)

    return kept


def format_time(minutes: int) -> str:
    """
    Clock label for a slider value, e.g. 545 -> "9:05 AM".
    """
    t = datetime(1900, 1, 1) + timedelta(minutes=int(minutes))
    suffix = "AM" if t.hour < 12 else "PM"
    return f"{t.hour % 12 or 12}:{t.minute:02d} {suffix}"


def snap_time_filter(requested: int | None) -> int:
    """
    Clamp a requested slider value into [ANY_TIME, MINUTES_PER_DAY - 1].
    """
    if requested is None:
        return ANY_TIME

    req = int(requested)
    return max(ANY_TIME, min(MINUTES_PER_DAY - 1, req))
