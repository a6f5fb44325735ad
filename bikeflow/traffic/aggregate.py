# bikeflow/traffic/aggregate.py
from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List

from bikeflow.traffic.types import Station, Trip


def count_by_station(trips: Iterable[Trip]) -> tuple[Dict[str, int], Dict[str, int]]:
    """
    Returns (departures, arrivals) keyed by station id.
    Ids that match no known station are kept; lookups simply never hit them.
    """
    departures: Dict[str, int] = {}
    arrivals: Dict[str, int] = {}

    for trip in trips:
        s0 = trip.start_station_id
        s1 = trip.end_station_id
        departures[s0] = departures.get(s0, 0) + 1
        arrivals[s1] = arrivals.get(s1, 0) + 1

    return departures, arrivals


def compute_station_traffic(
    stations: Iterable[Station],
    trips: Iterable[Trip],
) -> List[Station]:
    """
    Annotate stations with arrivals / departures / total_traffic.

    Returns fresh copies in input order; the given station records are
    left untouched, so every call starts from zero.
    """
    departures, arrivals = count_by_station(trips)

    out: List[Station] = []
    for s in stations:
        sid = s.short_name
        arr = arrivals.get(sid, 0)
        dep = departures.get(sid, 0)
        out.append(
            replace(
                s,
                arrivals=arr,
                departures=dep,
                total_traffic=arr + dep,
            )
        )

    return out


def max_total_traffic(stations: Iterable[Station]) -> int:
    return max((s.total_traffic for s in stations), default=0)
