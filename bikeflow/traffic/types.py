# bikeflow/traffic/types.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime


@dataclass
class Station:
    short_name: str
    lat: float
    lon: float
    name: str = ""
    station_id: str | None = None
    capacity: int | None = None
    arrivals: int = 0
    departures: int = 0
    total_traffic: int = 0


@dataclass
class Trip:
    start_station_id: str
    end_station_id: str
    started_at: datetime
    ended_at: datetime
