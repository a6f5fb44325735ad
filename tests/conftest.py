"""Shared fixtures for traffic tests."""

from datetime import datetime

import pytest

from bikeflow.traffic.types import Station, Trip


def make_trip(start: str, end: str, start_min: int, end_min: int) -> Trip:
    """Trip on 2024-03-01 between two minute-of-day offsets."""
    return Trip(
        start_station_id=start,
        end_station_id=end,
        started_at=datetime(2024, 3, 1, start_min // 60, start_min % 60, 30),
        ended_at=datetime(2024, 3, 1, end_min // 60, end_min % 60, 45),
    )


@pytest.fixture
def stations() -> list[Station]:
    return [
        Station(short_name="A", name="Alpha", lat=42.36, lon=-71.09),
        Station(short_name="B", name="Bravo", lat=42.37, lon=-71.10),
        Station(short_name="C", name="Charlie", lat=42.35, lon=-71.06),
    ]


@pytest.fixture
def trips() -> list[Trip]:
    return [
        make_trip("A", "B", 540, 600),
        make_trip("B", "A", 480, 500),
        make_trip("A", "C", 1020, 1050),
        make_trip("A", "ZZ", 700, 720),
        make_trip("YY", "XX", 10, 20),
    ]


@pytest.fixture
def trip_factory():
    return make_trip
