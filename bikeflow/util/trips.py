# bikeflow/util/trips.py
from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd

from bikeflow.traffic.types import Trip

REQUIRED_COLUMNS = [
    "started_at",
    "ended_at",
    "start_station_id",
    "end_station_id",
]


def load_trips(trips_csv: str | Path) -> List[Trip]:
    """
    Loads a Bluebikes trips CSV with columns like:

      ride_id, bike_type, started_at, ended_at,
      start_station_id, end_station_id, is_member

    Station ids stay strings (they are matched against station short_name).
    Rows whose timestamps do not parse are dropped here, so the traffic
    functions only ever see real datetimes.
    """
    trips_csv = Path(trips_csv)

    df = pd.read_csv(
        trips_csv,
        dtype={"start_station_id": str, "end_station_id": str},
        keep_default_na=False,
    )
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Trips CSV missing columns: {', '.join(missing)}")

    out = pd.DataFrame()
    out["start_station_id"] = df["start_station_id"].astype(str).str.strip()
    out["end_station_id"] = df["end_station_id"].astype(str).str.strip()
    out["started_at"] = pd.to_datetime(df["started_at"], format="mixed", errors="coerce")
    out["ended_at"] = pd.to_datetime(df["ended_at"], format="mixed", errors="coerce")

    # drop malformed rows
    out = out.dropna(subset=["started_at", "ended_at"])

    return [
        Trip(
            start_station_id=row.start_station_id,
            end_station_id=row.end_station_id,
            started_at=row.started_at.to_pydatetime(),
            ended_at=row.ended_at.to_pydatetime(),
        )
        for row in out.itertuples(index=False)
    ]
