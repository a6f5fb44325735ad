import json

from bikeflow.traffic.types import Station


def load_stations(path):
    """
    Load Bluebikes stations from a GBFS-style station JSON
    ({"data": {"stations": [...]}}).
    Returns Station records with only the fields we care about.
    """
    with open(path) as f:
        raw = json.load(f)

    try:
        records = raw["data"]["stations"]
    except (KeyError, TypeError):
        raise ValueError(f"{path}: expected data.stations in station JSON")

    stations = []
    for s in records:
        short_name = s.get("short_name")
        if short_name is None:
            raise ValueError(f"{path}: station record without short_name: {s!r}")

        try:
            lat = float(s["lat"])
            lon = float(s["lon"])
            cap = s.get("capacity")
            cap = None if cap is None else int(cap)
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(
                f"{path}: bad position/capacity for station {short_name}: {e!r}"
            ) from e

        sid = s.get("station_id")
        stations.append(
            Station(
                short_name=str(short_name),
                name=s.get("name", ""),
                lat=lat,
                lon=lon,
                station_id=None if sid is None else str(sid),
                capacity=cap,
            )
        )

    return stations
