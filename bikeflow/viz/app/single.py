# bikeflow/viz/app/single.py
from __future__ import annotations

from pathlib import Path

from colorama import Fore, Style
from flask import Flask, jsonify, request

from bikeflow.traffic.context import TrafficContext
from bikeflow.traffic.time_filter import ANY_TIME, snap_time_filter
from bikeflow.util.stations import load_stations
from bikeflow.util.trips import load_trips
from bikeflow.viz.maps.render import render_map_document

DEFAULT_TITLE = "Bluebikes Station Traffic"


def load_context(stations_file: str | Path, trips_csv: str | Path) -> TrafficContext:
    """
    Load stations + trips once and build the context every request reads from.
    Load failures are reported and re-raised; nothing is served on partial data.
    """
    try:
        print(f"{Fore.CYAN}Loading stations from {stations_file}…{Style.RESET_ALL}")
        stations = load_stations(stations_file)

        print(f"{Fore.CYAN}Loading trips from {trips_csv}…{Style.RESET_ALL}")
        trips = load_trips(trips_csv)
    except (OSError, ValueError) as e:
        print(f"{Fore.RED}Error loading bike data: {e}{Style.RESET_ALL}")
        raise

    ctx = TrafficContext(stations, trips)
    print(
        f"{Fore.GREEN}Loaded {len(ctx.stations)} stations, {len(ctx.trips)} trips "
        f"(busiest station: {ctx.max_traffic} trips){Style.RESET_ALL}"
    )
    return ctx


def _requested_time_filter() -> int:
    t_req = request.args.get("t", ANY_TIME, type=int)
    return snap_time_filter(t_req)


def build_app(ctx: TrafficContext, *, title: str | None = None) -> Flask:
    app = Flask(__name__)

    @app.route("/")
    def _index():
        view = ctx.view(_requested_time_filter())
        return render_map_document(view, title=title or DEFAULT_TITLE)

    @app.route("/traffic.json")
    def _traffic():
        view = ctx.view(_requested_time_filter())
        return jsonify(
            {
                "time_filter": view.time_filter,
                "time_label": view.time_label,
                "trip_count": view.trip_count,
                "max_traffic": ctx.max_traffic,
                "stations": [
                    {
                        "short_name": s.short_name,
                        "name": s.name,
                        "lat": s.lat,
                        "lon": s.lon,
                        "arrivals": s.arrivals,
                        "departures": s.departures,
                        "total_traffic": s.total_traffic,
                        "radius": view.radius(s),
                    }
                    for s in view.stations
                ],
            }
        )

    return app


def serve_traffic_map(
    *,
    stations_file: str | Path,
    trips_csv: str | Path,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str | None = None,
    ctx: TrafficContext | None = None,
):
    """
    Library entrypoint: call this and you get a running website.
    """
    if ctx is None:
        ctx = load_context(stations_file, trips_csv)

    app = build_app(ctx, title=title)
    app.run(host=host, port=int(port), debug=bool(debug))
