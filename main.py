# main.py
import os
import sys

from colorama import Fore, Style

from bikeflow.traffic.time_filter import ANY_TIME
from bikeflow.viz.app.single import load_context, serve_traffic_map


STATIONS = os.environ.get("STATIONS_JSON", "data/bluebikes-stations.json")
TRIPS = os.environ.get("TRIPS_CSV", "data/bluebikes-traffic-2024-03.csv")
TOP_N = 5


def print_view(view):
    print(f"\nBusiest stations {view.time_label} ({view.trip_count} trips):\n")
    busiest = sorted(view.stations, key=lambda s: s.total_traffic, reverse=True)
    for i, s in enumerate(busiest[:TOP_N], 1):
        print(
            f"{i:02d}. "
            f"{s.short_name:>8} | "
            f"{view.tooltip(s)} | "
            f"r={view.radius(s):.1f}"
        )


def parse_times(args):
    """
    Minutes since midnight from the command line; bad values are reported and skipped.
    """
    times = []
    for a in args:
        try:
            times.append(int(a))
        except ValueError:
            print(
                f"{Fore.RED}Skipping time filter {a!r}: "
                f"not a whole number of minutes{Style.RESET_ALL}"
            )
    return times


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    ctx = load_context(STATIONS, TRIPS)

    # ---- print summaries for the requested times (minutes since midnight) ----
    ctx.subscribe(print_view)
    for t in [ANY_TIME] + parse_times(argv):
        ctx.set_time_filter(t)

    # ---- UI ----
    serve_traffic_map(
        stations_file=STATIONS,
        trips_csv=TRIPS,
        port=int(os.environ.get("PORT", "8080")),
        host=os.environ.get("HOST", "127.0.0.1"),
        ctx=ctx,
    )


if __name__ == "__main__":
    main()
