# bikeflow/traffic/context.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List

from bikeflow.traffic.aggregate import compute_station_traffic, max_total_traffic
from bikeflow.traffic.radius_scale import RadiusScale, make_radius_scale
from bikeflow.traffic.time_filter import ANY_TIME, filter_trips_by_time, format_time
from bikeflow.traffic.types import Station, Trip


@dataclass
class TrafficView:
    time_filter: int
    stations: List[Station]
    scale: RadiusScale
    trip_count: int

    @property
    def filtered(self) -> bool:
        return self.time_filter != ANY_TIME

    @property
    def time_label(self) -> str:
        return format_time(self.time_filter) if self.filtered else "(any time)"

    def radius(self, station: Station) -> float:
        return self.scale(station.total_traffic)

    @staticmethod
    def tooltip(station: Station) -> str:
        return (
            f"{station.total_traffic} trips "
            f"({station.departures} departures, {station.arrivals} arrivals)"
        )


ViewListener = Callable[[TrafficView], None]


class TrafficContext:
    """
    Loaded stations + trips and the current time filter.

    view() is pure: it never touches the loaded records, so it is safe to
    call from concurrent request handlers. set_time_filter() is the
    single-threaded path that also notifies subscribers.
    """

    def __init__(
        self,
        stations: Iterable[Station],
        trips: Iterable[Trip],
        time_filter: int = ANY_TIME,
    ):
        self.stations: List[Station] = list(stations)
        self.trips: List[Trip] = list(trips)
        self.time_filter = int(time_filter)

        # scale domain is fixed from the unfiltered data
        self.max_traffic = max_total_traffic(
            compute_station_traffic(self.stations, self.trips)
        )

        self._listeners: List[ViewListener] = []

    def view(self, time_filter: int | None = None) -> TrafficView:
        t = self.time_filter if time_filter is None else int(time_filter)

        trips = filter_trips_by_time(self.trips, t)
        stations = compute_station_traffic(self.stations, trips)
        scale = make_radius_scale(self.max_traffic, filtered=t != ANY_TIME)

        return TrafficView(
            time_filter=t,
            stations=stations,
            scale=scale,
            trip_count=len(trips),
        )

    def set_time_filter(self, time_filter: int) -> TrafficView:
        self.time_filter = int(time_filter)
        view = self.view()
        for listener in list(self._listeners):
            listener(view)
        return view

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe
