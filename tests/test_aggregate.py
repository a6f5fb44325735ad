"""Tests for per-station traffic aggregation."""

from bikeflow.traffic.aggregate import (
    compute_station_traffic,
    count_by_station,
    max_total_traffic,
)
from bikeflow.traffic.types import Station


def test_counts_arrivals_and_departures(stations, trips) -> None:
    """Given known trips, when aggregating, then each station gets its counts."""
    out = compute_station_traffic(stations, trips)
    by_name = {s.short_name: s for s in out}

    assert (by_name["A"].departures, by_name["A"].arrivals) == (3, 1)
    assert (by_name["B"].departures, by_name["B"].arrivals) == (1, 1)
    assert (by_name["C"].departures, by_name["C"].arrivals) == (0, 1)


def test_total_is_sum_of_arrivals_and_departures(stations, trips) -> None:
    """Given any trips, when aggregating, then total_traffic equals arrivals + departures."""
    for s in compute_station_traffic(stations, trips):
        assert s.total_traffic == s.arrivals + s.departures


def test_total_traffic_counts_known_endpoints_only(stations, trips) -> None:
    """Given trips with unknown ids, when summing traffic, then only known endpoints count."""
    known = {s.short_name for s in stations}
    both = sum(1 for t in trips if t.start_station_id in known and t.end_station_id in known)
    one = sum(
        1 for t in trips if (t.start_station_id in known) != (t.end_station_id in known)
    )

    out = compute_station_traffic(stations, trips)

    assert sum(s.total_traffic for s in out) == 2 * both + one == 7


def test_station_without_trips_is_zero() -> None:
    """Given a station and no trips, when aggregating, then all counts are zero."""
    s = Station(short_name="S", lat=0.0, lon=0.0)

    (out,) = compute_station_traffic([s], [])

    assert out.arrivals == 0
    assert out.departures == 0
    assert out.total_traffic == 0


def test_order_is_preserved_and_inputs_untouched(stations, trips) -> None:
    """Given stations, when aggregating, then output order matches and inputs are not mutated."""
    out = compute_station_traffic(stations, trips)

    assert [s.short_name for s in out] == ["A", "B", "C"]
    assert all(s.total_traffic == 0 for s in stations)
    assert out[0] is not stations[0]


def test_aggregation_is_idempotent(stations, trips) -> None:
    """Given unchanged inputs, when aggregating twice, then both results are equal."""
    assert compute_station_traffic(stations, trips) == compute_station_traffic(stations, trips)


def test_reaggregation_does_not_accumulate(stations, trips) -> None:
    """Given an already-annotated result, when aggregating it again with fewer trips, then counts reset."""
    first = compute_station_traffic(stations, trips)

    second = compute_station_traffic(first, trips[:1])

    by_name = {s.short_name: s for s in second}
    assert by_name["A"].total_traffic == 1
    assert by_name["B"].total_traffic == 1
    assert by_name["C"].total_traffic == 0


def test_unknown_ids_are_kept_in_keyed_counts(trips) -> None:
    """Given trips to unknown stations, when counting, then the keyed maps still hold them."""
    departures, arrivals = count_by_station(trips)

    assert departures["YY"] == 1
    assert arrivals["ZZ"] == 1
    assert arrivals["XX"] == 1


def test_max_total_traffic(stations, trips) -> None:
    """Given annotated stations, when taking the max, then the busiest total is returned."""
    assert max_total_traffic(compute_station_traffic(stations, trips)) == 4
    assert max_total_traffic([]) == 0
