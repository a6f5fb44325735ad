"""Tests for the folium map document."""

from bikeflow.traffic.context import TrafficContext
from bikeflow.viz.maps.render import render_map_document
from bikeflow.viz.overlays.bike_lanes import BIKE_LANE_SOURCES


def test_document_has_station_tooltips(stations, trips) -> None:
    """Given an unfiltered view, when rendering, then each station tooltip shows its traffic."""
    html = render_map_document(TrafficContext(stations, trips).view())

    assert "4 trips (3 departures, 1 arrivals)" in html
    assert "2 trips (1 departures, 1 arrivals)" in html
    assert "steelblue" in html


def test_document_has_time_slider(stations, trips) -> None:
    """Given a filtered view, when rendering, then the slider sits at the filter value."""
    html = render_map_document(TrafficContext(stations, trips).view(550), title="Traffic")

    assert 'id="time-slider"' in html
    assert 'value="550"' in html
    assert "9:10 AM" in html
    assert "Traffic" in html


def test_document_bike_lanes_toggle(stations, trips) -> None:
    """Given bike_lanes on or off, when rendering, then the lane sources follow."""
    view = TrafficContext(stations, trips).view()
    boston = BIKE_LANE_SOURCES["boston_bike_lanes"]

    assert boston in render_map_document(view)
    assert boston not in render_map_document(view, bike_lanes=False)
