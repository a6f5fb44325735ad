import folium

FILL_COLOR = "steelblue"
STROKE_COLOR = "white"


def add_station_markers(m, view):
    """
    Draw one circle per station, sized by the view's radius scale.
    view: TrafficView (stations already annotated for its time filter)
    """
    for s in view.stations:
        popup = [
            f"<b>{s.name or s.short_name}</b>",
            f"Station: {s.short_name}",
            f"Departures: {s.departures}",
            f"Arrivals: {s.arrivals}",
        ]
        if view.filtered:
            popup.insert(2, f"Around: {view.time_label}")

        folium.CircleMarker(
            location=[float(s.lat), float(s.lon)],
            radius=view.radius(s),
            color=STROKE_COLOR,
            weight=1,
            fill=True,
            fill_color=FILL_COLOR,
            fill_opacity=0.8,
            opacity=0.8,
            tooltip=view.tooltip(s),
            popup="<br>".join(popup),
        ).add_to(m)
