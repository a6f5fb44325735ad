# bikeflow/viz/maps/render.py
import folium

from bikeflow.viz.overlays.bike_lanes import add_bike_lanes
from bikeflow.viz.overlays.stations import add_station_markers
from bikeflow.viz.widgets.legend import build_legend_widget
from bikeflow.viz.widgets.time_slider import build_time_slider

CENTER_LAT = 42.36027
CENTER_LON = -71.09415
ZOOM_START = 12
MIN_ZOOM = 5
MAX_ZOOM = 18


def render_map_document(
    view,
    *,
    title: str | None = None,
    bike_lanes: bool = True,
):
    """
    Single place that assembles the full Folium map HTML document
    for one TrafficView.
    """

    m = folium.Map(
        location=[CENTER_LAT, CENTER_LON],
        zoom_start=ZOOM_START,
        min_zoom=MIN_ZOOM,
        max_zoom=MAX_ZOOM,
        tiles="cartodbpositron",
        prefer_canvas=False,
    )

    # bike lanes under the stations
    if bike_lanes:
        add_bike_lanes(m)

    # stations
    add_station_markers(m, view)

    # title + wrap so widgets sit on-map
    m.get_root().html.add_child(
        folium.Element(
            f"""
<style>
#map-wrap {{
  position: relative;
  width: 100%;
}}
#map-wrap .leaflet-container {{
  width: 100% !important;
  height: 85vh !important;
  min-height: 520px;
}}
#map-title {{
  position: absolute;
  top: 12px;
  left: 16px;
  background: rgba(255,255,255,0.95);
  padding: 6px 16px;
  border-radius: 999px;
  font-size: 14px;
  font-weight: 600;
  z-index: 1300;
}}
</style>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl) return;

  let wrap = document.getElementById("map-wrap");
  if (!wrap) {{
    wrap = document.createElement("div");
    wrap.id = "map-wrap";
    mapEl.parentNode.insertBefore(wrap, mapEl);
    wrap.appendChild(mapEl);
  }}

  {"const t=document.createElement('div');t.id='map-title';t.textContent=%r;wrap.appendChild(t);" % title if title else ""}

  ["time-filter", "map-legend"].forEach((id) => {{
    const el = document.getElementById(id);
    if (el) wrap.appendChild(el);
  }});
}});
</script>
"""
        )
    )

    # widgets
    m.get_root().html.add_child(build_time_slider(view))
    m.get_root().html.add_child(build_legend_widget(view))

    return m.get_root().render()
