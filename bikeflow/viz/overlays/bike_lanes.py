# bikeflow/viz/overlays/bike_lanes.py
import json

import folium

BIKE_LANE_SOURCES = {
    "boston_bike_lanes": (
        "https://bostonopendata-boston.opendata.arcgis.com/datasets/"
        "boston::existing-bike-network-2022.geojson"
    ),
    "cambridge_bike_lanes": (
        "https://raw.githubusercontent.com/cambridgegis/cambridgegis_data/main/"
        "Recreation/Bike_Facilities/RECREATION_BikeFacilities.geojson"
    ),
}

BIKE_LANE_STYLE = {
    "color": "green",
    "weight": 3,
    "opacity": 0.4,
}


def add_bike_lanes(m, sources=None, style=None):
    """
    Bike network overlays, fetched by the browser once the page is up.

    folium.GeoJson would download the files server-side on every render,
    so the layers are added with Leaflet directly instead.
    """
    sources = BIKE_LANE_SOURCES if sources is None else sources
    style = BIKE_LANE_STYLE if style is None else style
    if not sources:
        return

    map_name = m.get_name()

    m.get_root().html.add_child(
        folium.Element(
            f"""
<script>
document.addEventListener("DOMContentLoaded", () => {{
  const sources = {json.dumps(sources)};
  const style = {json.dumps(style)};

  Object.entries(sources).forEach(([id, url]) => {{
    fetch(url)
      .then((r) => r.json())
      .then((data) => {{
        L.geoJSON(data, {{ style: () => style }}).addTo({map_name});
      }})
      .catch((err) => console.error("Error loading bike lanes " + id + ":", err));
  }});
}});
</script>
"""
        )
    )
