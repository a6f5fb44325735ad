import os

from bikeflow.viz.app.single import serve_traffic_map

STATIONS = os.environ.get("STATIONS_JSON", "data/bluebikes-stations.json")
TRIPS = os.environ.get("TRIPS_CSV", "data/bluebikes-traffic-2024-03.csv")


def main():
  port = int(os.environ.get("PORT", "8080"))

  serve_traffic_map(
      stations_file=STATIONS,
      trips_csv=TRIPS,
      port=port,
      title="Bluebikes Station Traffic",
      host="0.0.0.0",  # IMPORTANT for Render
  )


if __name__ == "__main__":
  main()
