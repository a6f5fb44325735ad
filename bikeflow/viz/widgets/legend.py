# bikeflow/viz/widgets/legend.py
import folium


def build_legend_widget(view):
    """
    Returns a Folium Element that injects a floating legend:
    reference circle sizes for the current scale + bike lane swatch.
    """
    samples = []
    if view.scale.domain_max > 0:
        for frac in (1.0, 0.25):
            t = int(round(view.scale.domain_max * frac))
            r = view.scale(t)
            samples.append(
                f"""
          <div class="legend-row">
            <span class="legend-circle" style="width:{2 * r:.0f}px;height:{2 * r:.0f}px;"></span>
            {t} trips
          </div>
                """
            )

    return folium.Element(
        f"""
<style>
#map-legend {{
  position: absolute;
  bottom: 140px;
  left: 16px;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 12px;
  z-index: 1200;
}}
#map-legend .legend-row {{
  display: flex;
  align-items: center;
  gap: 8px;
  margin: 4px 0;
}}
#map-legend .legend-circle {{
  display: inline-block;
  border-radius: 50%;
  background: steelblue;
  opacity: 0.8;
  border: 1px solid white;
}}
</style>

<div id="map-legend">
  <div><b>Station traffic</b> {view.time_label}</div>
  {''.join(samples)}
  <hr style="margin:6px 0">
  <div><span style="color:green">&#9644;</span> bike lane</div>
</div>
"""
    )
