# bikeflow/viz/widgets/time_slider.py
import folium

from bikeflow.traffic.time_filter import ANY_TIME, MINUTES_PER_DAY


def build_time_slider(view, *, param="t"):
    """
    Time-of-day filter:
      - range input from ANY_TIME (-1, "any time") to 23:59
      - label follows the thumb while dragging
      - releasing the thumb reloads the page with ?t=<minutes>
    """
    t_cur = view.time_filter
    any_display = "block" if t_cur == ANY_TIME else "none"
    time_text = "" if t_cur == ANY_TIME else view.time_label

    return folium.Element(
        f"""
<style>
#time-filter {{
  position: absolute;
  top: 12px;
  right: 16px;
  z-index: 1300;
  background: rgba(255,255,255,0.95);
  padding: 8px 14px;
  border-radius: 10px;
  font-family: sans-serif;
  font-size: 12px;
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
}}
#time-filter label {{
  display: flex;
  align-items: baseline;
  gap: 8px;
}}
#time-slider {{
  width: 260px;
}}
#selected-time {{
  font-weight: 600;
}}
#any-time {{
  color: #777;
  font-style: italic;
}}
</style>

<div id="time-filter">
  <label>
    Filter by time:
    <input id="time-slider" type="range"
           min="{ANY_TIME}" max="{MINUTES_PER_DAY - 1}" value="{t_cur}"
           oninput="timeSliderMove(this.value)"
           onchange="timeSliderSet(this.value)">
  </label>
  <time id="selected-time">{time_text}</time>
  <em id="any-time" style="display:{any_display};">(any time)</em>
</div>

<script>
function formatTime(minutes) {{
  const date = new Date(0, 0, 0, 0, minutes);
  return date.toLocaleString("en-US", {{ timeStyle: "short" }});
}}

function timeSliderMove(value) {{
  const t = Number(value);
  const selected = document.getElementById("selected-time");
  const anyTime = document.getElementById("any-time");
  if (t === {ANY_TIME}) {{
    selected.textContent = "";
    anyTime.style.display = "block";
  }} else {{
    selected.textContent = formatTime(t);
    anyTime.style.display = "none";
  }}
}}

function timeSliderSet(value) {{
  const t = Number(value);
  const url = new URL(window.location.href);
  url.searchParams.set("{param}", String(t));
  window.location.href = url.toString();
}}
</script>
"""
    )
