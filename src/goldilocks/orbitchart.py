"""CLI entry point for orbit chart generation.

Uses the stored selection if there is one, otherwise runs the query below and
takes the first match. Edit the variables at the top, then run:
    uv run python src/goldilocks/orbitchart.py
"""

from dotenv import load_dotenv

load_dotenv()

from goldilocks.catalog import fetch_planets, record_label  # noqa: E402
from goldilocks.config import Settings, configure_logging  # noqa: E402
from goldilocks.models import PlanetQuery  # noqa: E402
from goldilocks.renderers.static import save_static_chart  # noqa: E402
from goldilocks.selection import load_selection, save_selection  # noqa: E402
from goldilocks.simulation import build_simulation_state  # noqa: E402
from goldilocks.summary import describe_clock, describe_system  # noqa: E402

query = PlanetQuery(pl_orbsmax_min="0.5", pl_orbsmax_max="2", pl_rade_max="2")
ticks = 300

settings = Settings.from_env()
configure_logging(settings.log_level)

record = load_selection(settings.selection_path)
if record is None:
    rows = fetch_planets(query, settings)
    if not rows:
        raise SystemExit("No planets match the query.")
    record = rows[0]
    save_selection(record, settings.selection_path)
    print(f"Selected: {record_label(record)}")

state = build_simulation_state(record)
for _ in range(ticks):
    state.advance(settings.tick)

for line in describe_system(state.params):
    print(line)
print(describe_clock(state))

path = save_static_chart(state)
print(f"Saved: {path}")
