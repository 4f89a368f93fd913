"""
Central configuration for the gapminder pipeline (steps 01-03).

To create a new run with different settings:
  1. Change RUN_NAME (e.g., "by_country")
  2. Adjust CONFIG values as needed
  3. Run the pipeline: 01 → 02 → 03

The "main" run writes to data/ and output/ under BASE_DIR.
Any other run gets its own directory under runs/.
A config.json is saved alongside for reproducibility.

Override mechanism for experiments:
  Set env var PIPELINE_CONFIG_OVERRIDE to a JSON file path.
  The JSON can override any CONFIG value and/or run_name.
  Example: {"run_name": "by_country", "nest_key": "country"}

Step 01 always splits by year: step 02 reads files back by their year stem.
"""

import json
import os
from pathlib import Path

BASE_DIR = Path(os.environ.get("GAPMINDER_DIR", "."))

# ── Run name ───────────────────────────────────────────────────────
RUN_NAME = "main"

# ── Pipeline settings ──────────────────────────────────────────────
CONFIG = {
    "run_name": RUN_NAME,
    "nest_key": "continent",      # step 03: one plot + trend row per value
    "trend_x": "year",
    "trend_y": "lifeExp",
    "fig_dpi": 150,
}

# ── Override from environment (for experiments) ────────────────────
_override_path = os.environ.get("PIPELINE_CONFIG_OVERRIDE")
if _override_path:
    with open(_override_path) as f:
        _overrides = json.load(f)
    RUN_NAME = _overrides.pop("run_name", RUN_NAME)
    CONFIG.update(_overrides)
    CONFIG["run_name"] = RUN_NAME
    print(f"  [pipeline_config] Override loaded: run={RUN_NAME}")
    for k, v in _overrides.items():
        print(f"    {k} = {v}")

# ── Run-specific output paths ─────────────────────────────────────
if RUN_NAME == "main":
    RUN_DIR = BASE_DIR
else:
    RUN_DIR = BASE_DIR / "runs" / RUN_NAME

DATA_DIR = RUN_DIR / "data"
FIG_DIR = RUN_DIR / "output" / "figures"
TAB_DIR = RUN_DIR / "output" / "tables"
COMBINED_PATH = DATA_DIR / "combined.csv"


def save_config():
    """Save the current config alongside run outputs."""
    RUN_DIR.mkdir(parents=True, exist_ok=True)
    with open(RUN_DIR / "config.json", "w") as f:
        json.dump(CONFIG, f, indent=2)
    print(f"  Config saved -> {RUN_DIR / 'config.json'}")
