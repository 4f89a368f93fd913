"""
03_plot_by_group.py

Nest the combined table by a grouping column (default: continent),
fit a lifeExp ~ year trend inside each group, and save one scatter
plot per group. Nesting by year keeps the plots but skips the trend
table, since each year group has a single year.

Inputs:
  - data/combined.csv   (from step 02)

Outputs:
  - output/tables/trends_by_{key}.csv
  - output/figures/{key}/{value}.png

Usage:
  python scripts/03_plot_by_group.py [--by COLUMN]
"""

import argparse
from functools import partial

import pandas as pd

import pipeline_config as cfg
from by_group import fit_trend, map_groups, nest
from gap_io import check_schema, write_csv
from plotting import plot_nested


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--by", default=cfg.CONFIG["nest_key"],
                        help="Column to nest by (default: %(default)s)")
    args = parser.parse_args()
    key = args.by

    if not cfg.COMBINED_PATH.exists():
        raise RuntimeError(f"{cfg.COMBINED_PATH} not found, run step 02 first")

    df = check_schema(pd.read_csv(cfg.COMBINED_PATH))
    nested = nest(df, key)
    print(f"Nested by {key}: {len(nested)} groups")

    trend_x, trend_y = cfg.CONFIG["trend_x"], cfg.CONFIG["trend_y"]
    if key in (trend_x, trend_y):
        # nest drops the key column, so the groups have nothing to fit on
        print(f"skip trends: nested by {key}, which is a trend column")
    else:
        trend = partial(fit_trend, x=trend_x, y=trend_y)
        trends = map_groups(nested, trend, key)

        cfg.TAB_DIR.mkdir(parents=True, exist_ok=True)
        out = write_csv(trends, cfg.TAB_DIR / f"trends_by_{key}.csv")
        print(f"Saved: {out} {trends.shape}")
        print(trends.to_string(index=False))

    saved = plot_nested(nested, key, cfg.FIG_DIR / key, dpi=cfg.CONFIG["fig_dpi"])

    print("-" * 50)
    print(f"Saved {len(saved)} figures to {cfg.FIG_DIR / key}")
    print("-" * 50)


if __name__ == "__main__":
    main()
