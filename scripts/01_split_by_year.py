"""
01_split_by_year.py

Split the bundled gapminder table into one CSV per year.

Inputs:
  - gapminder package dataset (1704 rows, 1952-2007)

Outputs:
  - data/{year}.csv   (country, continent, lifeExp, pop, gdpPercap)
  - config.json       (run dir; only when writing to the default data dir)

Usage:
  python scripts/01_split_by_year.py [--out-dir DIR]
"""

import argparse
from pathlib import Path

import pipeline_config as cfg
from by_group import group_by
from gap_io import export_groups, load_gapminder


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--out-dir", default=None,
                        help=f"Output directory (default: {cfg.DATA_DIR})")
    args = parser.parse_args()

    out_dir = Path(args.out_dir) if args.out_dir else cfg.DATA_DIR

    df = load_gapminder()
    print(f"Loaded gapminder: {df.shape}")

    groups = group_by(df, "year")
    print(f"Groups by year: {len(groups)}")

    written = export_groups(groups, out_dir)

    if args.out_dir is None:
        cfg.save_config()
    print("-" * 50)
    print(f"Wrote {len(written)} files to {out_dir}")
    print("-" * 50)


if __name__ == "__main__":
    main()
