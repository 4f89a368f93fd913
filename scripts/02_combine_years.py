"""
02_combine_years.py

Read every {year}.csv back, recover the year from the file name,
and stack them into one table written next to the year files.

Inputs:
  - data/{year}.csv   (from step 01)

Outputs:
  - data/combined.csv   (or <in-dir>/combined.csv with --in-dir)

Usage:
  python scripts/02_combine_years.py [--in-dir DIR]
"""

import argparse
from pathlib import Path

import pipeline_config as cfg
from gap_io import read_year_files, write_csv


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--in-dir", default=None,
                        help=f"Directory of <year>.csv files (default: {cfg.DATA_DIR})")
    args = parser.parse_args()

    in_dir = Path(args.in_dir) if args.in_dir else cfg.DATA_DIR

    df = read_year_files(in_dir)
    print(f"Combined: {df.shape}, years {df['year'].min()}-{df['year'].max()}")

    # combined.csv has no year stem, so a rerun of this step skips it
    out = write_csv(df, in_dir / cfg.COMBINED_PATH.name)
    print(f"Saved: {out} {df.shape}")


if __name__ == "__main__":
    main()
