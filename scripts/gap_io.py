"""
gap_io.py

Reading and writing the gapminder table:
  - load_gapminder: the bundled sample dataset (gapminder package)
  - export_groups: one <key>.csv per group, key column dropped
  - read_year_files: map read_csv over <year>.csv files and stack them
"""

import re
from pathlib import Path

import pandas as pd
from tqdm import tqdm

SCHEMA = {
    "country": str,
    "continent": str,
    "year": int,
    "lifeExp": float,
    "pop": float,
    "gdpPercap": float,
}
COLUMNS = list(SCHEMA)
EXPORT_COLUMNS = [c for c in COLUMNS if c != "year"]

YEAR_RE = re.compile(r"\d{4}")


def check_schema(df):
    """Return a copy of df with schema columns in order and cast to their types."""
    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns: {missing}")

    out = df[COLUMNS].copy()
    has_na = [c for c in COLUMNS if out[c].isna().any()]
    if has_na:
        raise ValueError(f"Missing values in columns: {has_na}")

    for col, typ in SCHEMA.items():
        out[col] = out[col].astype(typ)
    return out


def load_gapminder():
    """Load the bundled gapminder table (1704 country-year rows)."""
    from gapminder import gapminder

    return check_schema(gapminder)


def write_csv(df, out):
    out = Path(out)
    try:
        df.to_csv(out, index=False, lineterminator="\n")
    except OSError as e:
        raise RuntimeError(f"Failed to write {out}: {e}") from e
    return out


def export_groups(groups, out_dir, columns=EXPORT_COLUMNS):
    """Write each group to out_dir/<key>.csv and return the written paths."""
    out_dir = Path(out_dir)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RuntimeError(f"Failed to create {out_dir}: {e}") from e

    written = []
    for key, df in tqdm(groups.items(), desc="Writing groups", disable=not groups):
        out = write_csv(df[columns], out_dir / f"{key}.csv")
        print(f"Saved: {out} {df[columns].shape}")
        written.append(out)
    return written


def read_year_files(in_dir):
    """Read every <year>.csv in in_dir into one table with a year column."""
    in_dir = Path(in_dir)
    files = sorted(in_dir.glob("*.csv"))

    dfs = []
    for f in tqdm(files, desc="Reading year files", disable=not files):
        if not YEAR_RE.fullmatch(f.stem):
            print("skip (no year):", f.name)
            continue

        df = pd.read_csv(f)
        df["year"] = int(f.stem)
        dfs.append(df)

    if not dfs:
        raise RuntimeError(f"No year files found in {in_dir}")

    return check_schema(pd.concat(dfs, ignore_index=True))
