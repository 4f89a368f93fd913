"""
by_group.py

Split-apply helpers over a long table:
  - group_by: {key value -> rows}, stable within each group
  - nest / unnest: one row per group with the rows held in a `data` column
  - map_groups: apply a function to every nested frame
  - fit_trend: least-squares line, used as the per-group function
"""

import numpy as np
import pandas as pd


def group_by(df, key):
    """Partition df by `key`. Keys come out sorted, rows keep their order."""
    if key not in df.columns:
        raise ValueError(f"Missing '{key}' column")

    return {k: g for k, g in df.groupby(key, sort=True)}


def nest(df, key):
    """Collapse each group of `key` into one row; rows go into `data`."""
    groups = group_by(df, key)
    return pd.DataFrame({
        key: list(groups.keys()),
        "data": [g.drop(columns=key).reset_index(drop=True) for g in groups.values()],
    })


def unnest(nested, key):
    dfs = []
    for k, data in zip(nested[key], nested["data"]):
        df = data.copy()
        df.insert(0, key, k)
        dfs.append(df)

    if not dfs:
        return pd.DataFrame(columns=[key])
    return pd.concat(dfs, ignore_index=True)


def map_groups(nested, fn, key):
    """
    Apply fn to each nested frame.

    dict / Series results are spread into columns next to the key,
    anything else lands in a single `result` column.
    """
    results = [fn(data) for data in nested["data"]]
    keys = nested[key].tolist()

    if results and all(isinstance(r, (dict, pd.Series)) for r in results):
        out = pd.DataFrame([dict(r) for r in results])
        out.insert(0, key, keys)
        return out

    return pd.DataFrame({key: keys, "result": results})


def fit_trend(df, x="year", y="lifeExp"):
    """OLS fit of y on x: slope, intercept, r_squared, n."""
    missing = [c for c in (x, y) if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns: {missing}")

    xs = df[x].to_numpy(dtype=float)
    ys = df[y].to_numpy(dtype=float)

    if np.unique(xs).size < 2:
        raise ValueError(f"Need at least two distinct '{x}' values to fit a trend")

    slope, intercept = np.polyfit(xs, ys, 1)
    resid = ys - (slope * xs + intercept)
    ss_tot = ((ys - ys.mean()) ** 2).sum()
    r_squared = 1.0 - (resid ** 2).sum() / ss_tot if ss_tot > 0 else 1.0

    return {
        "slope": float(slope),
        "intercept": float(intercept),
        "r_squared": float(r_squared),
        "n": int(len(xs)),
    }
