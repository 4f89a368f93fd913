"""
plotting.py

One scatter per group: GDP per capita (log scale) vs. life expectancy,
coloured by year.
"""

import re
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from tqdm import tqdm

UNSAFE_RE = re.compile(r"[^A-Za-z0-9._-]+")


def safe_name(value):
    return UNSAFE_RE.sub("_", str(value)).strip("_") or "group"


def plot_group(df, title, out_path, x="gdpPercap", y="lifeExp", dpi=150):
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(7, 5))
    if "year" in df.columns:
        sc = ax.scatter(df[x], df[y], c=df["year"], cmap="viridis",
                        s=14, alpha=0.8, linewidths=0)
        fig.colorbar(sc, ax=ax, label="year")
    else:
        # nested by year: no year column left to colour by
        ax.scatter(df[x], df[y], color="#2171b5", s=14, alpha=0.8, linewidths=0)
    ax.set_xscale("log")
    ax.set_xlabel(x, fontsize=10)
    ax.set_ylabel(y, fontsize=10)
    ax.set_title(title, fontsize=11)
    ax.grid(alpha=0.2)

    fig.tight_layout()
    fig.savefig(out_path, dpi=dpi, facecolor="white")
    plt.close(fig)
    return out_path


def plot_nested(nested, key, fig_dir, dpi=150):
    """Save one PNG per row of a nested frame; returns the saved paths."""
    fig_dir = Path(fig_dir)
    saved = []
    for value, data in tqdm(zip(nested[key], nested["data"]),
                            total=len(nested), desc="Plotting groups"):
        out = plot_group(data, f"{key}: {value}",
                         fig_dir / f"{safe_name(value)}.png", dpi=dpi)
        print(f"Saved: {out}")
        saved.append(out)
    return saved
