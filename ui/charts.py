# ui/charts.py
"""
Figures for the "Farm Analytics & Trends" section.

The series are static mock data (see ui/data.py). The dashboard renders the
figures inline; this module can also write them as PNGs:

Run:
  python -m ui.charts --language en
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, List, Tuple

import matplotlib.pyplot as plt
import pandas as pd

from ui.data import SOIL_DATA, WEATHER_DATA, YIELD_DATA, strings

# (title key, data, x column, y column, color, kind)
CHARTS: List[Tuple[str, pd.DataFrame, str, str, str, str]] = [
    ("predictedYield", YIELD_DATA, "name", "yield", "#10b981", "line"),
    ("soilPH", SOIL_DATA, "name", "pH", "#8b5cf6", "bar"),
    ("rainfallPatterns", WEATHER_DATA, "name", "rainfall", "#3b82f6", "line"),
]


def get_figures_dir() -> Path:
    root = Path(__file__).resolve().parents[1]
    figures = root / "reports" / "figures"
    figures.mkdir(parents=True, exist_ok=True)
    return figures


def chart_figure(title: str, data: pd.DataFrame, x: str, y: str, color: str, kind: str = "line"):
    fig, ax = plt.subplots(figsize=(5, 3))
    if kind == "bar":
        ax.bar(data[x], data[y], color=color)
    else:
        ax.plot(data[x], data[y], color=color, marker="o")
    ax.set_title(title)
    ax.set_xlabel(x.capitalize())
    ax.set_ylabel(y)
    ax.grid(alpha=0.3)
    fig.tight_layout()
    return fig


def build_figures(language: str = "en") -> Dict[str, "plt.Figure"]:
    t = strings(language)
    return {
        key: chart_figure(t[key], data, x, y, color, kind)
        for key, data, x, y, color, kind in CHARTS
    }


def save_figures(out_dir: Path, language: str = "en") -> List[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for key, fig in build_figures(language).items():
        path = out_dir / f"{key}.png"
        fig.savefig(path, dpi=160)
        plt.close(fig)
        paths.append(path)
    return paths


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--language", default="en", help="UI language for chart titles (en, hi)")
    parser.add_argument("--out", default=None, help="Output folder (default: reports/figures)")
    args = parser.parse_args()

    out_dir = Path(args.out) if args.out else get_figures_dir()
    paths = save_figures(out_dir, args.language)

    print("\n✅ Charts generated")
    for p in paths:
        print(f"PNG:  {p}")


if __name__ == "__main__":
    main()
