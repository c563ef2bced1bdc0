from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np


@dataclass(frozen=True)
class PredictionResult:
    predicted_yield: str  # 2 decimals, tons per hectare
    comparative_percentage: str  # 1 decimal
    total_area: float
    advice: Dict[str, str]
    sub_plot_results: List[dict] = field(default_factory=list)

    def advice_for(self, language: str) -> str:
        return self.advice.get(language) or self.advice["en"]


def comparative_percentage(rng: Optional[np.random.Generator] = None) -> float:
    """
    "Percentage above average" shown next to the yield.

    NOTE: placeholder statistic. It is drawn uniformly from [5, 30) on every
    render and is not compared against any historical baseline.
    """
    rng = rng or np.random.default_rng()
    return float(rng.uniform(5, 30))


def present(
    predicted_yield: float,
    district: str,
    crop: str,
    area: float,
    sub_plots: Optional[List[dict]] = None,
    rng: Optional[np.random.Generator] = None,
) -> PredictionResult:
    rounded = f"{predicted_yield:.2f}"
    area_text = f"{area:g}"
    return PredictionResult(
        # sub-plots are listed with their area only; upstream predicts one crop
        sub_plot_results=[{"crop": p["crop"], "area": float(p["area"])} for p in sub_plots or []],
        predicted_yield=rounded,
        comparative_percentage=f"{comparative_percentage(rng):.1f}",
        total_area=float(area),
        advice={
            "en": (
                f"Based on your {area_text} hectares in {district}, the predicted yield "
                f"for {crop} is {rounded} tons per hectare. This is an excellent result!"
            ),
        },
    )
