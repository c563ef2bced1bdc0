"""
Form session behind the prediction page.

    IDLE -> VALIDATING -> IDLE (error)                 form incomplete
                       -> SUBMITTING -> IDLE (result)  server answered
                                     -> IDLE (error)   any failure

Only one submission may be in flight per session.
"""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, List, Optional

import numpy as np

from ui.api_client import PredictionFailed, YieldApiClient
from ui.data import crops_for
from ui.presenter import PredictionResult, present

INCOMPLETE_FORM = "Please fill out all required fields."


class FormState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"


class SubmissionInProgress(RuntimeError):
    pass


_plot_ids = itertools.count(1)


@dataclass
class SubPlot:
    crop: str = ""
    area: Any = ""
    # stable across removals, used to key the plot's widgets
    id: int = field(default_factory=lambda: next(_plot_ids))


@dataclass
class FormData:
    district: str = ""
    year: int = field(default_factory=lambda: date.today().year)
    season: str = ""
    crop: str = ""
    area: Any = ""
    sub_plots: List[SubPlot] = field(default_factory=lambda: [SubPlot()])


def _filled(value: Any) -> bool:
    return value is not None and str(value).strip() != ""


def _number(value: Any) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class FormSession:
    def __init__(self, api: YieldApiClient, rng: Optional[np.random.Generator] = None):
        self.api = api
        self.rng = rng
        self.data = FormData()
        self.show_sub_plots = False
        self.state = FormState.IDLE
        self.result: Optional[PredictionResult] = None
        self.error: Optional[str] = None
        self._in_flight = threading.Lock()

    # -----------------------------
    # Editing
    # -----------------------------
    def update(self, **fields) -> None:
        for name, value in fields.items():
            if not hasattr(self.data, name) or name == "sub_plots":
                raise AttributeError(f"Unknown form field: {name}")
            setattr(self.data, name, value)

        # a crop from another season is no longer selectable
        if "season" in fields:
            allowed = crops_for(self.data.season)
            if self.data.crop not in allowed:
                self.data.crop = ""
            for plot in self.data.sub_plots:
                if plot.crop not in allowed:
                    plot.crop = ""

    def add_sub_plot(self) -> None:
        self.data.sub_plots.append(SubPlot())

    def remove_sub_plot(self, index: int) -> Optional[SubPlot]:
        if len(self.data.sub_plots) > 1:
            return self.data.sub_plots.pop(index)
        return None

    def update_sub_plot(self, index: int, crop: Optional[str] = None, area: Any = None) -> None:
        plot = self.data.sub_plots[index]
        if crop is not None:
            plot.crop = crop
        if area is not None:
            plot.area = area

    def dismiss_error(self) -> None:
        self.error = None

    # -----------------------------
    # Validation
    # -----------------------------
    @property
    def is_valid(self) -> bool:
        d = self.data
        if not (_filled(d.district) and _filled(d.season)):
            return False
        if self.show_sub_plots:
            return all(
                _filled(p.crop) and _number(p.area) is not None for p in d.sub_plots
            )
        return _filled(d.crop) and _filled(d.area)

    @property
    def can_submit(self) -> bool:
        return self.is_valid and self.state != FormState.SUBMITTING

    def request_fields(self) -> dict:
        """The five fields sent to the server; sub-plots stay local."""
        d = self.data
        if self.show_sub_plots:
            crop = d.sub_plots[0].crop
            area = sum(_number(p.area) for p in d.sub_plots)
        else:
            crop, area = d.crop, d.area
        return {"district": d.district, "crop": crop, "season": d.season, "year": d.year, "area": area}

    # -----------------------------
    # Submission
    # -----------------------------
    def submit(self) -> Optional[PredictionResult]:
        if not self._in_flight.acquire(blocking=False):
            raise SubmissionInProgress("A prediction is already being fetched.")
        try:
            self.result = None
            self.error = None

            self.state = FormState.VALIDATING
            if not self.is_valid:
                self.error = INCOMPLETE_FORM
                return None

            self.state = FormState.SUBMITTING
            fields = self.request_fields()
            try:
                predicted = self.api.predict_yield(**fields)
            except PredictionFailed as e:
                self.error = e.message
                return None

            sub_plots = None
            if self.show_sub_plots:
                sub_plots = [{"crop": p.crop, "area": p.area} for p in self.data.sub_plots]
            self.result = present(
                predicted,
                district=fields["district"],
                crop=fields["crop"],
                area=float(fields["area"]),
                sub_plots=sub_plots,
                rng=self.rng,
            )
            return self.result
        finally:
            self.state = FormState.IDLE
            self._in_flight.release()
