from __future__ import annotations

import math
import os

import requests

DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 35.0  # a little above the server's upstream timeout

GENERIC_ERROR = "Something went wrong with the prediction."
INVALID_NUMBER = (
    "Prediction returned an invalid number. "
    "Please check the district and crop names and try again."
)


class PredictionFailed(Exception):
    """Carries the message shown to the farmer in the error banner."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class YieldApiClient:
    def __init__(self, base_url: str = DEFAULT_API_URL, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_env(cls) -> "YieldApiClient":
        return cls(
            base_url=os.getenv("AGRI_API_URL", DEFAULT_API_URL),
            timeout=float(os.getenv("AGRI_API_TIMEOUT", DEFAULT_TIMEOUT)),
        )

    def predict_yield(self, district, crop, season, year, area) -> float:
        body = {"district": district, "crop": crop, "season": season, "year": year, "area": area}
        try:
            r = requests.post(f"{self.base_url}/api/predict-yield", json=body, timeout=self.timeout)
        except requests.RequestException as e:
            raise PredictionFailed(str(e)) from e

        try:
            data = r.json()
        except ValueError:
            data = {}

        if not r.ok:
            message = data.get("message") if isinstance(data, dict) else None
            raise PredictionFailed(message or GENERIC_ERROR)

        value = data.get("predictedYield") if isinstance(data, dict) else None
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise PredictionFailed(INVALID_NUMBER)
        if math.isnan(value):
            raise PredictionFailed(INVALID_NUMBER)
        return value
