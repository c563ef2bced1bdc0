import math

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


class PredictionRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    district: str = Field(min_length=1)  # e.g. "Cuttack"
    crop: str = Field(min_length=1)
    season: str = Field(min_length=1)  # e.g. "Kharif"
    year: int
    area: float = Field(gt=0, allow_inf_nan=False)  # hectares

    @field_validator("area", mode="before")
    @classmethod
    def area_not_boolean(cls, value):
        # JSON true/false are not numbers
        if isinstance(value, bool):
            raise ValueError("must be a number")
        return value

    @field_validator("year", mode="before")
    @classmethod
    def truncate_year(cls, value):
        # any number is accepted, "2024.5" -> 2024
        if isinstance(value, bool):
            raise ValueError("must be a number")
        try:
            year = float(value)
        except (TypeError, ValueError):
            raise ValueError("must be a number")
        if not math.isfinite(year):
            raise ValueError("must be a finite number")
        return int(year)

    def upstream_args(self) -> list:
        # positional order expected by /predict_yield
        return [self.district, self.crop, self.season, self.year, self.area]


class PredictionResponse(BaseModel):
    predictedYield: float  # tons per hectare
    message: str = "Prediction successful"


class ErrorResponse(BaseModel):
    message: str
    error: Optional[str] = None
