from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SPACE = "rockstar00/Odisha-Crop-Yield-Predictor"
DEFAULT_API_NAME = "/predict_yield"
DEFAULT_TIMEOUT = 30.0


# -----------------------------
# Config
# -----------------------------
@dataclass(frozen=True)
class Settings:
    hf_token: str | None
    space: str
    api_name: str
    timeout: float
    cors_origins: Tuple[str, ...]
    log_level: str


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}")


def get_settings() -> Settings:
    """
    Read server configuration from the environment (and .env, if present).
    The access token stays server-side: it is only handed to the gateway.
    """
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        hf_token=os.getenv("HF_ACCESS_TOKEN") or None,
        space=os.getenv("PREDICTOR_SPACE", DEFAULT_SPACE),
        api_name=os.getenv("PREDICTOR_API_NAME", DEFAULT_API_NAME),
        timeout=_float_env("PREDICTOR_TIMEOUT", DEFAULT_TIMEOUT),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
