from __future__ import annotations

from typing import Any, List

from pydantic import ValidationError

from api.errors import InvalidInput
from api.schema import PredictionRequest

REQUIRED_FIELDS = ("district", "crop", "season", "year", "area")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_request(payload: Any) -> PredictionRequest:
    """
    Check a decoded JSON body and turn it into a PredictionRequest.

    Absent, null and empty values are reported as missing; values that do not
    parse (non-numeric year/area, non-positive area, ...) as invalid.
    Raises InvalidInput naming the defect class and the fields involved.
    """
    if not isinstance(payload, dict):
        raise InvalidInput(detail="Request body must be a JSON object.")

    missing: List[str] = [f for f in REQUIRED_FIELDS if _is_blank(payload.get(f))]
    if missing:
        raise InvalidInput(
            f"{InvalidInput.default_message} Missing fields: {', '.join(missing)}."
        )

    try:
        return PredictionRequest.model_validate({f: payload[f] for f in REQUIRED_FIELDS})
    except ValidationError as e:
        invalid = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        raise InvalidInput(
            f"{InvalidInput.default_message} Invalid fields: {', '.join(invalid)}."
        )
