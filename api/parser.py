import math
import re
from typing import Any

from api.errors import InvalidNumber, ParseFailure

# Upstream renders its answer as markdown, e.g. "## 4.75 Tons per Hectare".
# Keep all knowledge of that format in this module.
YIELD_PATTERN = re.compile(r"## (\d+(?:\.\d+)?) Tons per Hectare")


def parse_yield(reply: Any) -> float:
    """
    Extract the predicted yield (tons per hectare) from the upstream reply.
    The value is returned as parsed, without rounding.
    """
    if not isinstance(reply, str):
        raise ParseFailure()

    match = YIELD_PATTERN.search(reply)
    if not match:
        raise ParseFailure()

    value = float(match.group(1))
    if not math.isfinite(value):
        raise InvalidNumber()
    return value
