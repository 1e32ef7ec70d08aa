from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from numbers import Number
from typing import Any, Dict, Optional

import jwt

from src.config.config import get_env


def to_decimal(value: Number | str | None) -> Decimal:
    """
    Convert a float / int / Decimal / numeric string to ``Decimal`` without
    dragging binary float noise along (``0.1`` becomes ``Decimal("0.1")``).
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_score(value: Number, places: int = 2) -> float:
    """
    Round half-up to ``places`` decimals and hand back a float.

    Args:
        value:  Raw score (float or Decimal).
        places: Number of decimals to keep.

    Returns:
        float: The rounded value, e.g. 63.333 -> 63.33, 0.005 -> 0.01.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(to_decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def encode_jwt(data: Dict[str, Any]) -> str:
    return jwt.encode(
        data,
        get_env("SECRET_KEY", required=True),
        algorithm=get_env("ALGORITHM", "HS256"),
    )


def decode_jwt(token: str) -> Dict[str, Any]:
    return jwt.decode(
        token,
        get_env("SECRET_KEY", required=True),
        algorithms=[get_env("ALGORITHM", "HS256")],
    )


def format_request_number(number: int, prefix: str, digits: int) -> str:
    return f"{prefix}{str(number).zfill(digits)}"


def mean(values: list[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, matching the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
