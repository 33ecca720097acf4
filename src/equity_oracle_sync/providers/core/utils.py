"""Numeric helpers for listing fields and oracle fixed-point values."""
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

FIXED_POINT_SCALE = Decimal(1_000_000)

_NUMBER_NOISE = re.compile(r"[, ]+")
_PERCENT_NOISE = re.compile(r"[\s,%+]")
_PLACEHOLDERS = ("", "-")


def _to_decimal(text: str) -> Decimal | None:
    if "_" in text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def to_number(text: str | None) -> Decimal | None:
    """Parse a listing number such as "1,234.50"; "-" or empty means no value.

    Never raises: anything that is not a finite number yields None.
    """
    if not text:
        return None
    clean = _NUMBER_NOISE.sub("", text).strip()
    if clean in _PLACEHOLDERS:
        return None
    return _to_decimal(clean)


def parse_percent(text: str | None) -> Decimal | None:
    """Parse "+1.20%" / "-3.40%" into a signed fraction (0.012 / -0.034)."""
    if not text:
        return None
    clean = _PERCENT_NOISE.sub("", text).strip()
    if clean in _PLACEHOLDERS:
        return None
    negative = text.strip().startswith("-")
    magnitude = _to_decimal(clean.removeprefix("-"))
    if magnitude is None:
        return None
    fraction = magnitude / 100
    return -fraction if negative else fraction


def to_fixed(value: Decimal | int | float) -> int:
    """Scale a decimal value by 1e6 and round half-up to an integer.

    Raises:
        ValueError: The scaled value is negative; oracle prices are unsigned.
    """
    scaled = (Decimal(str(value)) * FIXED_POINT_SCALE).quantize(
        Decimal(1), rounding=ROUND_HALF_UP
    )
    if scaled < 0:
        raise ValueError(f"Fixed-point value must be non-negative, got {value}")
    return int(scaled)
