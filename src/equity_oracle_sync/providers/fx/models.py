"""Models shared by FX rate providers."""
from decimal import Decimal

from pydantic import BaseModel


class FxRate(BaseModel):
    """Local currency units per 1 USD and whether the fallback was used."""

    rate: Decimal
    is_fallback: bool = False
