"""Models for the african-markets.com listings page."""
from pydantic import BaseModel


class ListingRow(BaseModel):
    """Raw cell texts of one listings table row, before numeric parsing."""

    code: str
    price_text: str = ""
    day_change_text: str = ""
    ytd_change_text: str = ""
