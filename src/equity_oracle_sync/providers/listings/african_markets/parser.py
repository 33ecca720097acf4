"""HTML adapter for the african-markets.com listed companies table.

Everything that depends on the page's markup lives here: which table is the
listings table, where the ticker link sits, and which columns hold the
numbers. When the page changes, this is the only module that should.
"""
import logging
from collections.abc import Iterable
from urllib.parse import parse_qsl, urlsplit

from bs4 import BeautifulSoup, Tag

from equity_oracle_sync.providers.core.exceptions import (TableNotFoundError,
                                                          ValidationError)
from equity_oracle_sync.providers.core.utils import (parse_percent, to_fixed,
                                                     to_number)
from equity_oracle_sync.providers.listings.african_markets.models import \
    ListingRow
from equity_oracle_sync.schemas import TickerRecord

logger = logging.getLogger(__name__)

MIN_HEADER_CELLS = 5

# Column positions within a body row
CODE_COLUMN = 0
PRICE_COLUMN = 2
DAY_CHANGE_COLUMN = 3
YTD_CHANGE_COLUMN = 4


def _header_texts(table: Tag) -> list[str]:
    cells = table.select("thead tr:first-child td, th")
    return [cell.get_text().lower() for cell in cells]


def is_listings_table(table: Tag) -> bool:
    """True when the table header has enough columns and mentions company and price."""
    texts = _header_texts(table)
    return (
        len(texts) >= MIN_HEADER_CELLS
        and any("company" in t for t in texts)
        and any("price" in t for t in texts)
    )


def locate_listings_table(soup: BeautifulSoup) -> Tag:
    """Return the first table on the page that looks like the listings table.

    Raises:
        TableNotFoundError: No table matched.
    """
    for table in soup.find_all("table"):
        if is_listings_table(table):
            return table
    raise TableNotFoundError("Could not locate listings table")


def extract_code(href: str) -> str:
    """Read the upper-cased ``code`` query parameter from a company link.

    Example: ``/en/company?code=mtnn`` -> ``"MTNN"``. Returns "" when absent.
    """
    try:
        query = urlsplit(href).query
    except ValueError:
        return ""
    for key, value in parse_qsl(query):
        if key.lower() == "code":
            return value.strip().upper()
    return ""


def _cell_text(cells: list[Tag], index: int) -> str:
    return cells[index].get_text().strip() if index < len(cells) else ""


def _body_rows(table: Tag) -> list[Tag]:
    # html.parser does not add the implied tbody, so rows may sit under table
    return table.select("tbody tr") or table.find_all("tr", recursive=False)


def extract_rows(table: Tag, watchlist: Iterable[str]) -> list[ListingRow]:
    """Pull code and raw number texts for each body row whose code is watched."""
    watched = frozenset(watchlist)
    rows: list[ListingRow] = []
    for tr in _body_rows(table):
        cells = tr.find_all("td")
        if not cells:
            continue
        link = cells[CODE_COLUMN].find("a")
        href = link.get("href", "") if link is not None else ""
        code = extract_code(href if isinstance(href, str) else "")
        if not code or code not in watched:
            continue
        rows.append(
            ListingRow(
                code=code,
                price_text=_cell_text(cells, PRICE_COLUMN),
                day_change_text=_cell_text(cells, DAY_CHANGE_COLUMN),
                ytd_change_text=_cell_text(cells, YTD_CHANGE_COLUMN),
            )
        )
    return rows


def normalize_row(row: ListingRow) -> TickerRecord:
    """Parse a row's numbers into a TickerRecord.

    Unparseable change percentages are kept as None; they are informational.

    Raises:
        ValidationError: The row has no usable (non-negative, numeric) price.
    """
    price = to_number(row.price_text)
    if price is None:
        raise ValidationError(f"{row.code}: no price in {row.price_text!r}")
    try:
        to_fixed(price)
    except ValueError as e:
        raise ValidationError(f"{row.code}: {e}") from e
    return TickerRecord(
        code=row.code,
        price=price,
        day_change=parse_percent(row.day_change_text),
        ytd_change=parse_percent(row.ytd_change_text),
    )


def parse_listings(html: str, watchlist: Iterable[str]) -> list[TickerRecord]:
    """Parse the listings page into TickerRecords for the watchlist.

    Raises:
        TableNotFoundError: The page has no listings table.
    """
    soup = BeautifulSoup(html, "html.parser")
    table = locate_listings_table(soup)
    records: list[TickerRecord] = []
    for row in extract_rows(table, watchlist):
        try:
            records.append(normalize_row(row))
        except ValidationError as e:
            logger.info("Dropping row %s", e)
    return records
