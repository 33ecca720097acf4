"""Tests for the listings table adapter (table heuristic, rows, watchlist)."""
from decimal import Decimal

import pytest
from bs4 import BeautifulSoup

from equity_oracle_sync.providers.core.exceptions import (TableNotFoundError,
                                                          ValidationError)
from equity_oracle_sync.providers.listings.african_markets.models import \
    ListingRow
from equity_oracle_sync.providers.listings.african_markets.parser import (
    extract_code, extract_rows, locate_listings_table, normalize_row,
    parse_listings)
from tests.pages import listing_row, listings_page


@pytest.mark.parametrize(
    ("href", "expected"),
    [
        ("/company?code=mtnn", "MTNN"),
        ("https://example.com/c?x=1&CODE=Gtco", "GTCO"),
        ("/company?code=", ""),
        ("/company", ""),
        ("", ""),
    ],
)
def test_extract_code(href, expected):
    assert extract_code(href) == expected


def test_locate_skips_tables_that_do_not_match_headers():
    soup = BeautifulSoup(listings_page([listing_row("MTNN", "1")]), "html.parser")
    table = locate_listings_table(soup)
    assert "listings" in table.get("class", [])


def test_locate_accepts_th_headers():
    html = (
        "<table><tr><th>Company</th><th>Sector</th><th>Last Price</th>"
        "<th>1D</th><th>YTD</th></tr></table>"
    )
    assert locate_listings_table(BeautifulSoup(html, "html.parser")) is not None


def test_locate_picks_first_matching_table():
    first = listings_page([listing_row("MTNN", "1")], decoy_first=False)
    second = listings_page([listing_row("UBA", "2")], decoy_first=False)
    soup = BeautifulSoup(first + second, "html.parser")
    rows = extract_rows(locate_listings_table(soup), ["MTNN", "UBA"])
    assert [r.code for r in rows] == ["MTNN"]


@pytest.mark.parametrize(
    "headers",
    [
        ["Company", "Sector", "Volume", "1D", "YTD"],  # no price
        ["Name", "Sector", "Price", "1D", "YTD"],  # no company
        ["Company", "Price", "1D", "YTD"],  # too few columns
    ],
)
def test_locate_raises_when_no_table_matches(headers):
    cells = "".join(f"<td>{h}</td>" for h in headers)
    html = f"<table><thead><tr>{cells}</tr></thead><tbody></tbody></table>"
    with pytest.raises(TableNotFoundError):
        locate_listings_table(BeautifulSoup(html, "html.parser"))


def test_extract_rows_reads_fixed_columns_and_filters_watchlist():
    page = listings_page(
        [
            listing_row("mtnn", "250.50", "+1.20%", "-3.40%"),
            listing_row("NOTWATCHED", "10.00", "1%", "1%"),
            listing_row("", "5.00"),
        ]
    )
    table = locate_listings_table(BeautifulSoup(page, "html.parser"))
    rows = extract_rows(table, ["MTNN"])
    assert rows == [
        ListingRow(
            code="MTNN", price_text="250.50", day_change_text="+1.20%", ytd_change_text="-3.40%"
        )
    ]


def test_extract_rows_tolerates_short_rows():
    page = listings_page(['<tr><td><a href="?code=UBA">UBA</a></td><td>Banks</td><td>30</td></tr>'])
    table = locate_listings_table(BeautifulSoup(page, "html.parser"))
    (row,) = extract_rows(table, ["UBA"])
    assert row.price_text == "30"
    assert row.day_change_text == ""


def test_normalize_row_keeps_missing_percentages_as_none():
    record = normalize_row(ListingRow(code="GTCO", price_text="1,050.00", day_change_text="-"))
    assert record.price == Decimal("1050.00")
    assert record.day_change is None
    assert record.ytd_change is None


@pytest.mark.parametrize("price", ["-", "", "n/a", "-5"])
def test_normalize_row_rejects_unusable_price(price):
    with pytest.raises(ValidationError):
        normalize_row(ListingRow(code="GTCO", price_text=price))


def test_parse_listings_drops_rows_without_price():
    page = listings_page(
        [listing_row("MTNN", "250.50", "+1.20%", "-3.40%"), listing_row("UBA", "-")]
    )
    records = parse_listings(page, ["MTNN", "UBA"])
    assert [r.code for r in records] == ["MTNN"]
    assert records[0].day_change == Decimal("0.012")
    assert records[0].ytd_change == Decimal("-0.034")


def test_unwatched_ticker_excluded_even_with_valid_price():
    page = listings_page([listing_row("ACCESSCORP", "25.00", "+1%", "+2%")])
    assert parse_listings(page, ["MTNN"]) == []


def test_rows_directly_under_table_without_tbody():
    html = (
        "<table><thead><tr><td>Company</td><td>Sector</td><td>Price</td>"
        "<td>1D</td><td>YTD</td></tr></thead>"
        f"{listing_row('MTNN', '250.50', '+1.20%')}"
        "</table>"
    )
    records = parse_listings(html, ["MTNN"])
    assert [(r.code, r.price) for r in records] == [("MTNN", Decimal("250.50"))]
