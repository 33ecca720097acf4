"""Shared fixtures: listings page markup and fake collaborators."""
import pytest

from tests.fakes import FakeOracleClient
from tests.pages import listing_row, listings_page


@pytest.fixture
def oracle() -> FakeOracleClient:
    return FakeOracleClient()


@pytest.fixture
def mtnn_page() -> str:
    return listings_page([listing_row("mtnn", "250.50", "+1.20%", "-3.40%", "MTN Nigeria")])
