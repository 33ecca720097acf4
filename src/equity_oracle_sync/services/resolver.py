"""Ticker-to-asset resolution from static configuration."""
import logging
from collections.abc import Iterable, Mapping

from equity_oracle_sync.providers.core.exceptions import ValidationError
from equity_oracle_sync.schemas import TickerRecord

logger = logging.getLogger(__name__)


class AssetResolver:
    """Maps ticker codes to on-chain asset addresses; read-only for a run."""

    def __init__(self, mapping: Mapping[str, str]) -> None:
        self._mapping = {code.upper(): address for code, address in mapping.items() if address}

    def resolve(self, code: str) -> str:
        """Asset address for a ticker.

        Raises:
            ValidationError: No address is configured for the ticker.
        """
        try:
            return self._mapping[code.upper()]
        except KeyError:
            raise ValidationError(f"No address configured for {code}") from None

    def resolve_records(
        self, records: Iterable[TickerRecord]
    ) -> list[tuple[TickerRecord, str]]:
        """Pair each record with its asset; unmapped tickers are dropped with a warning."""
        resolved: list[tuple[TickerRecord, str]] = []
        for record in records:
            try:
                resolved.append((record, self.resolve(record.code)))
            except ValidationError as e:
                logger.warning("%s", e)
        return resolved
