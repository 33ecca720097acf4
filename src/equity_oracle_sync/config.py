"""Runtime configuration for the oracle sync job.

Settings are read from the environment once, at the entry point, and the
resulting SyncSettings value is passed down to every collaborator.
"""
import os
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from equity_oracle_sync.providers.core.exceptions import ConfigError

# NGX tickers published to the oracle.
WATCHLIST: tuple[str, ...] = (
    "MTNN",
    "UBA",
    "GTCO",
    "ZENITHBANK",
    "ARADEL",
    "TOTALNG",
    "AIICO",
    "CORNERST",
    "OKOMUOIL",
    "PRESCO",
    "NESTLE",
    "DANGSUGAR",
)

DEFAULT_LISTINGS_URL = "https://african-markets.com/en/stock-markets/ngse/listed-companies"
DEFAULT_RPC_URL = "https://testnet.hashio.io/api"
DEFAULT_CHAIN_ID = 296
DEFAULT_BAND_WIDTH_BPS = 150
DEFAULT_FX_API_URL = "https://pro-api.coinmarketcap.com/v2/cryptocurrency/quotes/latest"
DEFAULT_FX_ASSET = "0x00000000000000000000000000000000006a1e8c"
DEFAULT_FX_FALLBACK_RATE = Decimal("1500")

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


class SyncSettings(BaseModel):
    """Everything one sync invocation needs to know about its environment."""

    model_config = ConfigDict(frozen=True)

    rpc_url: str = DEFAULT_RPC_URL
    chain_id: int = DEFAULT_CHAIN_ID
    private_key: str = Field(repr=False)
    oracle_address: str
    oracle_abi_path: Path | None = None
    asset_addresses: dict[str, str] = Field(default_factory=dict)
    watchlist: tuple[str, ...] = WATCHLIST
    band_width_bps: int = Field(default=DEFAULT_BAND_WIDTH_BPS, ge=0)
    listings_url: str = DEFAULT_LISTINGS_URL
    fetch_timeout: float = 30.0
    fx_enabled: bool = True
    fx_api_url: str = DEFAULT_FX_API_URL
    fx_api_key: str | None = Field(default=None, repr=False)
    fx_asset: str = DEFAULT_FX_ASSET
    fx_fallback_rate: Decimal = DEFAULT_FX_FALLBACK_RATE
    audit_enabled: bool = True
    receipt_timeout: float = 600.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SyncSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Raises:
            ConfigError: A required variable is missing or a value cannot be parsed.
        """
        env = os.environ if environ is None else environ

        private_key = env.get("PRIVATE_KEY")
        if not private_key:
            raise ConfigError("Private key missing")
        oracle_address = env.get("ORACLEHUB_CONTRACT")
        if not oracle_address:
            raise ConfigError("Oracle contract address missing (ORACLEHUB_CONTRACT)")

        abi_path = env.get("ORACLEHUB_ABI_PATH")
        fx_fallback = env.get("FX_FALLBACK_RATE")
        try:
            return cls(
                rpc_url=env.get("RPC_URL") or DEFAULT_RPC_URL,
                chain_id=_parse_int(env, "CHAIN_ID", DEFAULT_CHAIN_ID),
                private_key=private_key,
                oracle_address=oracle_address,
                oracle_abi_path=Path(abi_path) if abi_path else None,
                asset_addresses={code: env[code] for code in WATCHLIST if env.get(code)},
                band_width_bps=_parse_int(env, "BAND_WIDTH_BPS", DEFAULT_BAND_WIDTH_BPS),
                listings_url=env.get("LISTINGS_URL") or DEFAULT_LISTINGS_URL,
                fetch_timeout=_parse_float(env, "FETCH_TIMEOUT_SECONDS", 30.0),
                fx_enabled=_parse_bool(env, "FX_ENABLED", True),
                fx_api_url=env.get("CMC_API_URL") or DEFAULT_FX_API_URL,
                fx_api_key=env.get("CMC_API_KEY") or None,
                fx_asset=env.get("FX_ASSET_ADDRESS") or DEFAULT_FX_ASSET,
                fx_fallback_rate=(
                    _parse_decimal(fx_fallback) if fx_fallback else DEFAULT_FX_FALLBACK_RATE
                ),
                audit_enabled=_parse_bool(env, "FRESHNESS_AUDIT", True),
                receipt_timeout=_parse_float(env, "RECEIPT_TIMEOUT_SECONDS", 600.0),
            )
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e


def _parse_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if not raw:
        return default
    try:
        return int(raw, 10)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


def _parse_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


def _parse_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = (env.get(name) or "").strip().lower()
    if not raw:
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {raw!r}")


def _parse_decimal(raw: str) -> Decimal:
    try:
        return Decimal(raw)
    except InvalidOperation as e:
        raise ConfigError(f"FX_FALLBACK_RATE must be a decimal, got {raw!r}") from e
