"""Factory wiring an OracleSyncService from SyncSettings, and a one-shot runner."""
import logging
from collections.abc import Callable

from equity_oracle_sync.config import SyncSettings
from equity_oracle_sync.providers import (AfricanMarketsProvider,
                                          CoinMarketCapFxProvider,
                                          Web3OracleClient)
from equity_oracle_sync.providers.core.error_mapper import SyncErrorMapper
from equity_oracle_sync.providers.oracle.abi import load_abi
from equity_oracle_sync.schemas import SyncResponse
from equity_oracle_sync.services.clock import ChainClock
from equity_oracle_sync.services.freshness import FreshnessAuditor
from equity_oracle_sync.services.fx import FxSideChannel
from equity_oracle_sync.services.payloads import PayloadBuilder
from equity_oracle_sync.services.resolver import AssetResolver
from equity_oracle_sync.services.sync_service import OracleSyncService

logger = logging.getLogger(__name__)


def create_sync_service(settings: SyncSettings) -> OracleSyncService:
    """Create an OracleSyncService with concrete providers for the given settings.

    Args:
        settings: Configuration read once at the entry point.

    Returns:
        A service ready for one run(); close it afterwards.
    """
    oracle = Web3OracleClient(
        settings.rpc_url,
        settings.chain_id,
        settings.private_key,
        settings.oracle_address,
        abi=load_abi(settings.oracle_abi_path),
        receipt_timeout=settings.receipt_timeout,
    )
    listings = AfricanMarketsProvider(
        url=settings.listings_url, timeout=settings.fetch_timeout
    )
    clock = ChainClock(oracle)
    builder = PayloadBuilder(band_width_bps=settings.band_width_bps)
    closeables = [listings, oracle]

    fx = None
    if settings.fx_enabled:
        rate_provider = CoinMarketCapFxProvider(
            settings.fx_api_key,
            url=settings.fx_api_url,
            fallback_rate=settings.fx_fallback_rate,
            timeout=settings.fetch_timeout,
        )
        closeables.append(rate_provider)
        fx = FxSideChannel(rate_provider, oracle, builder, clock, settings.fx_asset)

    auditor = FreshnessAuditor(oracle, clock) if settings.audit_enabled else None
    return OracleSyncService(
        listings,
        oracle,
        AssetResolver(settings.asset_addresses),
        builder,
        settings.watchlist,
        fx=fx,
        auditor=auditor,
        clock=clock,
        closeables=closeables,
    )


async def run_once(
    load_settings: Callable[[], SyncSettings] = SyncSettings.from_env,
    service_factory: Callable[[SyncSettings], OracleSyncService] = create_sync_service,
) -> SyncResponse:
    """Load settings, build the service, run one invocation, and release resources.

    Configuration and wiring errors become a failure response like any other
    main-path error.
    """
    try:
        service = service_factory(load_settings())
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("Oracle sync setup failed: %s", exc)
        return SyncErrorMapper().to_failure(exc)
    async with service:
        return await service.run()
