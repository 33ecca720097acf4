"""Service layer: pipeline stages and the orchestrating sync service."""
from equity_oracle_sync.services.clock import ChainClock
from equity_oracle_sync.services.freshness import FreshnessAuditor
from equity_oracle_sync.services.fx import FxSideChannel
from equity_oracle_sync.services.payloads import PayloadBuilder
from equity_oracle_sync.services.resolver import AssetResolver
from equity_oracle_sync.services.submitter import OracleSubmitter
from equity_oracle_sync.services.sync_service import OracleSyncService

__all__ = [
    "AssetResolver",
    "ChainClock",
    "FreshnessAuditor",
    "FxSideChannel",
    "OracleSubmitter",
    "OracleSyncService",
    "PayloadBuilder",
]
