"""On-chain price oracle clients."""
from equity_oracle_sync.providers.oracle.oracle_client_abc import \
    OracleClientABC
from equity_oracle_sync.providers.oracle.web3_client import Web3OracleClient

__all__ = ["OracleClientABC", "Web3OracleClient"]
