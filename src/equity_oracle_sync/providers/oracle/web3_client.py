"""OracleHub client over JSON-RPC using web3.py."""
import asyncio
import logging
from typing import Any

import aiohttp
from eth_account import Account
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import Web3Exception

from equity_oracle_sync.providers.core.exceptions import SubmissionError
from equity_oracle_sync.providers.oracle.abi import (ORACLE_HUB_ABI,
                                                     has_function)
from equity_oracle_sync.providers.oracle.oracle_client_abc import \
    OracleClientABC
from equity_oracle_sync.schemas import (BandPayload, PricePayload,
                                        TransactionReceipt)

logger = logging.getLogger(__name__)

# Exceptions from web3 / the RPC transport that mean "this write failed".
_RPC_EXCEPTIONS: tuple[type[Exception], ...] = (
    Web3Exception,
    aiohttp.ClientError,
    ValueError,
    TypeError,
    OSError,
    TimeoutError,
    asyncio.TimeoutError,
)


class Web3OracleClient(OracleClientABC):
    """Signs and sends OracleHub transactions with a local key.

    Each write fetches the pending nonce, builds and signs the transaction,
    sends it raw, and blocks until the receipt arrives. A receipt with
    status 0 is a revert and raises SubmissionError.
    """

    def __init__(
        self,
        rpc_url: str,
        chain_id: int,
        private_key: str,
        oracle_address: str,
        *,
        abi: list[dict[str, Any]] | None = None,
        receipt_timeout: float = 600.0,
        w3: AsyncWeb3 | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            rpc_url: JSON-RPC endpoint.
            chain_id: Chain ID used when signing.
            private_key: Hex private key of the signing account.
            oracle_address: OracleHub contract address.
            abi: Contract ABI; defaults to the bundled OracleHub ABI.
            receipt_timeout: Seconds to wait for each transaction receipt.
            w3: Prebuilt AsyncWeb3 instance; by default one is created for rpc_url.
        """
        self._abi = abi or ORACLE_HUB_ABI
        self._w3 = w3 if w3 is not None else AsyncWeb3(AsyncHTTPProvider(rpc_url))
        self._account = Account.from_key(private_key)
        self._chain_id = chain_id
        self._receipt_timeout = receipt_timeout
        self._contract = self._w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(oracle_address), abi=self._abi
        )
        self._supports_batch_bands = has_function(self._abi, "setBands")

    @property
    def supports_batch_bands(self) -> bool:
        return self._supports_batch_bands

    @property
    def signer_address(self) -> str:
        return self._account.address

    @staticmethod
    def _checksum(asset: str) -> str:
        return AsyncWeb3.to_checksum_address(asset)

    async def _transact(self, label: str, call: Any) -> TransactionReceipt:
        """Sign, send, and confirm one contract call."""
        try:
            nonce = await self._w3.eth.get_transaction_count(
                self._account.address, "pending"
            )
            tx = await call.build_transaction(
                {
                    "from": self._account.address,
                    "chainId": self._chain_id,
                    "nonce": nonce,
                }
            )
            signed = self._account.sign_transaction(tx)
            tx_hash = await self._w3.eth.send_raw_transaction(signed.raw_transaction)
            receipt = await self._w3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=self._receipt_timeout
            )
        except _RPC_EXCEPTIONS as e:
            raise SubmissionError(f"{label} failed: {e}") from e

        hex_hash = AsyncWeb3.to_hex(tx_hash)
        status = int(receipt["status"])
        logger.info("%s hash=%s status=%s", label, hex_hash, status)
        if status != 1:
            raise SubmissionError(f"{label} reverted", tx_hash=hex_hash)
        return TransactionReceipt(
            tx_hash=hex_hash, status=status, block_number=receipt.get("blockNumber")
        )

    async def set_prices(
        self, assets: list[str], payloads: list[PricePayload]
    ) -> TransactionReceipt:
        call = self._contract.functions.setPrices(
            [self._checksum(a) for a in assets], [p.as_tuple() for p in payloads]
        )
        return await self._transact("setPrices", call)

    async def set_price(self, asset: str, payload: PricePayload) -> TransactionReceipt:
        call = self._contract.functions.setPrice(self._checksum(asset), payload.as_tuple())
        return await self._transact(f"setPrice {asset}", call)

    async def set_bands(
        self, assets: list[str], payloads: list[BandPayload]
    ) -> TransactionReceipt:
        if not self._supports_batch_bands:
            return await super().set_bands(assets, payloads)
        call = self._contract.functions.setBands(
            [self._checksum(a) for a in assets], [b.as_tuple() for b in payloads]
        )
        return await self._transact("setBands", call)

    async def set_band(self, asset: str, payload: BandPayload) -> TransactionReceipt:
        call = self._contract.functions.setBand(self._checksum(asset), payload.as_tuple())
        return await self._transact(f"setBand {asset}", call)

    async def get_band(self, asset: str) -> BandPayload:
        mid, width, ts = await self._contract.functions.getBand(self._checksum(asset)).call()
        return BandPayload(mid_fixed=mid, width_bps=width, timestamp=ts)

    async def max_staleness(self) -> int:
        return int(await self._contract.functions.maxStaleness().call())

    async def latest_block_timestamp(self) -> int | None:
        block = await self._w3.eth.get_block("latest")
        ts = block.get("timestamp") if block else None
        return int(ts) if ts else None

    async def close(self) -> None:
        """Close the RPC provider session."""
        await self._w3.provider.disconnect()
