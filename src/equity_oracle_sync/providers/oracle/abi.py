"""OracleHub contract ABI (the subset this job calls) and ABI helpers."""
import json
from pathlib import Path
from typing import Any

_PRICE_PAYLOAD = {
    "name": "p",
    "type": "tuple",
    "internalType": "struct OracleHub.PricePayload",
    "components": [
        {"name": "priceE6", "type": "uint256", "internalType": "uint256"},
        {"name": "seq", "type": "uint64", "internalType": "uint64"},
        {"name": "ts", "type": "uint64", "internalType": "uint64"},
        {"name": "hcsMsgId", "type": "bytes32", "internalType": "bytes32"},
    ],
}

_BAND = {
    "name": "b",
    "type": "tuple",
    "internalType": "struct OracleHub.Band",
    "components": [
        {"name": "midE6", "type": "uint256", "internalType": "uint256"},
        {"name": "widthBps", "type": "uint16", "internalType": "uint16"},
        {"name": "ts", "type": "uint64", "internalType": "uint64"},
    ],
}


def _array_of(component: dict[str, Any], name: str) -> dict[str, Any]:
    return {
        **component,
        "name": name,
        "type": "tuple[]",
        "internalType": f"{component['internalType']}[]",
    }


def _fn(name: str, inputs: list[dict], outputs: list[dict] | None = None, view: bool = False) -> dict:
    return {
        "type": "function",
        "name": name,
        "inputs": inputs,
        "outputs": outputs or [],
        "stateMutability": "view" if view else "nonpayable",
    }


_ASSET = {"name": "asset", "type": "address", "internalType": "address"}
_ASSETS = {"name": "assets", "type": "address[]", "internalType": "address[]"}

ORACLE_HUB_ABI: list[dict[str, Any]] = [
    _fn("setPrice", [_ASSET, _PRICE_PAYLOAD]),
    _fn("setPrices", [_ASSETS, _array_of(_PRICE_PAYLOAD, "ps")]),
    _fn("setBand", [_ASSET, _BAND]),
    _fn("setBands", [_ASSETS, _array_of(_BAND, "bs")]),
    _fn("getBand", [_ASSET], [{**_BAND, "name": ""}], view=True),
    _fn(
        "maxStaleness",
        [],
        [{"name": "", "type": "uint64", "internalType": "uint64"}],
        view=True,
    ),
]


def load_abi(path: Path | None) -> list[dict[str, Any]]:
    """Load an ABI JSON file (plain list or a Hardhat/Foundry artifact); bundled ABI if None."""
    if path is None:
        return ORACLE_HUB_ABI
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data["abi"]
    return data


def has_function(abi: list[dict[str, Any]], name: str) -> bool:
    """True if the ABI declares a function with the given name."""
    return any(
        entry.get("type") == "function" and entry.get("name") == name for entry in abi
    )
