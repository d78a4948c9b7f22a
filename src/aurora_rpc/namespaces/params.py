"""Parameter shapes shared by the Ethereum-style namespaces."""
from __future__ import annotations

import re
from typing import Any

from aurora_rpc.rpc.definition import Param, optional, required

_HEX = re.compile(r"^0x[0-9a-fA-F]*$")
_ADDRESS = re.compile(r"^0x[0-9a-fA-F]{40}$")
_HASH = re.compile(r"^0x[0-9a-fA-F]{64}$")

BLOCK_TAGS = frozenset({"latest", "earliest", "pending", "safe", "finalized"})


def is_hex(value: Any) -> bool:
    return isinstance(value, str) and bool(_HEX.match(value))


def is_address(value: Any) -> bool:
    return isinstance(value, str) and bool(_ADDRESS.match(value))


def is_hash(value: Any) -> bool:
    return isinstance(value, str) and bool(_HASH.match(value))


def is_block_id(value: Any) -> bool:
    """Block tag, hex quantity, or a non-negative int (sent as is; the node decides)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value >= 0
    return isinstance(value, str) and (value in BLOCK_TAGS or is_hex(value))


def is_quantity(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return (isinstance(value, int) and value >= 0) or is_hex(value)


def hex_data(name: str) -> Param:
    return required(name, str, check=is_hex, hint="hex string")


def address(name: str = "address") -> Param:
    return required(name, str, check=is_address, hint="20-byte hex address")


def block_hash(name: str = "block_hash") -> Param:
    return required(name, str, check=is_hash, hint="32-byte hex hash")


def tx_hash(name: str = "transaction_hash") -> Param:
    return required(name, str, check=is_hash, hint="32-byte hex hash")


def block_id(name: str = "block_identifier") -> Param:
    return required(name, str, int, check=is_block_id, hint="block number or tag")


def block_id_or_latest(name: str = "block_identifier") -> Param:
    return optional(name, str, int, check=is_block_id, hint="block number or tag")


def quantity(name: str) -> Param:
    return required(name, str, int, check=is_quantity, hint="hex quantity or non-negative int")


def transaction(name: str = "transaction") -> Param:
    return required(name, dict, hint="transaction object")


def log_filter(name: str = "filter_params") -> Param:
    return required(name, dict, hint="filter object")


def filter_id(name: str = "filter_id") -> Param:
    return required(name, str, check=is_hex, hint="hex filter id")


def full_transactions(name: str = "full_transactions") -> Param:
    return required(name, bool)
