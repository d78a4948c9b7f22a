"""parity_* methods."""
from __future__ import annotations

from typing import Any

from aurora_rpc.namespaces.params import is_address, is_quantity
from aurora_rpc.rpc.definition import optional
from aurora_rpc.rpc.namespace import NamespaceModule

QUANTITY_FIELDS = ("gas", "gasPrice", "value", "nonce")
QUANTITY_OPS = ("eq", "gt", "lt")


def _is_address_filter(value: Any, allow_action: bool = False) -> bool:
    if not isinstance(value, dict):
        return False
    for key, item in value.items():
        if key == "eq" and is_address(item):
            continue
        if allow_action and key == "action" and item == "contract_creation":
            continue
        return False
    return True


def _is_quantity_filter(value: Any) -> bool:
    return isinstance(value, dict) and all(k in QUANTITY_OPS and is_quantity(v) for k, v in value.items())


def is_transaction_filter(value: Any) -> bool:
    """{"from": {"eq": addr}, "to": {"eq": addr} | {"action": "contract_creation"}, "gas": {"gt": n}, ...}"""
    if not isinstance(value, dict):
        return False
    for key, item in value.items():
        if key == "from":
            ok = _is_address_filter(item)
        elif key == "to":
            ok = _is_address_filter(item, allow_action=True)
        elif key in QUANTITY_FIELDS:
            ok = _is_quantity_filter(item)
        else:
            ok = False
        if not ok:
            return False
    return True


def is_pending_transactions_options(value: Any) -> bool:
    """{"limit": int, "filter": transaction filter}, both optional."""
    if not isinstance(value, dict) or not set(value) <= {"limit", "filter"}:
        return False
    limit = value.get("limit")
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 0):
        return False
    return "filter" not in value or is_transaction_filter(value["filter"])


parity_module = NamespaceModule("parity").method(
    "pending_transactions",
    "parity_pendingTransactions",
    optional("options", dict, check=is_pending_transactions_options, hint="{limit, filter}"),
    doc="Transactions currently in the queue, optionally limited and filtered.",
)
