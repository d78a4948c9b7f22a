"""Single config object: passed to a plugin or transport; available via DI."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Network:
    """Public Aurora endpoint and the id its net_version reports."""

    name: str
    url: str
    network_id: int


MAINNET = Network("mainnet", "https://mainnet.aurora.dev", 1313161554)
TESTNET = Network("testnet", "https://testnet.aurora.dev", 1313161555)

NETWORKS = {n.name: n for n in (MAINNET, TESTNET)}


class Config:
    """
    Env helpers shared by config objects.
    Create your own config class or use RpcConfig; pass it to Plugin(config=...).
    """

    @classmethod
    def load_from_env(cls, prefix: str = "AURORA_", **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns dict for MyConfig(**Config.load_from_env())."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result


@dataclass
class RpcConfig:
    """Endpoint settings for JsonRpcHttpTransport."""

    url: str = MAINNET.url
    timeout: float = 30.0
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls, prefix: str = "AURORA_") -> RpcConfig:
        """
        AURORA_URL (a URL or a known network name: mainnet, testnet) and AURORA_TIMEOUT (seconds).
        Unset values keep the defaults.
        """
        raw = Config.load_from_env(prefix)
        url = raw.get("url") or MAINNET.url
        if url in NETWORKS:
            url = NETWORKS[url].url
        timeout = raw.get("timeout")
        return cls(url=url, timeout=float(timeout) if timeout else 30.0)
