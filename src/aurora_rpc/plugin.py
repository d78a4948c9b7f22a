"""
AuroraPlugin — the Aurora Engine RPC namespaces (https://doc.aurora.dev/evm/rpc) in one plugin.
Link it to a host client (w3.aurora) or attach it to any RpcTransport.
"""
from __future__ import annotations

from typing import Any

from aurora_rpc.core.app import Plugin
from aurora_rpc.core.config import RpcConfig
from aurora_rpc.namespaces import AURORA_MODULES
from aurora_rpc.rpc.protocol import RpcTransport
from aurora_rpc.rpc.transport import JsonRpcHttpTransport


class AuroraPlugin(Plugin):
    """
    Plugin exposing web3, net, eth (Aurora-narrowed), txpool and parity.

        aurora = AuroraPlugin(JsonRpcHttpTransport("https://mainnet.aurora.dev"))
        await aurora.web3.sha3("0xab")
        await aurora.eth.send_transaction({...})  # MethodNotSupported
    """

    plugin_namespace = "aurora"

    def __init__(self, transport: RpcTransport | None = None, config: Any = None, name: str | None = None) -> None:
        super().__init__(name or self.plugin_namespace, config=config)
        for module in AURORA_MODULES:
            self.register(module)
        if transport is not None:
            self.attach(transport)

    @classmethod
    def from_url(cls, url: str, timeout: float = 30.0) -> AuroraPlugin:
        return cls(JsonRpcHttpTransport(url, timeout=timeout))

    @classmethod
    def from_config(cls, config: RpcConfig | None = None) -> AuroraPlugin:
        """Transport built from config (RpcConfig.from_env() when omitted); config is available via DI."""
        config = config or RpcConfig.from_env()
        return cls(JsonRpcHttpTransport.from_config(config), config=config)
