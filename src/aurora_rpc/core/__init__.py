from aurora_rpc.core.app import Plugin
from aurora_rpc.core.container import Container
from aurora_rpc.core.module import Module
from aurora_rpc.core.config import MAINNET, TESTNET, Config, Network, RpcConfig

__all__ = [
    "Plugin",
    "Container",
    "Module",
    "Config",
    "RpcConfig",
    "Network",
    "MAINNET",
    "TESTNET",
]
