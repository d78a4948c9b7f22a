"""Aurora namespace modules: web3, net, eth, parity, txpool."""
from aurora_rpc.namespaces.eth import AURORA_UNSUPPORTED, eth_module, ethereum_module
from aurora_rpc.namespaces.net import net_module
from aurora_rpc.namespaces.parity import parity_module
from aurora_rpc.namespaces.txpool import txpool_module
from aurora_rpc.namespaces.web3 import web3_module

AURORA_MODULES = (web3_module, net_module, eth_module, txpool_module, parity_module)

__all__ = [
    "AURORA_MODULES",
    "AURORA_UNSUPPORTED",
    "eth_module",
    "ethereum_module",
    "net_module",
    "parity_module",
    "txpool_module",
    "web3_module",
]
