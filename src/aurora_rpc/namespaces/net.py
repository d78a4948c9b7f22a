"""net_* methods, unmodified from the Ethereum base."""
from aurora_rpc.rpc.namespace import NamespaceModule

net_module = (
    NamespaceModule("net")
    .method("listening", "net_listening", doc="True if the client is listening for network connections.")
    .method("peer_count", "net_peerCount", doc="Hex number of connected peers.")
    .method(
        "version",
        "net_version",
        doc="Network id as a decimal string: 1313161554 on mainnet, 1313161555 on testnet.",
    )
)
