"""web3_* methods."""
from aurora_rpc.namespaces.params import hex_data
from aurora_rpc.rpc.namespace import NamespaceModule

web3_module = (
    NamespaceModule("web3")
    .method(
        "client_version",
        "web3_clientVersion",
        doc="Node client version string (same value as eth node info).",
    )
    .method(
        "sha3",
        "web3_sha3",
        hex_data("data"),
        doc="Keccak-256 (not the standardized SHA3-256) of the given hex data, computed by the node.",
    )
)
