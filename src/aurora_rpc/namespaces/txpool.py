"""txpool_* methods."""
from aurora_rpc.rpc.namespace import NamespaceModule

txpool_module = (
    NamespaceModule("txpool")
    .method("status", "txpool_status")
    .method("inspect", "txpool_inspect")
    .method("content", "txpool_content")
)
