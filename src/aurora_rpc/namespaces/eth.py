"""
eth_* methods.

ethereum_module is the generic Ethereum execution API. eth_module is Aurora's view of it:
the base copied, operations Aurora does not serve suppressed, and the filter methods added.
See https://doc.aurora.dev/evm/rpc for the node's notes and limitations.
"""
from aurora_rpc.namespaces.params import (
    address,
    block_hash,
    block_id,
    block_id_or_latest,
    filter_id,
    full_transactions,
    hex_data,
    log_filter,
    quantity,
    transaction,
    tx_hash,
)
from aurora_rpc.rpc.definition import required
from aurora_rpc.rpc.namespace import NamespaceModule

ethereum_module = (
    NamespaceModule("eth")
    .method("accounts", "eth_accounts")
    .method("block_number", "eth_blockNumber")
    .method("call", "eth_call", transaction(), block_id_or_latest())
    .method("chain_id", "eth_chainId")
    .method("coinbase", "eth_coinbase")
    .method("estimate_gas", "eth_estimateGas", transaction(), block_id_or_latest())
    .method(
        "fee_history",
        "eth_feeHistory",
        quantity("block_count"),
        block_id("newest_block"),
        required("reward_percentiles", list),
    )
    .method("gas_price", "eth_gasPrice")
    .method("max_priority_fee", "eth_maxPriorityFeePerGas")
    .method("get_balance", "eth_getBalance", address(), block_id_or_latest())
    .method("get_block_by_hash", "eth_getBlockByHash", block_hash(), full_transactions())
    .method("get_block_by_number", "eth_getBlockByNumber", block_id(), full_transactions())
    .method("get_block_transaction_count_by_hash", "eth_getBlockTransactionCountByHash", block_hash())
    .method("get_block_transaction_count_by_number", "eth_getBlockTransactionCountByNumber", block_id())
    .method("get_code", "eth_getCode", address(), block_id_or_latest())
    .method("get_logs", "eth_getLogs", log_filter())
    .method("get_storage_at", "eth_getStorageAt", address(), quantity("position"), block_id_or_latest())
    .method("get_transaction_by_hash", "eth_getTransactionByHash", tx_hash())
    .method(
        "get_transaction_by_block_hash_and_index",
        "eth_getTransactionByBlockHashAndIndex",
        block_hash(),
        quantity("index"),
    )
    .method(
        "get_transaction_by_block_number_and_index",
        "eth_getTransactionByBlockNumberAndIndex",
        block_id(),
        quantity("index"),
    )
    .method("get_transaction_count", "eth_getTransactionCount", address(), block_id_or_latest())
    .method("get_transaction_receipt", "eth_getTransactionReceipt", tx_hash())
    .method(
        "get_uncle_by_block_hash_and_index",
        "eth_getUncleByBlockHashAndIndex",
        block_hash(),
        quantity("index"),
    )
    .method(
        "get_uncle_by_block_number_and_index",
        "eth_getUncleByBlockNumberAndIndex",
        block_id(),
        quantity("index"),
    )
    .method("get_uncle_count_by_block_hash", "eth_getUncleCountByBlockHash", block_hash())
    .method("get_uncle_count_by_block_number", "eth_getUncleCountByBlockNumber", block_id())
    .method("hashrate", "eth_hashrate")
    .method("mining", "eth_mining")
    .method("pending_transactions", "eth_pendingTransactions")
    .method("protocol_version", "eth_protocolVersion")
    .method("send_raw_transaction", "eth_sendRawTransaction", hex_data("raw_transaction"))
    .method("syncing", "eth_syncing")
    .method("get_proof", "eth_getProof", address(), required("storage_keys", list), block_id_or_latest())
    .method("get_work", "eth_getWork")
    .method("submit_work", "eth_submitWork", hex_data("nonce"), hex_data("pow_hash"), hex_data("mix_digest"))
    .method("send_transaction", "eth_sendTransaction", transaction())
    .method("sign", "eth_sign", address(), hex_data("message"))
    .method("sign_transaction", "eth_signTransaction", transaction())
    .method("sign_typed_data", "eth_signTypedData_v4", address(), required("typed_data", dict, str))
)

# Not served by Aurora nodes:
#   get_proof (EIP-1186) is listed under limitations and unlikely to be implemented;
#   the rest need node-held keys or mining, listed under notes.
AURORA_UNSUPPORTED = (
    "get_proof",
    "get_work",
    "send_transaction",
    "sign",
    "sign_transaction",
    "sign_typed_data",
    "submit_work",
)

eth_module = (
    NamespaceModule("eth", base=ethereum_module)
    .suppress(*AURORA_UNSUPPORTED)
    .method("new_block_filter", "eth_newBlockFilter")
    .method("new_pending_transaction_filter", "eth_newPendingTransactionFilter")
    .method("uninstall_filter", "eth_uninstallFilter", filter_id())
    .method(
        "get_compilers",
        "eth_getCompilers",
        doc="Not part of the execution layer API; Aurora still answers it.",
    )
    .method("new_filter", "eth_newFilter", log_filter())
    .method("get_filter_changes", "eth_getFilterChanges", filter_id())
    .method(
        "get_filter_logs",
        "eth_getFilterLogs",
        filter_id(),
        doc="All logs matching the filter with the given id.",
    )
)
