from aurora_rpc.core.config import MAINNET, TESTNET, Config, RpcConfig


def test_load_from_env_strips_prefix_and_keeps_defaults(monkeypatch) -> None:
    monkeypatch.setenv("AURORA_URL", "http://localhost:8545")
    monkeypatch.setenv("OTHER_URL", "ignored")
    loaded = Config.load_from_env(timeout="10")
    assert loaded["url"] == "http://localhost:8545"
    assert loaded["timeout"] == "10"
    assert "other_url" not in loaded


def test_rpc_config_from_env_defaults_to_mainnet(monkeypatch) -> None:
    monkeypatch.delenv("AURORA_URL", raising=False)
    monkeypatch.delenv("AURORA_TIMEOUT", raising=False)
    config = RpcConfig.from_env()
    assert config.url == MAINNET.url
    assert config.timeout == 30.0


def test_rpc_config_from_env_accepts_network_name_and_timeout(monkeypatch) -> None:
    monkeypatch.setenv("AURORA_URL", "testnet")
    monkeypatch.setenv("AURORA_TIMEOUT", "2.5")
    config = RpcConfig.from_env()
    assert config.url == TESTNET.url
    assert config.timeout == 2.5


def test_known_network_ids() -> None:
    assert MAINNET.network_id == 1313161554
    assert TESTNET.network_id == 1313161555
