"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from defi_pool.config import (
    AppConfig,
    ChainConfig,
    NotificationsConfig,
    PoolConfig,
    TelegramConfig,
)
from defi_pool.models import PoolSnapshot

PACKAGE_ID = "0x" + "ab" * 32
POOL_ID = "0x" + "cd" * 32
USER_ADDRESS = "0x" + "12" * 32


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_chain_config() -> ChainConfig:
    return ChainConfig(
        network="testnet",
        rpc_endpoints=("https://rpc1.example.com", "https://rpc2.example.com"),
        rpc_timeout=10,
        explorer_url="https://testnet.suivision.xyz",
    )


@pytest.fixture()
def sample_pool_config() -> PoolConfig:
    return PoolConfig(package_id=PACKAGE_ID, pool_id=POOL_ID)


@pytest.fixture()
def sample_app_config(
    sample_chain_config: ChainConfig, sample_pool_config: PoolConfig
) -> AppConfig:
    return AppConfig(
        chain=sample_chain_config,
        pool=sample_pool_config,
        notifications=NotificationsConfig(
            telegram=TelegramConfig(
                enabled=True,
                alert_bot_token="fake-alert-token",
                log_bot_token="fake-log-token",
                chat_id="12345",
            ),
        ),
    )


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_snapshot() -> PoolSnapshot:
    return PoolSnapshot(pool_balance="12.5000", user_balance="3.2500", user_debt="1.0000")


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent(f"""\
    chain:
      network: testnet
      rpc_endpoints: ["https://rpc.example.com"]
      rpc_timeout: 10
    pool:
      package_id: "{PACKAGE_ID}"
      pool_id: "{POOL_ID}"
    notifications:
      telegram:
        enabled: true
        alert_bot_token: "tok1"
        log_bot_token: "tok2"
        chat_id: "999"
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Sample on-chain data
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_pool_object() -> dict:
    return {
        "data": {
            "objectId": POOL_ID,
            "version": "42",
            "type": f"{PACKAGE_ID}::defi::Pool",
            "owner": {"Shared": {"initial_shared_version": 7}},
            "content": {
                "dataType": "moveObject",
                "type": f"{PACKAGE_ID}::defi::Pool",
                "fields": {"deposits": "12500000000", "id": {"id": POOL_ID}},
            },
        }
    }


@pytest.fixture()
def sample_balance() -> dict:
    return {
        "coinType": "0x2::sui::SUI",
        "coinObjectCount": 2,
        "totalBalance": "3250000000",
        "lockedBalance": {},
    }


@pytest.fixture()
def sample_inspect_result() -> dict:
    # 1 SUI of debt as a BCS u64
    debt = list((1_000_000_000).to_bytes(8, "little"))
    return {
        "effects": {"status": {"status": "success"}},
        "results": [{"returnValues": [[debt, "u64"]]}],
    }
