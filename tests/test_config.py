from __future__ import annotations

import pytest

from carinventory.config import InventoryConfig
from carinventory.exceptions import InventoryConfigError


def test_defaults() -> None:
    config = InventoryConfig()
    assert config.base_url == "http://localhost:3000"
    assert config.collection_path == "/cars"
    assert config.request_timeout == 30.0


def test_base_url_trailing_slash_stripped() -> None:
    config = InventoryConfig(base_url="http://192.168.68.89:3000/", collection_path="cars/")
    assert config.base_url == "http://192.168.68.89:3000"
    assert config.collection_path == "/cars"


@pytest.mark.parametrize("base_url", ["", "localhost:3000", "ftp://example.com"])
def test_invalid_base_url_rejected(base_url: str) -> None:
    with pytest.raises(InventoryConfigError):
        InventoryConfig(base_url=base_url)


def test_non_positive_timeout_rejected() -> None:
    with pytest.raises(InventoryConfigError):
        InventoryConfig(request_timeout=0)


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARINV_BASE_URL", "https://inventory.example.com")
    monkeypatch.setenv("CARINV_REQUEST_TIMEOUT", "5")
    monkeypatch.delenv("CARINV_COLLECTION_PATH", raising=False)
    monkeypatch.delenv("CARINV_USER_AGENT", raising=False)

    config = InventoryConfig.from_env()
    assert config.base_url == "https://inventory.example.com"
    assert config.request_timeout == 5.0


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARINV_BASE_URL", "https://inventory.example.com")
    monkeypatch.setenv("CARINV_REQUEST_TIMEOUT", "5")

    config = InventoryConfig.from_env(base_url="http://10.0.0.2:3000", request_timeout=2.5)
    assert config.base_url == "http://10.0.0.2:3000"
    assert config.request_timeout == 2.5


def test_from_env_bad_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARINV_REQUEST_TIMEOUT", "soon")
    with pytest.raises(InventoryConfigError):
        InventoryConfig.from_env()
