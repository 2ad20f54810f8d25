"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from cwaproxy.ingest.cwa_client import CwaClient

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TEST_BASE_URL = "https://test-cwa.example.com/api"


@pytest.fixture
def short_range_payload() -> dict:
    with open(FIXTURE_DIR / "f_c0032_001_taipei.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def weekly_payload() -> dict:
    with open(FIXTURE_DIR / "f_d0047_091_taipei.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def cwa_client() -> CwaClient:
    return CwaClient(api_key="test-key", base_url=TEST_BASE_URL, timeout=5.0)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "cwa": {"api_key": "yaml-key", "timeout": 10.0},
        "server": {"port": 8080},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
