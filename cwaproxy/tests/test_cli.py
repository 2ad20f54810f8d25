"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import respx

from cwaproxy.cli import main


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        result = main([])
        assert result == 1

    def test_regions(self, capsys):
        result = main(["regions"])
        assert result == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 22
        assert lines[0] == "taipei\t臺北市"

    def test_config_show_masks_key(self, config_yaml_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        result = main(["--config", str(config_yaml_path), "config", "show"])
        assert result == 0
        out = capsys.readouterr().out
        assert "yaml-key" not in out
        assert json.loads(out)["cwa"]["api_key"] == "***"

    def test_fetch_invalid_region(self, capsys):
        result = main(["fetch", "weather", "nonexistent"])
        assert result == 1
        body = json.loads(capsys.readouterr().out)
        assert body["error"] == "INVALID_REGION"

    def test_fetch_missing_key(self, tmp_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        result = main(["--config", str(config_path), "fetch", "weekly", "taipei"])
        assert result == 1
        assert json.loads(capsys.readouterr().out)["error"] == "CONFIGURATION_ERROR"

    @respx.mock
    def test_fetch_weekly(self, tmp_path: Path, capsys, monkeypatch, weekly_payload: dict):
        monkeypatch.setenv("CWA_API_KEY", "env-key")
        config_path = tmp_path / "test.yaml"
        config_path.write_text("cwa:\n  base_url: https://test-cwa.example.com/api\n")
        respx.get("https://test-cwa.example.com/api/v1/rest/datastore/F-D0047-091").mock(
            return_value=httpx.Response(200, json=weekly_payload)
        )

        result = main(["--config", str(config_path), "fetch", "weekly", "taipei"])
        assert result == 0
        body = json.loads(capsys.readouterr().out)
        assert body["success"] is True
        assert len(body["data"]["forecasts"]) == 3

    def test_config_get(self, config_yaml_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        result = main(["--config", str(config_yaml_path), "config", "get", "cwa.timeout"])
        assert result == 0
        assert capsys.readouterr().out.strip() == "10.0"

    def test_config_get_masks_key(self, config_yaml_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        result = main(["--config", str(config_yaml_path), "config", "get", "cwa.api_key"])
        assert result == 0
        assert capsys.readouterr().out.strip() == "***"

    def test_config_get_section(self, config_yaml_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        result = main(["--config", str(config_yaml_path), "config", "get", "cwa"])
        assert result == 0
        out = capsys.readouterr().out
        assert "yaml-key" not in out
        assert json.loads(out)["api_key"] == "***"

    def test_config_get_unknown_key(self, config_yaml_path: Path, capsys):
        result = main(["--config", str(config_yaml_path), "config", "get", "cwa.nope"])
        assert result == 1
        assert "unknown config key" in capsys.readouterr().out
