"""Tests for the retadi command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from retadi.cli.main import cli


@pytest.fixture
def runner(monkeypatch) -> CliRunner:
    for name in ("RETADI_PORT", "RETADI_ASSET_ROOT"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


class TestAddress:

    def test_prints_url(self, runner: CliRunner):
        result = runner.invoke(cli, ["address", "--port", "4321"])
        assert result.exit_code == 0, result.output
        url = result.output.strip().splitlines()[-1]
        assert url.startswith("http://")
        assert url.endswith(":4321")

    def test_json_output(self, runner: CliRunner):
        result = runner.invoke(cli, ["--json-output", "address"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output.strip().splitlines()[-1])
        assert payload["port"] == 3000
        assert payload["url"].endswith(":3000")

    def test_invalid_port(self, runner: CliRunner):
        result = runner.invoke(cli, ["address", "--port", "70000"])
        assert result.exit_code != 0


class TestQr:

    def test_writes_png(self, runner: CliRunner, tmp_path: Path):
        out = tmp_path / "pair.png"
        result = runner.invoke(cli, ["qr", "http://10.0.0.2:3000", "-o", str(out), "--size", "256"])
        assert result.exit_code == 0, result.output
        assert out.read_bytes().startswith(b"\x89PNG")
        assert "256x256" in result.output

    def test_prints_terminal_code(self, runner: CliRunner):
        result = runner.invoke(cli, ["qr", "http://10.0.0.2:3000"])
        assert result.exit_code == 0, result.output
        assert result.output.count("\n") > 10

    def test_oversized_text(self, runner: CliRunner):
        result = runner.invoke(cli, ["qr", "a" * 4000])
        assert result.exit_code == 1
        assert "exceeds QR capacity" in result.output


class TestServe:

    def test_busy_port_fails(self, runner: CliRunner, asset_root: Path, occupied_port: int):
        result = runner.invoke(
            cli, ["serve", "--port", str(occupied_port), "--root", str(asset_root)]
        )
        assert result.exit_code == 1
        assert "Cannot bind" in result.output
