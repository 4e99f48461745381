import json
import logging

import pytest
from click.testing import CliRunner

import backup_inventory.cli as cli_module
from backup_inventory.config.config_manager import ConfigManager
from backup_inventory.errors import ConnectionFailedError
from tests.helpers import T1, T2, FakeLister


ENV = {"HOST": "backup.example.com", "USER": "backup", "PASSWORD": "secret"}


class FakeTransport:
    lister = None
    connect_error = None
    configs = []

    def __init__(self, config):
        FakeTransport.configs.append(config)

    def __enter__(self):
        if FakeTransport.connect_error is not None:
            raise FakeTransport.connect_error
        return FakeTransport.lister

    def __exit__(self, exc_type, exc_value, traceback):
        return None


@pytest.fixture(autouse=True)
def isolated(monkeypatch: pytest.MonkeyPatch):
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level

    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_LOCATIONS", [])
    monkeypatch.setattr(cli_module, "SFTPTransport", FakeTransport)
    FakeTransport.lister = FakeLister(
        {
            "/daily/objects/ab/cd": (100, T1),
            "/daily/refs/main": (10, T2),
            "/tmp/scratch": (1, T1),
        }
    )
    FakeTransport.connect_error = None
    FakeTransport.configs = []
    yield

    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def _invoke(*args: str):
    return CliRunner().invoke(cli_module.cli, ["--log-level", "ERROR", *args], env=ENV)


def test_scan_prints_one_line_per_backup() -> None:
    result = _invoke("scan")

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "daily (2 files), 10 bytes (mutable), 100 bytes (immutable), last modified 2024-05-02 10:00:00+00:00",
        "tmp (1 files), 1 bytes (mutable), 0 bytes (immutable), last modified 2024-05-01 09:30:00+00:00",
    ]
    assert FakeTransport.configs[0].host == "backup.example.com"


def test_scan_excludes_prefixes() -> None:
    result = _invoke("scan", "--exclude", "tm")

    assert result.exit_code == 0
    assert len(result.output.splitlines()) == 1


def test_scan_json_output() -> None:
    result = _invoke("scan", "--output", "json")

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload[0]["name"] == "daily"
    assert payload[0]["immutable_bytes"] == 100


def test_scan_collect_skipped() -> None:
    FakeTransport.lister.fail_list.add("/daily/refs")

    result = _invoke("scan", "--collect-skipped")

    assert result.exit_code == 0
    assert "  skipped: /daily/refs" in result.output.splitlines()


def test_scan_connection_failure_exits_without_inventory() -> None:
    FakeTransport.connect_error = ConnectionFailedError("authentication failed")

    result = _invoke("scan")

    assert result.exit_code == 1
    assert "Error during scan: authentication failed" in result.output
    assert "files)" not in result.output


def test_scan_root_listing_failure_exits_without_inventory() -> None:
    FakeTransport.lister.fail_list.add("/")

    result = _invoke("scan")

    assert result.exit_code == 1
    assert "Cannot list backups in /" in result.output
    assert "files)" not in result.output


def test_scan_without_credentials_fails() -> None:
    result = CliRunner().invoke(cli_module.cli, ["--log-level", "ERROR", "scan"],
                                env={"HOST": None, "USER": None, "PASSWORD": None})

    assert result.exit_code == 1
    assert "missing required fields" in result.output
    assert FakeTransport.configs == []


def test_validate_config_masks_password() -> None:
    result = _invoke("validate-config")

    assert result.exit_code == 0
    assert "backup@backup.example.com:22" in result.output
    assert "secret" not in result.output
