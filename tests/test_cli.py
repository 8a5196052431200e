import json
from types import SimpleNamespace

import pytest
import questionary
from typer.testing import CliRunner

from nbmap.cli.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("NBMAP_SCHEMA_PATH", "NBMAP_PROVIDER_VERSION", "NBMAP_OUTPUT"):
        monkeypatch.delenv(var, raising=False)


def test_token_for_resource():
    result = runner.invoke(app, ["token", "AvailableIpAddress"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "netbox:index/availableIpAddress:AvailableIpAddress"


def test_token_for_data_source():
    result = runner.invoke(app, ["token", "getCluster", "--kind", "data-source"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "netbox:index/getCluster:getCluster"


def test_token_rejects_malformed_name():
    result = runner.invoke(app, ["token", "1Device"])

    assert result.exit_code == 2


def test_token_rejects_unknown_kind():
    result = runner.invoke(app, ["token", "Device", "--kind", "table"])

    assert result.exit_code == 2


def test_schema_check_with_builtin_snapshot():
    result = runner.invoke(app, ["schema", "check"])

    assert result.exit_code == 0
    assert "complete" in result.stdout


def test_schema_check_fails_on_unreadable_schema(tmp_path):
    bad = tmp_path / "schema.json"
    bad.write_text("{not json")

    result = runner.invoke(app, ["schema", "check", "--schema", str(bad)])

    assert result.exit_code == 1


def test_schema_export_writes_json(tmp_path):
    target = tmp_path / "mapping.json"

    result = runner.invoke(app, ["schema", "export", "--output", str(target)])

    assert result.exit_code == 0
    data = json.loads(target.read_text())
    assert data["resources"]["netbox_device"]["tok"] == "netbox:index/device:Device"


def test_map_resources_filters_by_name():
    result = runner.invoke(app, ["map", "resources", "--name", "^netbox_vrf$"])

    assert result.exit_code == 0
    assert "netbox_vrf" in result.stdout
    assert "netbox_vlan" not in result.stdout


def test_map_resources_rejects_bad_regex():
    result = runner.invoke(app, ["map", "resources", "--name", "["])

    assert result.exit_code == 2


def test_map_show_entry():
    result = runner.invoke(app, ["map", "show", "netbox_ip_address"])

    assert result.exit_code == 0
    assert "netbox:index/ipAddress:IpAddress" in result.stdout
    assert "csharp=Address" in result.stdout


def test_map_show_unknown_entry():
    result = runner.invoke(app, ["map", "show", "netbox_nope", "--kind", "data-source"])

    assert result.exit_code == 1


def test_map_config_lists_env_defaults():
    result = runner.invoke(app, ["map", "config"])

    assert result.exit_code == 0
    assert "NETBOX_API_TOKEN" in result.stdout
    assert "NETBOX_SERVER_URL" in result.stdout


def _checkbox_picking(pick):
    """Return a questionary.checkbox stand-in whose prompt answers with `pick(choices)`."""
    calls = []

    def checkbox(message, choices, **kwargs):
        calls.append(message)
        return SimpleNamespace(ask=lambda: pick(choices))

    return checkbox, calls


def test_map_show_without_key_prints_selected_entries(monkeypatch):
    checkbox, calls = _checkbox_picking(lambda choices: [choices[0].value])
    monkeypatch.setattr(questionary, "checkbox", checkbox)

    result = runner.invoke(app, ["map", "show"])

    assert result.exit_code == 0
    assert calls == ["[nbmap] Select entries:"]
    assert "netbox:index/aggregate:Aggregate" in result.stdout
    assert "netbox_available_ip_address" not in result.stdout


def test_map_show_without_key_and_empty_selection(monkeypatch):
    checkbox, _ = _checkbox_picking(lambda choices: None)
    monkeypatch.setattr(questionary, "checkbox", checkbox)

    result = runner.invoke(app, ["map", "show", "--kind", "data-source"])

    assert result.exit_code == 0
    assert "No entries selected" in result.stdout


def test_map_config_shows_type_and_env_var_per_key():
    result = runner.invoke(app, ["map", "config"])

    rows = {
        key: next(line for line in result.stdout.splitlines() if f" {key} " in line)
        for key in ("api_token", "server_url", "request_timeout")
    }
    assert result.exit_code == 0
    assert "NETBOX_API_TOKEN" in rows["api_token"]
    assert "NETBOX_SERVER_URL" in rows["server_url"]
    assert "string" in rows["api_token"]
    assert "NETBOX_" not in rows["request_timeout"]


def test_schema_check_rejects_non_utf8_schema(tmp_path):
    bad = tmp_path / "schema.json"
    bad.write_bytes(b"\xff\xfe{}")

    result = runner.invoke(app, ["schema", "check", "--schema", str(bad)])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "UTF-8" in result.stdout
