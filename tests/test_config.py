from pathlib import Path

import pytest

from nbmap.core.config import DEFAULT_OUTPUT, DEFAULT_VERSION, load_settings
from nbmap.core.errors import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("NBMAP_SCHEMA_PATH", "NBMAP_PROVIDER_VERSION", "NBMAP_OUTPUT"):
        monkeypatch.delenv(var, raising=False)


def test_defaults_without_environment():
    settings = load_settings()

    assert settings.schema_path is None
    assert settings.version == DEFAULT_VERSION
    assert settings.output == DEFAULT_OUTPUT


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("NBMAP_SCHEMA_PATH", "/tmp/schema.json")
    monkeypatch.setenv("NBMAP_PROVIDER_VERSION", "v2.3.4")
    monkeypatch.setenv("NBMAP_OUTPUT", "out/mapping.json")

    settings = load_settings()

    assert settings.schema_path == Path("/tmp/schema.json")
    assert settings.version == "2.3.4"
    assert settings.output == Path("out/mapping.json")


def test_blank_schema_path_is_ignored(monkeypatch):
    monkeypatch.setenv("NBMAP_SCHEMA_PATH", "   ")

    assert load_settings().schema_path is None


@pytest.mark.parametrize("value", ["latest", "1.2", "v"])
def test_invalid_version_is_rejected(monkeypatch, value: str):
    monkeypatch.setenv("NBMAP_PROVIDER_VERSION", value)

    with pytest.raises(ConfigError, match="semantic version"):
        load_settings()
