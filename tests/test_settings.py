"""Tests for the settings persistence layer."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tempo.services.settings import Settings, SettingsStore


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TEMPO_STRICT", "TEMPO_DEBUG_LOGGING", "TEMPO_OUTPUT_FORMAT", "TEMPO_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)


def test_load_returns_defaults_when_file_missing(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "settings.json")

    assert store.load() == Settings()


def test_save_and_load_roundtrip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "settings.json"
    store = SettingsStore(path)
    original = Settings(strict=True, debug_logging=True, output_format="json", log_dir="/tmp/logs")

    assert store.save(original) == path
    payload = json.loads(path.read_text(encoding="utf-8"))

    assert payload["version"] == 1
    assert SettingsStore(path).load() == original


def test_load_ignores_unknown_keys_and_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"strict": True, "theme": "dark"}), encoding="utf-8")

    assert SettingsStore(path).load() == Settings(strict=True)

    path.write_text("{not json", encoding="utf-8")

    assert SettingsStore(path).load() == Settings()


def test_overrides_skip_none_values(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    SettingsStore(path).save(Settings(strict=True))

    settings = SettingsStore(path).load(overrides={"strict": None, "output_format": "json"})

    assert settings.strict is True
    assert settings.output_format == "json"


def test_environment_overrides_win(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMPO_STRICT", "yes")
    monkeypatch.setenv("TEMPO_OUTPUT_FORMAT", "JSON")

    settings = SettingsStore(tmp_path / "settings.json").load(overrides={"strict": False})

    assert settings.strict is True
    assert settings.output_format == "json"


def test_unknown_output_format_falls_back_to_summary(tmp_path: Path) -> None:
    settings = SettingsStore(tmp_path / "settings.json").load(overrides={"output_format": "xml"})

    assert settings.output_format == "summary"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("false", False), ("Off", False), (0, False), ("true", True), (1, True), ("maybe", False)],
)
def test_load_coerces_boolean_fields_from_file(tmp_path: Path, raw: object, expected: bool) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"strict": raw, "debug_logging": raw}), encoding="utf-8")

    settings = SettingsStore(path).load()

    assert settings.strict is expected
    assert settings.debug_logging is expected


def test_environment_booleans_accept_documented_values_only(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TEMPO_STRICT", "debug")
    monkeypatch.setenv("TEMPO_DEBUG_LOGGING", "on")

    settings = SettingsStore(tmp_path / "settings.json").load()

    assert settings.strict is False
    assert settings.debug_logging is True
