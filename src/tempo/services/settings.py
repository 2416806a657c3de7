"""Settings dataclass and JSON persistence for the tempo tools."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

__all__ = ["Settings", "SettingsStore", "OUTPUT_FORMAT_CHOICES"]

LOGGER = logging.getLogger(__name__)
_SETTINGS_DIR = Path.home() / ".tempo"
_DEFAULT_SETTINGS_PATH = _SETTINGS_DIR / "settings.json"
_SETTINGS_VERSION = 1
_ENV_OVERRIDES: Mapping[str, str] = {
    "TEMPO_OUTPUT_FORMAT": "output_format",
    "TEMPO_LOG_DIR": "log_dir",
}
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "TEMPO_STRICT": "strict",
    "TEMPO_DEBUG_LOGGING": "debug_logging",
}
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_BOOL_FIELDS = ("strict", "debug_logging")
OUTPUT_FORMAT_CHOICES: tuple[str, ...] = ("summary", "json")


@dataclass(slots=True)
class Settings:
    """User-configurable defaults for parsing and inspection."""

    strict: bool = False
    debug_logging: bool = False
    output_format: str = "summary"
    log_dir: str | None = None


class SettingsStore:
    """Persistence adapter for :class:`Settings`."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = Path(path) if path is not None else _DEFAULT_SETTINGS_PATH

    @property
    def path(self) -> Path:
        """Return the resolved path backing this store."""

        return self._path

    def load(self, *, overrides: Mapping[str, Any] | None = None) -> Settings:
        """Load settings from disk, applying CLI/environment overrides when present."""

        payload = self._read_payload()
        settings = Settings()
        if payload:
            data = _coerce_bool_fields(_filter_fields(payload))
            try:
                settings = Settings(**data)
            except TypeError as exc:
                LOGGER.warning("Settings payload contained unexpected data: %s", exc)
                settings = Settings()
            LOGGER.debug("Settings loaded from %s: %s", self._path, sorted(data))

        if overrides:
            settings = self._apply_overrides(settings, overrides, source="CLI")

        settings = self._apply_env_overrides(settings)
        return _normalize_output_format(settings)

    def save(self, settings: Settings) -> Path:
        """Persist settings to disk with atomic file writes."""

        payload = asdict(settings)
        payload["version"] = _SETTINGS_VERSION
        body = json.dumps(payload, indent=2, sort_keys=True)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(".tmp")
        tmp_path.write_text(body, encoding="utf-8")
        tmp_path.replace(self._path)
        LOGGER.debug("Settings saved to %s", self._path)
        return self._path

    def _read_payload(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            text = self._path.read_text(encoding="utf-8")
            payload = json.loads(text)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            LOGGER.warning("Settings file %s is not valid JSON: %s", self._path, exc)
            return {}
        if not isinstance(payload, dict):
            LOGGER.warning("Settings file %s does not contain an object", self._path)
            return {}
        return payload

    def _apply_overrides(
        self,
        settings: Settings,
        overrides: Mapping[str, Any],
        *,
        source: str = "runtime",
    ) -> Settings:
        allowed = {field.name for field in fields(Settings)}
        filtered: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key not in allowed or value is None:
                continue
            filtered[key] = value
        if filtered:
            LOGGER.debug("Applying %s settings overrides: %s", source, sorted(filtered))
            settings = replace(settings, **filtered)
        return settings

    def _apply_env_overrides(self, settings: Settings) -> Settings:
        overrides: Dict[str, Any] = {}
        for env_name, field_name in _ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value
        for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value.strip().lower() in _TRUE_VALUES
        if overrides:
            settings = self._apply_overrides(settings, overrides, source="environment")
        return settings


def _filter_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    allowed = {field.name for field in fields(Settings)}
    return {key: value for key, value in payload.items() if key in allowed}


def _coerce_bool_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    for name in _BOOL_FIELDS:
        if name not in data or isinstance(data[name], bool):
            continue
        value = data[name]
        normalized = str(value).strip().lower()
        if normalized in _TRUE_VALUES:
            data[name] = True
        elif normalized in _FALSE_VALUES:
            data[name] = False
        else:
            LOGGER.warning("Settings field %s=%r is not a boolean; using default", name, value)
            del data[name]
    return data


def _normalize_output_format(settings: Settings) -> Settings:
    normalized = str(settings.output_format or "").strip().lower()
    if normalized not in OUTPUT_FORMAT_CHOICES:
        LOGGER.warning("Unknown output format %r; using 'summary'", settings.output_format)
        normalized = "summary"
    if normalized != settings.output_format:
        settings = replace(settings, output_format=normalized)
    return settings
