"""Defaults for delimiter and encoding, optionally read from a YAML/JSON file."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from ncut.errors import ConfigError
from ncut.selection import DEFAULT_DELIMITER

CONFIG_ENV = "NCUT_CONFIG"
KNOWN_KEYS = {"delimiter", "encoding"}


@dataclass(frozen=True)
class Settings:
    delimiter: str = DEFAULT_DELIMITER
    encoding: str = "utf-8"

    @staticmethod
    def from_mapping(payload: dict[str, Any]) -> Settings:
        unknown = set(payload) - KNOWN_KEYS
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(sorted(unknown))}")
        defaults = Settings()
        return Settings(
            delimiter=parse_delimiter(str(payload.get("delimiter", defaults.delimiter))),
            encoding=str(payload.get("encoding", defaults.encoding)),
        )


def parse_delimiter(s: str) -> str:
    """Accept ``\\t`` and ``tab`` as spellings of TAB."""
    if s == "\\t" or s == "tab":
        return "\t"
    return s


def load_settings(path: Path | None = None) -> Settings:
    """Read settings from ``path``, else ``$NCUT_CONFIG``, else use defaults."""
    if path is None:
        env_path = os.environ.get(CONFIG_ENV)
        if not env_path:
            return Settings()
        path = Path(env_path)
    try:
        text = path.read_text()
    except OSError as exc:
        raise ConfigError(f"{path}: {exc.strerror or exc}") from exc
    try:
        if path.suffix.lower() in {".yml", ".yaml"}:
            payload = yaml.safe_load(text)
        else:
            payload = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    if payload is None:
        return Settings()
    if not isinstance(payload, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return Settings.from_mapping(payload)


def apply_overrides(
    settings: Settings, delimiter: str | None = None, encoding: str | None = None
) -> Settings:
    """Command-line values win over the file."""
    if delimiter is not None:
        settings = replace(settings, delimiter=parse_delimiter(delimiter))
    if encoding is not None:
        settings = replace(settings, encoding=encoding)
    return settings
