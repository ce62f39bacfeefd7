# infrastructure/config/base_loader.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict

from domain.config import BootstrapConfig


class ConfigLoadError(Exception):
    pass


class ConfigLoaderBase(ABC):
    def load_from_file(self, path: Path) -> BootstrapConfig:
        if not path.exists():
            raise ConfigLoadError(f"Config file not found: {path}")

        try:
            data = self._load_file(path)
        except Exception as exc:
            raise ConfigLoadError(f"Config file could not be parsed: {path}: {exc}") from exc

        if data is None:
            return BootstrapConfig()
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Config file is invalid (expected a mapping): {path}")

        return self.load_from_dict(data)

    def load_from_dict(self, data: Dict[str, Any]) -> BootstrapConfig:
        return BootstrapConfig(**coerce_config_values(data))

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...


def coerce_config_values(data: Dict[str, Any]) -> Dict[str, Any]:
    """Check keys and value types against BootstrapConfig's defaults."""
    defaults = BootstrapConfig()
    known = {f.name for f in fields(BootstrapConfig)}
    values: Dict[str, Any] = {}

    for key, value in data.items():
        if key not in known:
            raise ConfigLoadError(f"Unknown config key: {key}")
        expected = getattr(defaults, key)

        if isinstance(expected, list):
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigLoadError(f"Config key '{key}' must be a list of strings")
            values[key] = list(value)
        elif isinstance(expected, bool) or not isinstance(expected, (int, str)):
            raise ConfigLoadError(f"Config key '{key}' has an unsupported type")
        elif isinstance(expected, int):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigLoadError(f"Config key '{key}' must be a positive integer")
            values[key] = value
        else:
            if not isinstance(value, str) or not value:
                raise ConfigLoadError(f"Config key '{key}' must be a non-empty string")
            values[key] = value

    return values
