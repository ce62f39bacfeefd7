# infrastructure/config/env_overrides.py
from __future__ import annotations

import os
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import dotenv_values

from domain.config import BootstrapConfig
from infrastructure.config.base_loader import ConfigLoadError, coerce_config_values

ENV_PREFIX = "DEVFLOW_"


class EnvConfigOverrides:
    """
    Reads DEVFLOW_<FIELD> overrides from a .env file and the process environment.

    Values in the .env file take precedence over the environment. Lists are
    comma-separated; integers are parsed.
    """

    def __init__(self, env_file: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None):
        self._env_vars: Dict[str, Any] = {}
        if env_file is not None and env_file.is_file():
            self._env_vars = {k: v for k, v in dotenv_values(env_file).items() if v is not None}

        for key, value in (os.environ if environ is None else environ).items():
            if key not in self._env_vars:
                self._env_vars[key] = value

    def overrides(self) -> Dict[str, Any]:
        defaults = BootstrapConfig()
        raw: Dict[str, Any] = {}
        for name in BootstrapConfig.field_names():
            value = self._env_vars.get(ENV_PREFIX + name.upper())
            if value is None:
                continue
            expected = getattr(defaults, name)
            if isinstance(expected, list):
                raw[name] = [item.strip() for item in value.split(",") if item.strip()]
            elif isinstance(expected, int):
                try:
                    raw[name] = int(value)
                except ValueError as exc:
                    raise ConfigLoadError(f"{ENV_PREFIX}{name.upper()} must be an integer") from exc
            else:
                raw[name] = value
        return coerce_config_values(raw)

    def apply(self, config: BootstrapConfig) -> BootstrapConfig:
        overrides = self.overrides()
        return replace(config, **overrides) if overrides else config
