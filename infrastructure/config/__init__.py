# infrastructure/config/__init__.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from domain.config import BootstrapConfig
from infrastructure.config.base_loader import ConfigLoadError, ConfigLoaderBase
from infrastructure.config.env_overrides import EnvConfigOverrides
from infrastructure.config.json_loader import JsonConfigLoader
from infrastructure.config.loader_registry import ConfigLoaderRegistry, find_default_config
from infrastructure.config.yaml_loader import YamlConfigLoader


def load_config(base_dir: Path, config_path: Optional[Path] = None) -> BootstrapConfig:
    """defaults < config file < .env / environment"""
    path = config_path or find_default_config(base_dir)
    if path is None:
        config = BootstrapConfig()
    else:
        config = ConfigLoaderRegistry().get_loader(path).load_from_file(path)
    return EnvConfigOverrides(env_file=base_dir / ".env").apply(config)


__all__ = [
    "ConfigLoadError",
    "ConfigLoaderBase",
    "ConfigLoaderRegistry",
    "EnvConfigOverrides",
    "JsonConfigLoader",
    "YamlConfigLoader",
    "find_default_config",
    "load_config",
]
