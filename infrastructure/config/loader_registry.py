# infrastructure/config/loader_registry.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from infrastructure.config.base_loader import ConfigLoaderBase, ConfigLoadError
from infrastructure.config.json_loader import JsonConfigLoader
from infrastructure.config.yaml_loader import YamlConfigLoader

DEFAULT_CONFIG_NAMES = [".devflow.yaml", ".devflow.yml", ".devflow.json"]


class ConfigLoaderRegistry:
    def __init__(self) -> None:
        self._loaders: Dict[str, ConfigLoaderBase] = {
            ".yaml": YamlConfigLoader(),
            ".yml": YamlConfigLoader(),
            ".json": JsonConfigLoader(),
        }

    def get_loader(self, path: Path) -> ConfigLoaderBase:
        ext = path.suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            raise ConfigLoadError(f"Unsupported config format: {ext}")
        return loader


def find_default_config(base_dir: Path) -> Optional[Path]:
    # first match wins, in DEFAULT_CONFIG_NAMES order
    for name in DEFAULT_CONFIG_NAMES:
        candidate = base_dir / name
        if candidate.is_file():
            return candidate
    return None
