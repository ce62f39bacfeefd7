# tests/infrastructure/test_config_loader.py
from __future__ import annotations

from pathlib import Path

import pytest

from domain.config import BootstrapConfig
from infrastructure.config import (
    ConfigLoadError,
    ConfigLoaderRegistry,
    JsonConfigLoader,
    YamlConfigLoader,
    find_default_config,
    load_config,
)


def test_yaml_loader_parses_values(tmp_path: Path) -> None:
    path = tmp_path / "devflow.yaml"
    path.write_text(
        """
remote_name: upstream
branch: trunk
url_attempts: 5
exclude_files:
  - \\.lock$
go_tools:
  - github.com/zricethezav/gitleaks/v8@latest
""".lstrip(),
        encoding="utf-8",
    )

    config = YamlConfigLoader().load_from_file(path)

    assert config.remote_name == "upstream"
    assert config.branch == "trunk"
    assert config.url_attempts == 5
    assert config.exclude_files == ["\\.lock$"]
    assert config.go_tools == ["github.com/zricethezav/gitleaks/v8@latest"]
    assert config.baseline_path == ".secrets.baseline"


def test_json_loader_parses_values(tmp_path: Path) -> None:
    path = tmp_path / "devflow.json"
    path.write_text('{"venv_path": "env", "requirements_file": "requirements-dev.txt"}', encoding="utf-8")

    config = JsonConfigLoader().load_from_file(path)

    assert config.venv_path == "env"
    assert config.requirements_file == "requirements-dev.txt"


def test_empty_yaml_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "devflow.yaml"
    path.write_text("", encoding="utf-8")

    assert YamlConfigLoader().load_from_file(path) == BootstrapConfig()


@pytest.mark.parametrize(
    "content, match",
    [
        ("colour: blue\n", "Unknown config key: colour"),
        ("url_attempts: three\n", "positive integer"),
        ("url_attempts: 0\n", "positive integer"),
        ("branch: ''\n", "non-empty string"),
        ("go_tools: gitleaks\n", "list of strings"),
        ("- just\n- a list\n", "expected a mapping"),
        ("remote_name: [unclosed\n", "could not be parsed"),
    ],
)
def test_invalid_yaml_raises(tmp_path: Path, content: str, match: str) -> None:
    path = tmp_path / "devflow.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigLoadError, match=match):
        YamlConfigLoader().load_from_file(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigLoadError, match="not found"):
        YamlConfigLoader().load_from_file(tmp_path / "nope.yaml")


def test_registry_picks_loader_by_extension() -> None:
    registry = ConfigLoaderRegistry()

    assert isinstance(registry.get_loader(Path("a.yml")), YamlConfigLoader)
    assert isinstance(registry.get_loader(Path("a.YAML")), YamlConfigLoader)
    assert isinstance(registry.get_loader(Path("a.json")), JsonConfigLoader)
    with pytest.raises(ConfigLoadError, match="Unsupported config format: .toml"):
        registry.get_loader(Path("a.toml"))


def test_find_default_config_prefers_yaml(tmp_path: Path) -> None:
    (tmp_path / ".devflow.json").write_text("{}", encoding="utf-8")
    (tmp_path / ".devflow.yaml").write_text("{}", encoding="utf-8")

    assert find_default_config(tmp_path) == tmp_path / ".devflow.yaml"
    assert find_default_config(tmp_path / "missing") is None


def test_load_config_layers_file_and_env(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("DEVFLOW_BRANCH", raising=False)
    monkeypatch.setenv("DEVFLOW_REMOTE_NAME", "from-env")
    (tmp_path / ".devflow.yaml").write_text("remote_name: from-file\nbranch: develop\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.remote_name == "from-env"
    assert config.branch == "develop"


def test_load_config_with_explicit_path(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("DEVFLOW_BASELINE_PATH", raising=False)
    explicit = tmp_path / "custom.json"
    explicit.write_text('{"baseline_path": "ci/.secrets.baseline"}', encoding="utf-8")

    assert load_config(tmp_path, explicit).baseline_path == "ci/.secrets.baseline"
