"""Configuration loading with pydantic-settings.

Sources, highest precedence first:
1. Keyword overrides passed to load_config()
2. Environment variables (GITDRAFT__SECTION__KEY)
3. Repo config (<repo>/.gitdraft/config.yaml)
4. Global config (~/.config/gitdraft/config.yaml)
5. Model defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from gitdraft.config.models import (
    ChangesConfig,
    GitDraftConfig,
    LoggingConfig,
    PromptConfig,
)
from gitdraft.core.errors import ConfigError

log = structlog.get_logger(__name__)

GLOBAL_CONFIG_PATH = Path("~/.config/gitdraft/config.yaml").expanduser()
REPO_CONFIG_NAME = Path(".gitdraft") / "config.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    """Read one YAML layer. A missing file is an empty layer."""
    if not path.exists():
        return {}
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError.unreadable(str(path), str(e)) from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top level must be a mapping")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = _deep_merge(current, value)
        merged[key] = value
    return merged


def _read_layers(repo_root: Path) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for path in (GLOBAL_CONFIG_PATH, repo_root / REPO_CONFIG_NAME):
        layer = _load_yaml(path)
        if layer:
            log.debug("config_layer_loaded", path=str(path), sections=sorted(layer))
        merged = _deep_merge(merged, layer)
    return merged


class _YamlSource(PydanticBaseSettingsSource):
    """Hands already-merged YAML layers to pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._data = data

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:  # noqa: ARG002
        value = self._data.get(field_name)
        return value, field_name, isinstance(value, dict)

    def __call__(self) -> dict[str, Any]:
        return self._data


def _settings_for(yaml_data: dict[str, Any]) -> type[BaseSettings]:
    class GitDraftSettings(BaseSettings):
        model_config = SettingsConfigDict(
            env_prefix="GITDRAFT__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        changes: ChangesConfig = ChangesConfig()
        prompt: PromptConfig = PromptConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_data))

    return GitDraftSettings


def load_config(repo_root: Path | None = None, **overrides: Any) -> GitDraftConfig:
    """Resolve the effective configuration for a repository.

    Args:
        repo_root: Repository whose .gitdraft/config.yaml applies. Defaults to
            the current working directory.
        **overrides: Section dicts (e.g. changes={"summary_width": 60}) that
            win over every other source.

    Raises:
        ConfigError: A config file is unreadable, is not valid YAML, or holds
            a value that fails validation (including values from env vars).
    """
    yaml_data = _read_layers(repo_root or Path.cwd())
    try:
        settings = _settings_for(yaml_data)(**overrides)
    except ValidationError as e:
        raise ConfigError.from_validation(e) from e
    return GitDraftConfig.model_validate(settings.model_dump())
