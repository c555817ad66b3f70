"""Configuration loading and override resolution."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from devflow.config.models import AppConfig
from devflow.constants import CONFIG_FILE
from devflow.errors import ConfigurationError

_ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "DEVFLOW_COMMIT_LIMIT": ("review", "commit_limit"),
    "DEVFLOW_REPORT_DIR": ("review", "report_dir"),
    "DEVFLOW_BUILD_TIMEOUT_SECONDS": ("build_check", "timeout_seconds"),
}


def default_config_path(workspace_root: Path) -> Path:
    return workspace_root / CONFIG_FILE


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must deserialize to a mapping")
    return data


def apply_overrides(
    raw_config: dict[str, Any],
    env: Mapping[str, str],
    cli_overrides: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """Apply precedence: CLI > env > YAML defaults."""
    merged = {
        key: dict(value) if isinstance(value, dict) else value
        for key, value in raw_config.items()
    }
    for env_name, (section, field) in _ENV_OVERRIDES.items():
        value = env.get(env_name)
        if value:
            merged.setdefault(section, {})
            merged[section][field] = value

    if cli_overrides:
        if cli_overrides.get("commit_limit") is not None:
            merged.setdefault("review", {})
            merged["review"]["commit_limit"] = cli_overrides["commit_limit"]
        if cli_overrides.get("report_dir"):
            merged.setdefault("review", {})
            merged["review"]["report_dir"] = cli_overrides["report_dir"]
    return merged


def load_app_config(
    config_path: Path | None = None,
    *,
    workspace_root: Path | None = None,
    env: Mapping[str, str] | None = None,
    cli_overrides: Mapping[str, Any] | None = None,
) -> AppConfig:
    """Load and validate settings.

    An explicit `config_path` must exist. Without one, the workspace's
    `.devflow/config.yaml` is used when present, otherwise built-in defaults.
    """
    active_env = os.environ if env is None else env
    if config_path is not None:
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")
        raw = _load_yaml(config_path)
    else:
        candidate = default_config_path(workspace_root or Path.cwd())
        raw = _load_yaml(candidate) if candidate.is_file() else {}

    merged = apply_overrides(raw, active_env, cli_overrides)
    try:
        return AppConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
