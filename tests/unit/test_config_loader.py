"""Configuration loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from devflow.config.loader import load_app_config
from devflow.errors import ConfigurationError
from devflow.templates import TEMPLATE_ROOT


def _write_config(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text(content, encoding="utf-8")
    return config_path


def test_cli_overrides_env_and_yaml_defaults(tmp_path: Path) -> None:
    """CLI override should have highest precedence."""
    config_path = _write_config(
        tmp_path,
        """
review:
  commit_limit: 3
  report_dir: "reports/from-yaml"
build_check:
  timeout_seconds: 30
""".strip(),
    )

    config = load_app_config(
        config_path,
        env={"DEVFLOW_COMMIT_LIMIT": "8", "DEVFLOW_BUILD_TIMEOUT_SECONDS": "45"},
        cli_overrides={"commit_limit": 12},
    )
    assert config.review.commit_limit == 12
    assert config.review.report_dir == "reports/from-yaml"
    assert config.build_check.timeout_seconds == 45


def test_env_overrides_yaml(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "review:\n  commit_limit: 3\n")
    config = load_app_config(
        config_path,
        env={"DEVFLOW_COMMIT_LIMIT": "9", "DEVFLOW_REPORT_DIR": "out"},
    )
    assert config.review.commit_limit == 9
    assert config.review.report_dir == "out"


def test_missing_default_file_uses_defaults(tmp_path: Path) -> None:
    config = load_app_config(workspace_root=tmp_path, env={})
    assert config.review.commit_limit == 5
    assert config.review.build_ok_status == "ok"
    assert config.review.approved_statuses == ["approved"]
    assert config.template.exclude_globs == []


def test_workspace_config_is_picked_up(tmp_path: Path) -> None:
    config_file = tmp_path / ".devflow" / "config.yaml"
    config_file.parent.mkdir()
    config_file.write_text(
        "template:\n  exclude_globs: ['*.md', '  ']\n", encoding="utf-8"
    )
    config = load_app_config(workspace_root=tmp_path, env={})
    assert config.template.exclude_globs == ["*.md"]


def test_bundled_config_is_valid() -> None:
    config = load_app_config(TEMPLATE_ROOT / ".devflow" / "config.yaml", env={})
    assert config.build_check.timeout_seconds == 600


def test_explicit_missing_path_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_app_config(tmp_path / "absent.yaml", env={})


@pytest.mark.parametrize(
    "content",
    [
        "review: [unclosed",
        "- just\n- a list\n",
        "review:\n  commit_limit: -1\n",
        "unknown_section: true\n",
    ],
)
def test_invalid_configuration_is_rejected(tmp_path: Path, content: str) -> None:
    config_path = _write_config(tmp_path, content)
    with pytest.raises(ConfigurationError):
        load_app_config(config_path, env={})
