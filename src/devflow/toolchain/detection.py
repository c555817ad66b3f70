"""Marker-file detection of test/lint/typecheck commands."""

from __future__ import annotations

import logging
from pathlib import Path

from devflow.schemas.toolchain_models import TestRecommendation
from devflow.workflow.storage import read_json

LOGGER = logging.getLogger(__name__)

PACKAGE_SCRIPTS = ("test", "lint", "typecheck")
PYTHON_MARKERS = ("pytest.ini", "pyproject.toml", "requirements.txt")


def detect_package_manager(root: Path) -> str:
    if (root / "pnpm-lock.yaml").exists():
        return "pnpm"
    if (root / "yarn.lock").exists():
        return "yarn"
    return "npm"


def script_command(package_manager: str, script: str) -> str:
    if package_manager == "pnpm":
        return f"pnpm run {script}"
    if package_manager == "yarn":
        return f"yarn {script}"
    return f"npm run {script}"


def detect_test_commands(root: Path) -> list[TestRecommendation]:
    """Suggest commands in fixed order: package scripts first, then ecosystem runners."""
    recommendations: list[TestRecommendation] = []

    package_json = root / "package.json"
    if package_json.exists():
        recommendations.extend(_package_script_commands(root, package_json))

    if (root / "go.mod").exists():
        recommendations.append(
            TestRecommendation(
                command="go test ./...",
                reason="go.mod detected; Go unit tests can run",
            )
        )

    if (root / "Cargo.toml").exists():
        recommendations.append(
            TestRecommendation(
                command="cargo test",
                reason="Cargo.toml detected; Rust tests can run",
            )
        )

    python_marker = next((name for name in PYTHON_MARKERS if (root / name).exists()), None)
    if python_marker:
        recommendations.append(
            TestRecommendation(
                command="pytest",
                reason=f"{python_marker} detected; pytest can run",
            )
        )

    if (root / "Makefile").exists():
        recommendations.append(
            TestRecommendation(
                command="make test",
                reason="Makefile detected; try `make test`",
            )
        )

    return recommendations


def _package_script_commands(root: Path, package_json: Path) -> list[TestRecommendation]:
    manifest = read_json(package_json)
    scripts = manifest.get("scripts") if isinstance(manifest, dict) else None
    if not isinstance(scripts, dict):
        LOGGER.debug("No scripts found in %s", package_json)
        return []

    package_manager = detect_package_manager(root)
    return [
        TestRecommendation(
            command=script_command(package_manager, script),
            reason=f"package.json defines a `{script}` script",
        )
        for script in PACKAGE_SCRIPTS
        if scripts.get(script)
    ]
