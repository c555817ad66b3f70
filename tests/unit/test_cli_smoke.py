"""CLI smoke tests."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from typer.testing import CliRunner

from devflow import __version__, app


def test_package_imports() -> None:
    """Ensure the package imports with expected metadata."""
    assert __version__


def test_cli_help_runs() -> None:
    """Ensure CLI wiring is operational."""
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "DevFlow" in result.stdout


def test_version_flag_and_command_agree() -> None:
    runner = CliRunner()
    flag = runner.invoke(app, ["--version"])
    command = runner.invoke(app, ["version"])
    assert flag.exit_code == 0
    assert command.exit_code == 0
    assert flag.stdout.strip() == f"v{__version__}"
    assert command.stdout.strip() == __version__


def test_unknown_option_is_rejected() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["cleanup", "--bogus"])
    assert result.exit_code != 0


def test_root_main_py_help_runs() -> None:
    """Root main.py shim should expose the CLI entrypoint."""
    repo_root = Path(__file__).resolve().parents[2]
    result = subprocess.run(
        [sys.executable, "main.py", "--help"],
        cwd=repo_root,
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0
    assert "DevFlow" in result.stdout
