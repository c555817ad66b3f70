"""Deterministic wrappers around per-ecosystem build/lint/typecheck commands."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from devflow.clock import isoformat_utc, utc_now
from devflow.schemas.enums import BuildTaskStatus, BuildVerdict
from devflow.schemas.toolchain_models import BuildCheckReport, BuildTaskResult

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildTask:
    """A single command in a build-check chain."""

    label: str
    command: str
    args: tuple[str, ...] = ()
    optional: bool = False

    @property
    def display(self) -> str:
        return " ".join((self.command, *self.args))


# Each chain runs in order and stops at the first task that is not `ok`.
BUILD_CHAINS: tuple[tuple[tuple[str, ...], tuple[BuildTask, ...]], ...] = (
    (
        ("package.json",),
        (
            BuildTask("pnpm typecheck", "pnpm", ("typecheck", "--if-present")),
            BuildTask("pnpm build", "pnpm", ("build",)),
            BuildTask("pnpm lint", "pnpm", ("lint", "--if-present")),
        ),
    ),
    (
        ("go.mod",),
        (
            BuildTask("go mod tidy", "go", ("mod", "tidy")),
            BuildTask("go build ./...", "go", ("build", "./...")),
            BuildTask("golangci-lint run", "golangci-lint", ("run",), optional=True),
        ),
    ),
    (
        ("Cargo.toml",),
        (
            BuildTask("cargo check", "cargo", ("check",)),
            BuildTask("cargo clippy", "cargo", ("clippy", "--all-targets")),
        ),
    ),
    (
        ("pyproject.toml", "requirements.txt"),
        (
            BuildTask("pip check", "pip", ("check",)),
            BuildTask("flake8 .", "flake8", (".",), optional=True),
        ),
    ),
)


class BuildCheckRunner:
    """Runs the build chains that apply to a project root."""

    def __init__(self, timeout_seconds: int = 600) -> None:
        self.timeout_seconds = timeout_seconds

    def run(self, root: Path) -> BuildCheckReport:
        """Execute every applicable chain; failures become entries, never exceptions."""
        started_at = isoformat_utc(utc_now())
        tasks: list[BuildTaskResult] = []
        for markers, chain in BUILD_CHAINS:
            if not any((root / marker).exists() for marker in markers):
                continue
            for task in chain:
                result = self.run_task(task, cwd=root)
                tasks.append(result)
                if result.status != BuildTaskStatus.OK:
                    break

        verdict = (
            BuildVerdict.FAILED
            if any(task.status == BuildTaskStatus.FAILED for task in tasks)
            else BuildVerdict.OK
        )
        return BuildCheckReport(
            started_at=started_at,
            finished_at=isoformat_utc(utc_now()),
            status=verdict,
            tasks=tasks,
        )

    def run_task(self, task: BuildTask, *, cwd: Path) -> BuildTaskResult:
        if shutil.which(task.command) is None:
            status = BuildTaskStatus.SKIPPED if task.optional else BuildTaskStatus.FAILED
            return BuildTaskResult(
                label=task.label,
                command=task.display,
                status=status,
                exit_code=None,
                stderr=f"{task.command} not found"
                + (", skipped." if task.optional else "."),
            )

        LOGGER.debug("Running build task %s", task.display)
        try:
            result = subprocess.run(
                [task.command, *task.args],
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
                timeout=self.timeout_seconds,
                env={**os.environ, "FORCE_COLOR": "0"},
            )
        except subprocess.TimeoutExpired:
            return BuildTaskResult(
                label=task.label,
                command=task.display,
                status=BuildTaskStatus.FAILED,
                exit_code=None,
                stderr=f"{task.command} timed out after {self.timeout_seconds}s",
            )
        except OSError as exc:
            return BuildTaskResult(
                label=task.label,
                command=task.display,
                status=BuildTaskStatus.FAILED,
                exit_code=None,
                stderr=str(exc),
            )

        return BuildTaskResult(
            label=task.label,
            command=task.display,
            status=BuildTaskStatus.OK if result.returncode == 0 else BuildTaskStatus.FAILED,
            exit_code=result.returncode,
            stdout=(result.stdout or "").strip(),
            stderr=(result.stderr or "").strip(),
        )
