"""Recent commit retrieval via the git CLI."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from devflow.schemas.toolchain_models import CommitInfo

LOGGER = logging.getLogger(__name__)

_FIELD_SEPARATOR = "|"


def recent_commits(root: Path, limit: int = 5) -> list[CommitInfo]:
    """Return the last `limit` commits, or [] when history is unavailable."""
    if limit <= 0:
        return []
    try:
        result = subprocess.run(
            [
                "git",
                "log",
                f"-{limit}",
                f"--pretty=format:%h{_FIELD_SEPARATOR}%ad{_FIELD_SEPARATOR}%s",
                "--date=short",
            ],
            cwd=root,
            capture_output=True,
            text=True,
            check=False,
        )
    except (FileNotFoundError, NotADirectoryError) as exc:
        LOGGER.debug("git unavailable for %s: %s", root, exc)
        return []

    if result.returncode != 0 or not result.stdout.strip():
        LOGGER.debug("git log returned %s for %s", result.returncode, root)
        return []
    return parse_git_log(result.stdout)


def parse_git_log(output: str) -> list[CommitInfo]:
    commits: list[CommitInfo] = []
    for line in output.strip().splitlines():
        parts = line.split(_FIELD_SEPARATOR, 2)
        if len(parts) != 3 or not parts[0]:
            continue
        commit_hash, date, message = parts
        commits.append(CommitInfo(hash=commit_hash, date=date, message=message))
    return commits
