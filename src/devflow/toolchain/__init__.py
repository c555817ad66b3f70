"""Collaborators that inspect the project toolchain and version history."""

from devflow.toolchain.build_check import BUILD_CHAINS, BuildCheckRunner, BuildTask
from devflow.toolchain.detection import detect_package_manager, detect_test_commands
from devflow.toolchain.git_history import parse_git_log, recent_commits

__all__ = [
    "BUILD_CHAINS",
    "BuildCheckRunner",
    "BuildTask",
    "detect_package_manager",
    "detect_test_commands",
    "parse_git_log",
    "recent_commits",
]
