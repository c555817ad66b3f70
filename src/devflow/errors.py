"""Error types raised by DevFlow operations."""

from __future__ import annotations


class DevflowError(RuntimeError):
    """Base error for user-facing DevFlow failures."""


class WorkspaceNotFoundError(DevflowError):
    """Raised when a command needs a `.devflow` workspace that is missing."""


class ConfigurationError(DevflowError):
    """Raised when settings cannot be loaded or validated."""


class IntentRequiredError(DevflowError):
    """Raised when the wizard receives no intent description."""
