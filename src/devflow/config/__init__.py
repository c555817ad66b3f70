"""Configuration exports."""

from devflow.config.loader import default_config_path, load_app_config
from devflow.config.models import AppConfig, BuildCheckConfig, ReviewConfig, TemplateConfig

__all__ = [
    "AppConfig",
    "BuildCheckConfig",
    "ReviewConfig",
    "TemplateConfig",
    "default_config_path",
    "load_app_config",
]
