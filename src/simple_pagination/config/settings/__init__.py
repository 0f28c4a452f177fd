"""Config settings – 12-factor env-based configuration."""
from simple_pagination.config.settings.base import PaginationSettings, Settings
from simple_pagination.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "PaginationSettings",
    "Settings",
    "SettingsLoader",
]
