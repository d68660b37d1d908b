"""Config settings – 12-factor env-based configuration."""
from iam_principals.config.settings.base import Settings
from iam_principals.config.settings.deployment import PARTITIONS, DeploymentSettings
from iam_principals.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DeploymentSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "PARTITIONS",
    "Settings",
    "SettingsLoader",
]
