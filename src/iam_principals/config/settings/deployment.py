"""Config settings – DeploymentSettings.

Ambient deployment scope used to build a resolution context when the
caller does not construct one explicitly::

    settings = EnvSettingsLoader().load(DeploymentSettings)   # IAM_PARTITION, IAM_ACCOUNT, ...
    configure_logging(settings)
    context = DeploymentContext.from_settings(settings)
"""
from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import ClassVar

from iam_principals.config.settings.base import Settings
from iam_principals.config.validation import InvalidSettingValueError

PARTITIONS: frozenset[str] = frozenset({"aws", "aws-cn", "aws-us-gov", "aws-iso", "aws-iso-b"})


@dataclasses.dataclass
class DeploymentSettings(Settings):
    _prefix: ClassVar[str] = "IAM"
    _choices: ClassVar[Mapping[str, frozenset[str]]] = {"partition": PARTITIONS}

    partition: str = "aws"
    account: str | None = None
    region: str | None = None
    url_suffix: str = "amazonaws.com"
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.account is not None and not (self.account.isdigit() and len(self.account) == 12):
            raise InvalidSettingValueError("account", self.account, "must be a 12-digit account id")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")


__all__ = ["DeploymentSettings", "PARTITIONS"]
