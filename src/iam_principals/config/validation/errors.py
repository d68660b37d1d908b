"""Config validation – errors raised while loading deployment settings."""
from iam_principals.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded, e.g. the settings class rejected its arguments."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No environment variable was set for a field without a default."""
    default_code = "missing_required_setting"
    context_fields = ("setting_name",)

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting could not be coerced, or is outside its allowed values."""
    default_code = "invalid_setting_value"
    context_fields = ("setting_name", "value", "reason")

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"Setting '{setting_name}' has invalid value {value!r}: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
