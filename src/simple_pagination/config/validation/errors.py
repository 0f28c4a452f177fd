"""Config validation errors."""
from simple_pagination.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when pagination settings cannot be loaded."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable, e.g. a negative page size."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
