"""Config validation errors."""
from cloud_flags.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Configuration could not be loaded or is unusable."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting without a default (``LAUNCHDARKLY_SDK_KEY``) is not set."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"{setting_name} must be set", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be coerced or fails validation."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
