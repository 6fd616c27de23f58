"""Config validation errors.

Each error names the settings field and, when it came from the process
environment, the variable to fix (``SPHINX_PORT`` rather than ``port``).
"""
from __future__ import annotations

from sphinx_bridge.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when search configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, env_var: str | None = None) -> None:
        source = env_var or setting_name
        super().__init__(
            f"Required setting '{setting_name}' is missing; set {source}",
            detail={"setting": setting_name, "env_var": env_var},
        )
        self.setting_name = setting_name
        self.env_var = env_var


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable, e.g. a port outside 1..65535."""
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        env_var: str | None = None,
    ) -> None:
        where = f"{setting_name} ({env_var})" if env_var else setting_name
        super().__init__(
            f"Invalid search setting {where}={value!r}: {reason}",
            detail={"setting": setting_name, "env_var": env_var, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.env_var = env_var
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
