"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """A setting holds a value the application cannot run with."""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        self.reason = reason
        super().__init__(f"Invalid {setting}: {reason}")


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""

    pass
