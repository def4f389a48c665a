"""Exception classes for wswitch."""


class WSwitchError(Exception):
    """Base exception for wswitch errors."""
    pass


class RegistryError(WSwitchError):
    """Raised when the window list cannot be enumerated or a window cannot be activated."""
    pass


class ConfigError(WSwitchError):
    """Raised when a configuration value is invalid."""
    pass
