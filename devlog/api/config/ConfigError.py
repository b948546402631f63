"""Configuration error raised for unreadable or invalid config files."""


class ConfigError(ValueError):
    """Raised when the configuration file cannot be read or validated."""
