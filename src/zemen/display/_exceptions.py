class ConfigError(ValueError):
    """Malformed display preferences."""
