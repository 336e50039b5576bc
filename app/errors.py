class ServiceError(Exception):
    pass


class ConfigError(ServiceError, ValueError):
    pass


class StartupError(ServiceError):
    """Listener could not be started."""
