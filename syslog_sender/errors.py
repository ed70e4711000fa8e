"""Error types raised while configuring and sending a syslog message."""


class SyslogSenderError(Exception):
    """Base class for every error this package raises."""


class ConfigurationError(SyslogSenderError):
    """Missing or out-of-range input, detected before any network I/O."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class TransportError(SyslogSenderError):
    """The single send attempt failed while resolving, connecting or writing."""

    def __init__(self, phase: str, target: str, cause: Exception):
        super().__init__(f"{phase} {target} failed: {cause}")
        self.phase = phase
        self.target = target
        self.cause = cause
