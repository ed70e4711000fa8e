"""Message model: transport kinds, the MessageSpec value and its validator."""

from dataclasses import dataclass, replace
from enum import Enum

from syslog_sender.errors import ConfigurationError

FACILITY_NAMES = {
    0: "kern", 1: "user", 2: "mail", 3: "daemon",
    4: "auth", 5: "syslog", 6: "lpr", 7: "news",
    8: "uucp", 9: "cron", 10: "authpriv", 11: "ftp",
    12: "ntp", 13: "security", 14: "console", 15: "solaris-cron",
    16: "local0", 17: "local1", 18: "local2", 19: "local3",
    20: "local4", 21: "local5", 22: "local6", 23: "local7",
}

SEVERITY_NAMES = {
    0: "emergency",
    1: "alert",
    2: "critical",
    3: "error",
    4: "warning",
    5: "notice",
    6: "info",
    7: "debug",
}

MAX_FACILITY = 23
MAX_SEVERITY = 7
MAX_PORT = 65535


class Transport(str, Enum):
    UDP = "udp"
    TCP = "tcp"

    @classmethod
    def parse(cls, value) -> "Transport":
        """Case-insensitive lookup. Raises ConfigurationError for anything else."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ConfigurationError(
                "transport must be 'udp' or 'tcp'", field="transport"
            ) from None

    @property
    def default_port(self) -> int:
        return 514 if self is Transport.UDP else 601


@dataclass(frozen=True)
class MessageSpec:
    message: str
    address: str = "localhost"
    port: int = 514
    transport: Transport | str = Transport.UDP
    facility: int = 16
    severity: int = 6
    hostname: str = ""
    program: str = ""

    @property
    def target(self) -> str:
        return f"{self.address}:{self.port}"

    @property
    def selector(self) -> str:
        """Facility/severity pair as a name, e.g. ``local0.info``."""
        facility = FACILITY_NAMES.get(self.facility, str(self.facility))
        severity = SEVERITY_NAMES.get(self.severity, str(self.severity))
        return f"{facility}.{severity}"


def validate(spec: MessageSpec) -> MessageSpec:
    """Check a MessageSpec and return it with its transport normalized.

    Checks run in a fixed order and the first failure is raised as a
    ConfigurationError naming the offending field.
    """
    if not spec.message:
        raise ConfigurationError("message is required", field="message")

    if not 0 <= spec.facility <= MAX_FACILITY:
        raise ConfigurationError(
            f"facility must be between 0 and {MAX_FACILITY}", field="facility"
        )

    if not 0 <= spec.severity <= MAX_SEVERITY:
        raise ConfigurationError(
            f"severity must be between 0 and {MAX_SEVERITY}", field="severity"
        )

    if not 1 <= spec.port <= MAX_PORT:
        raise ConfigurationError(
            f"port must be between 1 and {MAX_PORT}", field="port"
        )

    return replace(spec, transport=Transport.parse(spec.transport))
