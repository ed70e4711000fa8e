"""Render a MessageSpec into a single BSD syslog line.

Line layout: ``<PRI>Mmm dd hh:mm:ss HOSTNAME PROGRAM: MESSAGE``
"""

import socket
from datetime import datetime

from syslog_sender.message import MessageSpec

DEFAULT_PROGRAM = "syslog-sender"
FALLBACK_HOSTNAME = "localhost"

# Fixed table so the timestamp does not depend on the process locale.
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def compute_priority(facility: int, severity: int) -> int:
    return facility * 8 + severity


def format_timestamp(now: datetime | None = None) -> str:
    """Local wall-clock time as ``Mmm dd hh:mm:ss`` with a space-padded day."""
    if now is None:
        now = datetime.now()
    return f"{MONTHS[now.month - 1]} {now.day:>2} {now:%H:%M:%S}"


def _no_spaces(value: str) -> str:
    return value.replace(" ", "-")


def resolve_hostname(override: str = "") -> str:
    """Override if given, else the system hostname, else ``localhost``."""
    if override:
        return _no_spaces(override)
    try:
        hostname = socket.gethostname()
    except OSError:
        hostname = ""
    return _no_spaces(hostname or FALLBACK_HOSTNAME)


def resolve_program(override: str = "") -> str:
    return _no_spaces(override or DEFAULT_PROGRAM)


def format_message(spec: MessageSpec, now: datetime | None = None) -> str:
    """Build the wire line for a validated spec. No trailing newline."""
    priority = compute_priority(spec.facility, spec.severity)
    return "<%d>%s %s %s: %s" % (
        priority,
        format_timestamp(now),
        resolve_hostname(spec.hostname),
        resolve_program(spec.program),
        spec.message,
    )
