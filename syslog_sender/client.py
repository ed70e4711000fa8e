"""SyslogClient — validate, format and send one message."""

import logging
import os

from syslog_sender import formatter, transport
from syslog_sender.message import MessageSpec, validate

logger = logging.getLogger(__name__)


def debug_enabled() -> bool:
    return os.environ.get("SYSLOG_DEBUG", "") == "1"


class SyslogClient:
    """Sends a single MessageSpec to its collector.

    With the diagnostic toggle on (``SYSLOG_DEBUG=1`` unless ``debug`` is
    passed explicitly) the rendered line and the target are echoed to
    stdout before sending.
    """

    def __init__(self, spec: MessageSpec, debug: bool | None = None):
        self._spec = spec
        self._debug = debug_enabled() if debug is None else debug

    @property
    def spec(self) -> MessageSpec:
        return self._spec

    @property
    def debug(self) -> bool:
        return self._debug

    def format_message(self) -> str:
        """Validate the spec and return the rendered line without sending it."""
        self._spec = validate(self._spec)
        return formatter.format_message(self._spec)

    def send(self) -> str:
        """Validate, render and transmit. Returns the line that was sent."""
        line = self.format_message()
        spec = self._spec

        if self._debug:
            print(f"Debug: Sending message: {line}")
            print(f"Debug: Target: {spec.target} ({spec.transport.value})")

        logger.debug("Sending %s message to %s via %s",
                     spec.selector, spec.target, spec.transport.value)
        transport.send(line, spec)
        return line
