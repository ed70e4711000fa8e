"""UDP and TCP delivery of a rendered syslog line, one attempt and no retries."""

import logging
import socket

from syslog_sender.errors import TransportError
from syslog_sender.message import MessageSpec, Transport

logger = logging.getLogger(__name__)

WRITE_TIMEOUT = 5.0
CONNECT_TIMEOUT = 10.0


def send_udp(line: str, host: str, port: int,
             write_timeout: float = WRITE_TIMEOUT):
    """Send the line as a single datagram with no trailing newline.

    Returns once the local write completes; nothing is read back, so a
    silent or missing collector is not an error.
    """
    target = f"{host}:{port}"
    try:
        family, socktype, proto, _, sockaddr = socket.getaddrinfo(
            host, port, 0, socket.SOCK_DGRAM
        )[0]
    except OSError as e:
        raise TransportError("resolve", target, e) from e
    logger.debug("Resolved %s to %s", target, sockaddr)

    with socket.socket(family, socktype, proto) as sock:
        try:
            sock.bind(("", 0))
            sock.connect(sockaddr)
        except OSError as e:
            raise TransportError("connect", target, e) from e
        logger.debug("UDP socket %s -> %s", sock.getsockname(), sockaddr)

        payload = line.encode("utf-8")
        sock.settimeout(write_timeout)
        try:
            sock.send(payload)
        except OSError as e:
            raise TransportError("write", target, e) from e
    logger.debug("Sent %d bytes to %s via UDP", len(payload), target)


def send_tcp(line: str, host: str, port: int,
             connect_timeout: float = CONNECT_TIMEOUT,
             write_timeout: float = WRITE_TIMEOUT):
    """Open a connection, write the line plus a newline delimiter, close."""
    target = f"{host}:{port}"
    try:
        sock = socket.create_connection((host, port), timeout=connect_timeout)
    except socket.gaierror as e:
        raise TransportError("resolve", target, e) from e
    except OSError as e:
        raise TransportError("connect", target, e) from e
    logger.debug("Connected to %s", target)

    payload = (line + "\n").encode("utf-8")
    with sock:
        sock.settimeout(write_timeout)
        try:
            sock.sendall(payload)
        except OSError as e:
            raise TransportError("write", target, e) from e
    logger.debug("Sent %d bytes to %s via TCP", len(payload), target)


SENDERS = {
    Transport.UDP: send_udp,
    Transport.TCP: send_tcp,
}


def send(line: str, spec: MessageSpec):
    """Deliver a rendered line using the sender for the spec's transport."""
    sender = SENDERS[Transport.parse(spec.transport)]
    sender(line, spec.address, spec.port)
