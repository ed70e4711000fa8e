"""Shared pytest fixtures for the syslog-sender test suite."""

import socket

import pytest

from syslog_sender.message import MessageSpec


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep SYSLOG_* variables from the developer's shell out of the tests."""
    for name in ("SYSLOG_DEBUG", "SYSLOG_CONFIG", "SYSLOG_ADDRESS", "SYSLOG_PORT",
                 "SYSLOG_TRANSPORT", "SYSLOG_FACILITY", "SYSLOG_SEVERITY",
                 "SYSLOG_HOSTNAME", "SYSLOG_PROGRAM", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def spec() -> MessageSpec:
    return MessageSpec(
        message="test message",
        address="127.0.0.1",
        port=514,
        transport="udp",
        facility=16,
        severity=6,
        hostname="test-host",
        program="test-program",
    )


@pytest.fixture()
def udp_receiver():
    """A bound UDP socket on loopback. Yields (sock, port)."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5.0)
    try:
        yield sock, sock.getsockname()[1]
    finally:
        sock.close()


@pytest.fixture()
def tcp_listener():
    """A listening TCP socket on loopback. Yields (sock, port)."""
    srv = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    srv.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    srv.bind(("127.0.0.1", 0))
    srv.listen(1)
    srv.settimeout(5.0)
    try:
        yield srv, srv.getsockname()[1]
    finally:
        srv.close()


@pytest.fixture()
def closed_port() -> int:
    """A loopback port with nothing listening on it."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port
