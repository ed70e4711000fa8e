"""Tests for the formatter module."""

import re
import socket
from dataclasses import replace
from datetime import datetime

import pytest

from syslog_sender import formatter
from syslog_sender.formatter import (
    DEFAULT_PROGRAM,
    compute_priority,
    format_message,
    format_timestamp,
    resolve_hostname,
    resolve_program,
)

TIMESTAMP_RE = r"[A-Z][a-z]{2} [ 1-3]\d \d{2}:\d{2}:\d{2}"


class TestPriority:
    def test_all_pairs(self, spec):
        for facility in range(24):
            for severity in range(8):
                priority = compute_priority(facility, severity)
                assert 0 <= priority <= 191
                line = format_message(replace(spec, facility=facility, severity=severity))
                assert re.match(rf"^<{priority}>{TIMESTAMP_RE} ", line)

    @pytest.mark.parametrize("facility, severity, expected", [
        (0, 0, 0),
        (1, 6, 14),
        (16, 6, 134),
        (4, 1, 33),
        (23, 7, 191),
    ])
    def test_known_values(self, facility, severity, expected):
        assert compute_priority(facility, severity) == expected


class TestTimestamp:
    def test_single_digit_day_is_space_padded(self):
        assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "Jan  2 03:04:05"

    def test_two_digit_day(self):
        assert format_timestamp(datetime(2024, 12, 25, 23, 59, 0)) == "Dec 25 23:59:00"

    def test_defaults_to_now(self):
        assert re.fullmatch(TIMESTAMP_RE, format_timestamp())


class TestIdentifiers:
    def test_hostname_override_spaces(self):
        assert resolve_hostname("test host name") == "test-host-name"

    def test_hostname_keeps_outer_whitespace_as_hyphens(self):
        assert resolve_hostname(" edge ") == "-edge-"

    def test_hostname_from_system(self, monkeypatch):
        monkeypatch.setattr(socket, "gethostname", lambda: "build box")
        assert resolve_hostname() == "build-box"

    def test_hostname_lookup_failure(self, monkeypatch):
        def boom():
            raise OSError("no hostname")

        monkeypatch.setattr(socket, "gethostname", boom)
        assert resolve_hostname() == "localhost"

    def test_program_default(self):
        assert resolve_program() == DEFAULT_PROGRAM == "syslog-sender"

    def test_program_override_spaces(self):
        assert resolve_program("my custom app") == "my-custom-app"


class TestFormatMessage:
    def test_layout(self, spec):
        now = datetime(2024, 3, 7, 9, 15, 30)
        line = format_message(spec, now=now)
        assert line == "<134>Mar  7 09:15:30 test-host test-program: test message"

    def test_no_trailing_newline(self, spec):
        assert not format_message(spec).endswith("\n")

    def test_spaces_in_identifiers(self, spec):
        line = format_message(replace(
            spec, hostname="test host name", program="test program",
        ))
        positions = [line.index(part) for part in
                     ("<134>", "test-host-name", "test-program:", "test message")]
        assert positions == sorted(positions)

    def test_body_spaces_preserved(self, spec):
        line = format_message(replace(
            spec, message="test message with spaces",
            hostname="host with spaces", program="program with spaces",
        ))
        assert "host-with-spaces program-with-spaces: test message with spaces" in line

    def test_security_alert_priority(self, spec):
        line = format_message(replace(spec, facility=4, severity=1))
        assert line.startswith("<33>")

    def test_default_program_used(self, spec):
        line = format_message(replace(spec, program=""))
        assert " syslog-sender: test message" in line

    def test_system_hostname_used(self, spec, monkeypatch):
        monkeypatch.setattr(formatter.socket, "gethostname", lambda: "myhost")
        line = format_message(replace(spec, hostname=""))
        assert " myhost test-program: " in line
