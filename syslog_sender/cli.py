"""syslog-sender — send a syslog message to a remote server."""

import logging
import os
import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from syslog_sender import APP_NAME, APP_PROJECT, APP_VERSION
from syslog_sender.client import SyslogClient
from syslog_sender.config import load_config, load_yaml_config
from syslog_sender.errors import ConfigurationError, TransportError
from syslog_sender.message import FACILITY_NAMES, SEVERITY_NAMES

logger = logging.getLogger(__name__)

EXAMPLES = """\
Examples:
  {prog} --message "Application started"
  {prog} --address 192.168.1.100 --transport tcp --message "TCP message"
  {prog} --facility 4 --severity 1 --message "Security alert"
  {prog} --hostname "custom-host" --message "Message with custom hostname"
  {prog} --program "my-app" --message "Message with custom program"
"""


def _reference() -> str:
    facilities = ", ".join(f"{code}={name}" for code, name in FACILITY_NAMES.items())
    severities = ", ".join(f"{code}={name}" for code, name in SEVERITY_NAMES.items())
    return (
        f"Facilities (0-23): {facilities}\n"
        f"Severities (0-7): {severities}\n"
        "\nSet SYSLOG_DEBUG=1 to print the rendered message before sending."
    )


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser.

    Value flags default to None so config loading can tell an explicit
    ``--port 514`` apart from the built-in default.
    """
    parser = ArgumentParser(
        prog=APP_NAME,
        description=f"Syslog Sender v{APP_VERSION} - Send syslog messages to remote servers",
        epilog=EXAMPLES.format(prog=APP_NAME) + "\n" + _reference(),
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-a", "--address",
        help="Syslog server address (default: localhost)",
    )
    parser.add_argument(
        "-p", "--port", type=int,
        help="Syslog server port (default: 514, or 601 with --transport tcp)",
    )
    parser.add_argument(
        "-t", "--transport",
        help="Transport protocol, udp or tcp (default: udp)",
    )
    parser.add_argument(
        "-f", "--facility", type=int,
        help="Syslog facility 0-23 (default: 16)",
    )
    parser.add_argument(
        "-s", "--severity", type=int,
        help="Syslog severity 0-7 (default: 6)",
    )
    parser.add_argument(
        "-m", "--message",
        help="Message to send (required)",
    )
    parser.add_argument(
        "--hostname",
        help="Custom hostname (default: system hostname)",
    )
    parser.add_argument(
        "--program",
        help="Custom program/tag name (default: syslog-sender)",
    )
    parser.add_argument(
        "--config",
        help="YAML file with option defaults (env: SYSLOG_CONFIG)",
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"{APP_NAME} version {APP_VERSION}\nProject: {APP_PROJECT}",
        help="Show version information and exit",
    )
    return parser


def _setup_logging():
    level = logging.getLevelName(os.environ.get("LOG_LEVEL", "WARNING").upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging()

    try:
        yaml_data = load_yaml_config(args.config or os.environ.get("SYSLOG_CONFIG"))
        config = load_config(args, yaml_data)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.message:
        print("Error: message is required\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    client = SyslogClient(config.to_message_spec())
    try:
        client.send()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except TransportError as e:
        logger.debug("Send failed in %s phase", e.phase)
        print(f"Error: failed to send syslog message: {e}", file=sys.stderr)
        return 1

    if client.debug:
        spec = client.spec
        print(f"Message sent successfully to {spec.target} via {spec.transport.value.upper()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
