"""Configuration loading from CLI args, env vars, and an optional YAML file.

Priority, lowest to highest: dataclass defaults, YAML file, environment
variables, command-line flags.
"""

import logging
import os
import re
from dataclasses import dataclass

import yaml

from syslog_sender.errors import ConfigurationError
from syslog_sender.message import MessageSpec, Transport

logger = logging.getLogger(__name__)

ENV_PREFIX = "SYSLOG_"
FIELDS = ("address", "port", "transport", "facility", "severity",
          "message", "hostname", "program")
INT_FIELDS = ("port", "facility", "severity")
INT_RE = re.compile(r"^\s*[+-]?\d+\s*$")


@dataclass(frozen=True)
class SenderConfig:
    address: str = "localhost"
    port: int = 514
    transport: str = "udp"
    facility: int = 16
    severity: int = 6
    message: str = ""
    hostname: str = ""
    program: str = ""
    port_explicit: bool = False

    def to_message_spec(self) -> MessageSpec:
        return MessageSpec(
            message=self.message,
            address=self.address,
            port=self.port,
            transport=self.transport,
            facility=self.facility,
            severity=self.severity,
            hostname=self.hostname,
            program=self.program,
        )


def _to_int(value, field: str) -> int:
    # YAML booleans are ints to Python
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and INT_RE.match(value):
        return int(value)
    raise ConfigurationError(f"{field} must be an integer, got {value!r}", field=field)


def _to_str(value, field: str) -> str:
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return str(value)
    raise ConfigurationError(f"{field} must be a string, got {value!r}", field=field)


def load_yaml_config(path: str | None) -> dict:
    """Load option defaults from a YAML mapping. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"invalid YAML in {path}: {e}", field="config") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"cannot read {path}: {e}", field="config") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping", field="config")
    unknown = sorted(set(data) - set(FIELDS))
    if unknown:
        raise ConfigurationError(
            f"unknown option(s) in {path}: {', '.join(map(str, unknown))}",
            field="config",
        )
    logger.info("Loaded YAML config from %s", path)
    return data


def load_env_config() -> dict:
    """Collect SYSLOG_<FIELD> overrides that are present in the environment."""
    return {
        name: os.environ[ENV_PREFIX + name.upper()]
        for name in FIELDS
        if name != "message" and ENV_PREFIX + name.upper() in os.environ
    }


def resolve_port(transport: str, port: int, port_explicit: bool) -> int:
    """Apply the TCP default port when the caller never chose a port."""
    if port_explicit:
        return port
    if str(transport).lower() == Transport.TCP.value:
        return Transport.TCP.default_port
    return port


def load_config(cli_args, yaml_data: dict | None = None) -> SenderConfig:
    """Build SenderConfig from parsed CLI args, env vars, and YAML data."""
    values: dict = {}
    for layer in (yaml_data or {}, load_env_config(), vars(cli_args)):
        values.update(
            (name, value) for name, value in layer.items()
            if name in FIELDS and value is not None
        )

    port_explicit = "port" in values
    for name in INT_FIELDS:
        if name in values:
            values[name] = _to_int(values[name], name)
    for name in FIELDS:
        if name in values and name not in INT_FIELDS:
            values[name] = _to_str(values[name], name)

    transport = values.get("transport", SenderConfig.transport)
    port = values.get("port", SenderConfig.port)
    values["port"] = resolve_port(transport, port, port_explicit)

    return SenderConfig(port_explicit=port_explicit, **values)
