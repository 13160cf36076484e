"""
Environment-driven configuration for botfleet.

Values come from the process environment, optionally seeded from a ``.env``
file by ``python-dotenv``.  ``BOT_DEVICES`` lists the bots to manage, one
entry per bot in the form ``host[:port][/crlf|/raw][@capability]``, separated
by commas.  ``/crlf`` (the default) terminates every command with CRLF for
network bots; ``/raw`` sends commands unterminated for bots whose transport
frames each command itself.  For example::

    BOT_DEVICES=192.168.0.20, 192.168.0.21:6000/raw@trade
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple

from dotenv import load_dotenv

from .control.errors import ConfigError
from .devices.connection import DEFAULT_PORT
from .devices.device import REMOTE_CONTROL


@dataclass(frozen=True)
class DeviceSpec:
    host: str
    port: int = DEFAULT_PORT
    use_crlf: bool = True
    capability: str = REMOTE_CONTROL


@dataclass(frozen=True)
class FleetSettings:
    discord_token: Optional[str] = None
    command_prefix: str = "$"
    devices: Tuple[DeviceSpec, ...] = ()
    connect_timeout: float = 5.0
    remote_control_roles: Tuple[str, ...] = ()
    sudo_user_ids: frozenset = field(default_factory=frozenset)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, *, dotenv: bool = True) -> "FleetSettings":
        """
        Build settings from ``env`` (defaults to ``os.environ``).

        Raises
        ------
        ConfigError
            If a numeric value or a device entry is malformed.
        """
        if env is None:
            if dotenv:
                load_dotenv()
            env = os.environ
        default_port = _parse_int("BOT_PORT", env.get("BOT_PORT"), DEFAULT_PORT)
        return cls(
            discord_token=env.get("DISCORD_TOKEN") or None,
            command_prefix=env.get("COMMAND_PREFIX", "$") or "$",
            devices=tuple(parse_devices(env.get("BOT_DEVICES", ""), default_port)),
            connect_timeout=_parse_float("BOT_CONNECT_TIMEOUT", env.get("BOT_CONNECT_TIMEOUT"), 5.0),
            remote_control_roles=tuple(_split(env.get("REMOTE_CONTROL_ROLES", ""))),
            sudo_user_ids=frozenset(
                _parse_int("SUDO_USER_IDS", item, 0) for item in _split(env.get("SUDO_USER_IDS", ""))
            ),
        )


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_int(key: str, value: Optional[str], default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {value!r}") from None


def _parse_float(key: str, value: Optional[str], default: float) -> float:
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigError(f"{key} must be a number, got {value!r}") from None


def parse_device(entry: str, default_port: int = DEFAULT_PORT) -> DeviceSpec:
    """Parse one ``host[:port][/crlf|/raw][@capability]`` entry."""
    rest, _, capability = entry.partition("@")
    rest, _, ending = rest.partition("/")
    host, _, port = rest.partition(":")
    host = host.strip()
    if not host:
        raise ConfigError(f"Device entry {entry!r} has no host")
    ending = ending.strip().lower() or "crlf"
    if ending not in ("crlf", "raw"):
        raise ConfigError(f"Device entry {entry!r}: line ending must be 'crlf' or 'raw'")
    return DeviceSpec(
        host=host,
        port=_parse_int("BOT_DEVICES", port, default_port),
        use_crlf=ending == "crlf",
        capability=capability.strip() or REMOTE_CONTROL,
    )


def parse_devices(value: str, default_port: int = DEFAULT_PORT) -> List[DeviceSpec]:
    """Parse a ``BOT_DEVICES`` list.  Hosts must be unique; they identify bots."""
    specs: List[DeviceSpec] = []
    seen = set()
    for entry in _split(value):
        spec = parse_device(entry, default_port)
        if spec.host in seen:
            raise ConfigError(f"BOT_DEVICES lists {spec.host} more than once")
        seen.add(spec.host)
        specs.append(spec)
    return specs
