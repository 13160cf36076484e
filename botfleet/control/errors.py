"""
Exception hierarchy for the remote-control subsystem.

Every failure raised by the control layer derives from ``BotFleetError`` so
the chat front end can turn it into a reply with a single ``except`` clause.
Per-send failures additionally derive from ``DispatchError``; those are the
only errors a fleet broadcast absorbs per device.
"""
from __future__ import annotations


class BotFleetError(Exception):
    """Base class for all errors raised by botfleet."""


class ConfigError(BotFleetError):
    """A configuration value could not be parsed."""


class DeviceNotFound(BotFleetError):
    """No device satisfies the requested selection."""

    def __init__(self, address: str | None = None) -> None:
        self.address = address
        if address is None:
            super().__init__("No bot is available to execute the command.")
        else:
            super().__init__(f"No bot has that IP address ({address}).")


class EmptyFleet(BotFleetError):
    """A broadcast was attempted while the registry holds no devices."""

    def __init__(self) -> None:
        super().__init__("No bots are currently connected.")


class DispatchError(BotFleetError):
    """A single send to a single device did not happen or did not succeed."""


class InvalidArgument(DispatchError, ValueError):
    """An action argument lies outside its declared domain."""


class DeviceUnavailable(DispatchError):
    """The target device is not running."""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Bot {address} is not running.")


class TransportError(DispatchError):
    """The connection layer failed to deliver a payload."""
