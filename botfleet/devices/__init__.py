"""Device model, registry and transport for botfleet.

``DeviceRegistry`` tracks the known bots and their running state;
``SocketConnection`` delivers payloads to a sys-botbase host over TCP.
"""

from .connection import SocketConnection  # noqa: F401
from .device import REMOTE_CONTROL, Connection, Device  # noqa: F401
from .registry import DeviceRegistry  # noqa: F401

__all__ = ["Connection", "Device", "DeviceRegistry", "REMOTE_CONTROL", "SocketConnection"]
