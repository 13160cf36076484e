"""
Target selection for remote-control commands.

Commands either name a bot by address or leave the target open.  An open
target resolves to the first bot carrying the required role.  A named
address that matches nothing falls back to the only running bot, which
covers users who mistype the address of a single-bot deployment.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..devices.device import REMOTE_CONTROL, Device
from ..devices.registry import DeviceRegistry
from .errors import DeviceNotFound

logger = logging.getLogger(__name__)

# Address reported when a command needs one and no bot is running
DEFAULT_FALLBACK_ADDRESS = "192.168.1.1"


class DeviceResolver:
    """Read-only view over a :class:`DeviceRegistry` that picks targets."""

    def __init__(self, registry: DeviceRegistry) -> None:
        self.registry = registry

    def resolve(self, address: Optional[str] = None, role: str = REMOTE_CONTROL) -> Optional[Device]:
        """
        Return the device selected by ``address`` or ``role``, or ``None``.

        Parameters
        ----------
        address:
            Exact device address.  When absent, the first device whose
            capability equals ``role`` is chosen in registry order.
        role:
            Capability tag required for role-based selection.
        """
        if address is None:
            return self.registry.find_first_with_capability(role)
        device = self.registry.find_by_address(address)
        if device is not None:
            return device
        running = [d for d in self.registry.list_devices() if d.is_running]
        if len(running) == 1:
            logger.info(f"No bot at {address}; falling back to the only running bot {running[0].address}")
            return running[0]
        return None

    def require(self, address: Optional[str] = None, role: str = REMOTE_CONTROL) -> Device:
        """Like :meth:`resolve` but raises :class:`DeviceNotFound` on a miss."""
        device = self.resolve(address, role)
        if device is None:
            raise DeviceNotFound(address)
        return device

    def running_address(self) -> str:
        """Address of the first running device, or ``DEFAULT_FALLBACK_ADDRESS``."""
        device = self.registry.find_first_running()
        if device is None:
            return DEFAULT_FALLBACK_ADDRESS
        return device.address
