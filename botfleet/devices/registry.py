"""
Thread-safe registry of known devices.

The Discord bot runs on its own thread (see ``FleetController``) while the
controller may start or stop bots from another, so every accessor takes a
lock and lookups return snapshots rather than the live list.
"""
from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional, Tuple

from .device import Device

logger = logging.getLogger(__name__)


class DeviceRegistry:
    """Ordered collection of devices keyed by address."""

    def __init__(self, devices: Iterable[Device] = ()) -> None:
        self._lock = threading.Lock()
        self._devices: List[Device] = []
        for device in devices:
            self.add(device)

    def __len__(self) -> int:
        with self._lock:
            return len(self._devices)

    def add(self, device: Device) -> None:
        """Register ``device``; addresses must be unique."""
        with self._lock:
            if any(d.address == device.address for d in self._devices):
                raise ValueError(f"device {device.address} is already registered")
            self._devices.append(device)
        logger.debug(f"Registered bot {device.address} ({device.capability})")

    def remove(self, address: str) -> Optional[Device]:
        with self._lock:
            for i, device in enumerate(self._devices):
                if device.address == address:
                    del self._devices[i]
                    logger.debug(f"Removed bot {address}")
                    return device
        return None

    def set_running(self, address: str, running: bool) -> bool:
        """Flip the running flag of ``address``.  Returns False if unknown."""
        with self._lock:
            for device in self._devices:
                if device.address == address:
                    device.is_running = running
                    return True
        return False

    def list_devices(self) -> Tuple[Device, ...]:
        with self._lock:
            return tuple(self._devices)

    def find_by_address(self, address: str) -> Optional[Device]:
        with self._lock:
            return next((d for d in self._devices if d.address == address), None)

    def find_first_running(self) -> Optional[Device]:
        with self._lock:
            return next((d for d in self._devices if d.is_running), None)

    def find_first_with_capability(self, role: str) -> Optional[Device]:
        with self._lock:
            return next((d for d in self._devices if d.capability == role), None)
