"""
Dispatch of encoded actions to one device or to the whole fleet.

``dispatch_to_one`` performs exactly one transmission and propagates any
failure.  ``dispatch_to_all`` walks the registry sequentially and records a
per-device :class:`DispatchOutcome`, so one unreachable bot never prevents
the rest of the fleet from receiving the command.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..devices.device import Device
from ..devices.registry import DeviceRegistry
from .actions import Action, validate
from .encoder import encode
from .errors import DeviceUnavailable, DispatchError, EmptyFleet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ack:
    """Acknowledgement that ``action`` was handed to ``device``'s transport."""

    device: Device
    action: Action
    payload: bytes


@dataclass(frozen=True)
class DispatchOutcome:
    """Result of one send within a broadcast."""

    device: Device
    error: Optional[DispatchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class FleetReport:
    """Aggregate of a broadcast, one outcome per device in registry order."""

    action: Action
    outcomes: List[DispatchOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def success_count(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def failures(self) -> List[DispatchOutcome]:
        return [o for o in self.outcomes if not o.ok]


class DispatchEngine:
    """Sends validated, encoded actions over device connections."""

    def __init__(self, registry: DeviceRegistry) -> None:
        self.registry = registry

    async def dispatch_to_one(self, device: Device, action: Action) -> Ack:
        """
        Validate, encode and send ``action`` to ``device``.

        Raises
        ------
        InvalidArgument
            ``action`` has a field outside its domain.  Nothing is sent.
        DeviceUnavailable
            ``device`` is not running.  Nothing is sent.
        TransportError
            The connection failed to deliver the payload.
        """
        validate(action)
        if not device.is_running:
            raise DeviceUnavailable(device.address)
        payload = encode(action, device.use_crlf)
        logger.debug(f"Sending {payload!r} to {device.address}")
        await device.connection.send(payload)
        logger.info(f"{device.name} performed {action}")
        return Ack(device, action, payload)

    async def dispatch_to_all(self, action: Action) -> FleetReport:
        """
        Send ``action`` to every known device, one after the other.

        Raises
        ------
        EmptyFleet
            The registry holds no devices.
        InvalidArgument
            ``action`` is malformed; checked once before any device is touched.
        """
        devices = self.registry.list_devices()
        if not devices:
            raise EmptyFleet()
        validate(action)
        report = FleetReport(action)
        for device in devices:
            try:
                await self.dispatch_to_one(device, action)
            except DispatchError as e:
                logger.warning(f"{device.address}: {action} failed: {e}")
                report.outcomes.append(DispatchOutcome(device, e))
            else:
                report.outcomes.append(DispatchOutcome(device))
        logger.info(f"{action} succeeded on {report.success_count} of {report.total} bots")
        return report
