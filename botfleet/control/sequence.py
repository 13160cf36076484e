"""
Timed stick press: move a stick, hold it, then return it to neutral.

The reset is sent unconditionally once the press is armed.  A failed set may
still have displaced the stick on the console, and a cancelled wait must not
leave it held, so the reset runs in a ``finally`` block that covers the set
send as well as the wait.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

from ..devices.device import Device
from .actions import DEFAULT_STICK_DELAY_MS, ResetStick, SetStick, validate
from .dispatch import Ack, DispatchEngine
from .errors import DispatchError

logger = logging.getLogger(__name__)


class PressState(Enum):
    ARMED = "armed"
    RESOLVED = "resolved"


@dataclass
class StepResult:
    """Outcome of one of the two sends of a stick press."""

    action: object
    ack: Optional[Ack] = None
    error: Optional[DispatchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class StickPressResult:
    device: Device
    set_step: StepResult
    reset_step: StepResult

    @property
    def ok(self) -> bool:
        return self.set_step.ok and self.reset_step.ok


# Called after each step with (state, step) so the front end can reply as
# the press progresses.
StepReporter = Callable[[PressState, StepResult], Awaitable[None]]


class StickPress:
    """Runs the set-wait-reset sequence on one device."""

    def __init__(
        self,
        engine: DispatchEngine,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.engine = engine
        self._sleep = sleep

    async def _send(self, device: Device, action) -> StepResult:
        try:
            ack = await self.engine.dispatch_to_one(device, action)
        except DispatchError as e:
            logger.warning(f"{device.address}: {action} failed: {e}")
            return StepResult(action, error=e)
        return StepResult(action, ack=ack)

    async def run(
        self,
        device: Device,
        action: SetStick,
        delay_ms: int = DEFAULT_STICK_DELAY_MS,
        report: Optional[StepReporter] = None,
    ) -> StickPressResult:
        """
        Press ``action`` on ``device`` for ``delay_ms`` milliseconds.

        ``delay_ms`` is an unsigned 16-bit count (0..65535); the range is
        enforced by the command front end.  Raises ``InvalidArgument`` before
        anything is sent if ``action`` is malformed.
        """
        validate(action)
        reset = ResetStick(action.stick)
        try:
            # armed from the moment the set is on the wire
            set_step = await self._send(device, action)
            if report is not None:
                await report(PressState.ARMED, set_step)
            await self._sleep(delay_ms / 1000)
        finally:
            reset_step = await self._send(device, reset)
        if report is not None:
            await report(PressState.RESOLVED, reset_step)
        return StickPressResult(device, set_step, reset_step)
