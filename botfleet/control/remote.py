"""
Remote-control operations offered to the chat front end.

``RemoteControl`` ties target resolution, dispatch and the stick press
together.  Each method accepts raw user values (button and stick names as
strings) and raises a :class:`~botfleet.control.errors.BotFleetError` for
every failure the user should hear about.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..devices.device import REMOTE_CONTROL
from ..devices.registry import DeviceRegistry
from .actions import (
    DEFAULT_STICK_DELAY_MS,
    ClickButton,
    ScreenState,
    SetScreen,
    SetStick,
    parse_button,
    parse_stick,
)
from .dispatch import Ack, DispatchEngine, FleetReport
from .resolver import DeviceResolver
from .sequence import StepReporter, StickPress, StickPressResult

logger = logging.getLogger(__name__)


class RemoteControl:
    """Facade over resolver, engine and stick press for one registry."""

    def __init__(self, registry: DeviceRegistry, *, role: str = REMOTE_CONTROL, stick_press: Optional[StickPress] = None) -> None:
        self.registry = registry
        self.role = role
        self.resolver = DeviceResolver(registry)
        self.engine = DispatchEngine(registry)
        self.stick_press = stick_press or StickPress(self.engine)

    async def click_button(self, button: object, target: Optional[str] = None) -> Ack:
        """Click ``button`` on ``target`` or on the first remote-control bot."""
        action = ClickButton(parse_button(button))
        device = self.resolver.require(target, self.role)
        return await self.engine.dispatch_to_one(device, action)

    async def set_stick(
        self,
        stick: object,
        x: int,
        y: int,
        delay_ms: int = DEFAULT_STICK_DELAY_MS,
        target: Optional[str] = None,
        report: Optional[StepReporter] = None,
    ) -> StickPressResult:
        """Hold ``stick`` at ``(x, y)`` for ``delay_ms`` then recentre it."""
        action = SetStick(parse_stick(stick), x, y)
        device = self.resolver.require(target, self.role)
        return await self.stick_press.run(device, action, delay_ms, report)

    async def set_screen(self, on: bool, target: Optional[str] = None) -> Ack:
        """
        Switch the screen of one bot on or off.

        Without a target the command goes to the running bot; if none runs
        the fallback address is looked up and normally misses.
        """
        address = target or self.resolver.running_address()
        device = self.resolver.require(address, self.role)
        return await self.engine.dispatch_to_one(device, SetScreen(ScreenState.from_bool(on)))

    async def set_screen_for_all(self, on: bool) -> FleetReport:
        """Switch the screen of every known bot; raises ``EmptyFleet`` if none."""
        return await self.engine.dispatch_to_all(SetScreen(ScreenState.from_bool(on)))
