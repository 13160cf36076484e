"""Command dispatch core for botfleet.

This package turns logical remote-control actions into sys-botbase commands
and delivers them: ``DeviceResolver`` picks the target, ``DispatchEngine``
sends to one bot or the whole fleet, ``StickPress`` runs the timed
set-and-reset stick sequence and ``RemoteControl`` exposes the operations
used by the chat front end.
"""

from .actions import (  # noqa: F401
    ClickButton,
    ResetStick,
    ScreenState,
    SetScreen,
    SetStick,
    SwitchButton,
    SwitchStick,
)
from .dispatch import Ack, DispatchEngine, DispatchOutcome, FleetReport  # noqa: F401
from .encoder import encode  # noqa: F401
from .errors import (  # noqa: F401
    BotFleetError,
    DeviceNotFound,
    DeviceUnavailable,
    DispatchError,
    EmptyFleet,
    InvalidArgument,
    TransportError,
)
from .remote import RemoteControl  # noqa: F401
from .resolver import DEFAULT_FALLBACK_ADDRESS, DeviceResolver  # noqa: F401
from .sequence import PressState, StickPress, StickPressResult  # noqa: F401

__all__ = [
    "Ack",
    "BotFleetError",
    "ClickButton",
    "DEFAULT_FALLBACK_ADDRESS",
    "DeviceNotFound",
    "DeviceResolver",
    "DeviceUnavailable",
    "DispatchEngine",
    "DispatchError",
    "DispatchOutcome",
    "EmptyFleet",
    "FleetReport",
    "InvalidArgument",
    "PressState",
    "RemoteControl",
    "ResetStick",
    "ScreenState",
    "SetScreen",
    "SetStick",
    "StickPress",
    "StickPressResult",
    "SwitchButton",
    "SwitchStick",
    "TransportError",
    "encode",
]
