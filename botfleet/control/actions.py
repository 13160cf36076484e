"""
Logical remote-control actions and their argument domains.

Actions are small immutable dataclasses.  They may be built from raw user
input (strings, ints) and are validated separately by :func:`validate`, so an
action carrying an undeclared button or an out-of-range axis never reaches a
device connection.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import InvalidArgument

# Signed 16-bit axis range used by sys-botbase ``setStick``
AXIS_MIN = -0x8000
AXIS_MAX = 0x7FFF

# Stick press delay is an unsigned 16-bit millisecond count
DEFAULT_STICK_DELAY_MS = 1_000
MAX_STICK_DELAY_MS = 0xFFFF


class SwitchButton(str, Enum):
    A = "A"
    B = "B"
    X = "X"
    Y = "Y"
    RSTICK = "RSTICK"
    LSTICK = "LSTICK"
    L = "L"
    R = "R"
    ZL = "ZL"
    ZR = "ZR"
    PLUS = "PLUS"
    MINUS = "MINUS"
    DUP = "DUP"
    DDOWN = "DDOWN"
    DLEFT = "DLEFT"
    DRIGHT = "DRIGHT"
    HOME = "HOME"
    CAPTURE = "CAPTURE"


class SwitchStick(str, Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class ScreenState(str, Enum):
    ON = "On"
    OFF = "Off"

    @classmethod
    def from_bool(cls, on: bool) -> "ScreenState":
        return cls.ON if on else cls.OFF


@dataclass(frozen=True)
class ClickButton:
    button: SwitchButton


@dataclass(frozen=True)
class SetScreen:
    state: ScreenState


@dataclass(frozen=True)
class SetStick:
    stick: SwitchStick
    x: int
    y: int


@dataclass(frozen=True)
class ResetStick:
    stick: SwitchStick


Action = Union[ClickButton, SetScreen, SetStick, ResetStick]


def parse_button(value: object) -> SwitchButton:
    """Return the ``SwitchButton`` named by ``value`` (case-insensitive)."""
    if isinstance(value, SwitchButton):
        return value
    try:
        return SwitchButton(str(value).upper())
    except ValueError:
        raise InvalidArgument(f"Unknown button value: {value}") from None


def parse_stick(value: object) -> SwitchStick:
    """Return the ``SwitchStick`` named by ``value`` (case-insensitive)."""
    if isinstance(value, SwitchStick):
        return value
    try:
        return SwitchStick(str(value).upper())
    except ValueError:
        raise InvalidArgument(f"Unknown stick: {value}") from None


def _check_axis(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"Stick {name} must be an integer, got {value!r}")
    if not AXIS_MIN <= value <= AXIS_MAX:
        raise InvalidArgument(f"Stick {name} must be within {AXIS_MIN}..{AXIS_MAX}, got {value}")


def validate(action: Action) -> None:
    """
    Check that every field of ``action`` lies within its declared domain.

    Raises
    ------
    InvalidArgument
        If an enum field holds an undeclared value, an axis is outside the
        signed 16-bit range, or ``action`` is not an action at all.
    """
    if isinstance(action, ClickButton):
        if not isinstance(action.button, SwitchButton):
            raise InvalidArgument(f"Unknown button value: {action.button}")
    elif isinstance(action, SetScreen):
        if not isinstance(action.state, ScreenState):
            raise InvalidArgument(f"Unknown screen state: {action.state}")
    elif isinstance(action, SetStick):
        if not isinstance(action.stick, SwitchStick):
            raise InvalidArgument(f"Unknown stick: {action.stick}")
        _check_axis("x", action.x)
        _check_axis("y", action.y)
    elif isinstance(action, ResetStick):
        if not isinstance(action.stick, SwitchStick):
            raise InvalidArgument(f"Unknown stick: {action.stick}")
    else:
        raise InvalidArgument(f"Unsupported action: {action!r}")
