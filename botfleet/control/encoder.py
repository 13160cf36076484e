"""
Encoding of logical actions into sys-botbase text commands.

The encoder is a pure function.  It assumes a validated action; checking
argument domains is the dispatch engine's job.
"""
from __future__ import annotations

from .actions import Action, ClickButton, ResetStick, SetScreen, SetStick

CRLF = "\r\n"


def _command_text(action: Action) -> str:
    if isinstance(action, ClickButton):
        return f"click {action.button.value}"
    if isinstance(action, SetScreen):
        return f"setScreen{action.state.value}"
    if isinstance(action, SetStick):
        return f"setStick {action.stick.value} {action.x} {action.y}"
    if isinstance(action, ResetStick):
        # neutral position
        return f"setStick {action.stick.value} 0 0"
    raise TypeError(f"cannot encode {action!r}")


def encode(action: Action, use_crlf: bool) -> bytes:
    """
    Return the transport payload for ``action``.

    Network bots expect each command terminated by CRLF.  USB bots frame
    commands with a length prefix at the transport layer, so their payload is
    left unterminated.
    """
    text = _command_text(action)
    if use_crlf:
        text += CRLF
    return text.encode("ascii")
