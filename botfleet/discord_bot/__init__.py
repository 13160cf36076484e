"""Discord front end for botfleet.

The Discord integration exposes the remote-control commands (``click``,
``setStick`` and the screen commands) to chat users and relays the outcome
of each command back to the channel.
"""

from .discord_bridge import DiscordBridge  # noqa: F401
from .remote_control import RemoteControlCog  # noqa: F401

__all__ = ["DiscordBridge", "RemoteControlCog"]
