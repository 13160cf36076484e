"""
botfleet package.

Remote control for a fleet of sys-botbase automation bots.  It contains the
device registry and transport, the command dispatch core (target resolution,
encoding, fleet broadcast, timed stick presses) and a Discord front end that
exposes the commands to chat users.
"""

__all__ = [
    "control",
    "devices",
    "discord_bot",
    "utils",
]
