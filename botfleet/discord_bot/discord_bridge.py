"""
Discord bot exposing the remote-control commands.

The bot is a ``discord.ext.commands.Bot`` that carries the shared
``RemoteControl`` service and the settings used by permission checks, and
loads :class:`RemoteControlCog` on startup.  ``run_bot`` blocks, so the
controller runs it on its own thread.
"""
from __future__ import annotations

import logging

import discord
from discord.ext import commands

from ..config import FleetSettings
from ..control.remote import RemoteControl
from .remote_control import RemoteControlCog

logger = logging.getLogger(__name__)


class DiscordBridge(commands.Bot):
    """
    Discord client forwarding chat commands to the bot fleet.

    Parameters
    ----------
    remote:
        The ``RemoteControl`` service commands are executed against.
    settings:
        Loaded configuration; provides the token, command prefix, sudo user
        ids and remote-control role names.
    """

    def __init__(self, remote: RemoteControl, settings: FleetSettings) -> None:
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(command_prefix=settings.command_prefix, intents=intents)
        self.remote = remote
        self.settings = settings

    async def setup_hook(self) -> None:
        await self.add_cog(RemoteControlCog(self))

    async def on_ready(self) -> None:
        logger.info(f"Discord bot ready: logged in as {self.user} (ID: {self.user.id})")

    async def close(self) -> None:
        for device in self.remote.registry.list_devices():
            try:
                await device.connection.close()
            except Exception as e:
                logger.error(f"Failed to close connection to {device.address}: {e}", exc_info=True)
        await super().close()

    def run_bot(self) -> None:
        """Start the Discord bot event loop.  This method blocks until closed."""
        try:
            logger.info("Starting Discord bot…")
            # setup_log_system already gave the "discord" logger a handler.
            self.run(self.settings.discord_token, log_handler=None)
        except Exception as e:
            logger.error(f"Error while running Discord bot: {e}", exc_info=True)
