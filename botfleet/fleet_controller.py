"""
Central controller for botfleet.

This module wires configuration, the device registry, the remote-control
service and the Discord front end together.  The ``FleetController`` class
exposes methods to start/stop bots and to start/stop the Discord bridge.
"""
from __future__ import annotations

import asyncio
import logging
import threading
from typing import Optional

from .config import FleetSettings
from .control.remote import RemoteControl
from .devices.connection import SocketConnection
from .devices.device import Device
from .devices.registry import DeviceRegistry


logger = logging.getLogger(__name__)


class FleetController:
    """Coordinates all subsystems of botfleet."""

    def __init__(self, settings: Optional[FleetSettings] = None) -> None:
        # Reads .env into the environment before parsing
        self.settings = settings or FleetSettings.from_env()

        self.registry = DeviceRegistry()
        for spec in self.settings.devices:
            connection = SocketConnection(spec.host, spec.port, timeout=self.settings.connect_timeout)
            self.registry.add(
                Device(
                    address=spec.host,
                    connection=connection,
                    capability=spec.capability,
                    use_crlf=spec.use_crlf,
                )
            )
        logger.info(f"Loaded {len(self.registry)} bot(s) from configuration.")

        self.remote = RemoteControl(self.registry)

        self.discord_bridge: Optional["DiscordBridge"] = None
        self._discord_thread: Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # Bot lifecycle
    # ------------------------------------------------------------------
    def start_bot(self, address: str) -> bool:
        """Mark the bot at ``address`` as running.  Returns False if unknown."""
        if self.registry.set_running(address, True):
            logger.info(f"Bot {address} started.")
            return True
        logger.warning(f"Cannot start unknown bot {address}.")
        return False

    def stop_bot(self, address: str) -> bool:
        """Mark the bot at ``address`` as stopped.  Returns False if unknown."""
        if self.registry.set_running(address, False):
            logger.info(f"Bot {address} stopped.")
            return True
        logger.warning(f"Cannot stop unknown bot {address}.")
        return False

    def start_all_bots(self) -> None:
        for device in self.registry.list_devices():
            self.start_bot(device.address)

    def stop_all_bots(self) -> None:
        for device in self.registry.list_devices():
            self.stop_bot(device.address)

    # ------------------------------------------------------------------
    # Discord integration
    # ------------------------------------------------------------------
    def start_discord(self) -> bool:
        """Start the Discord bridge if configured with a token."""
        if self.discord_bridge is not None:
            logger.debug("Discord bridge already running.")
            return True
        if not self.settings.discord_token:
            logger.warning("Cannot start Discord bridge: DISCORD_TOKEN is not set.")
            return False
        # Import here so the controller stays usable without loading discord.py
        from .discord_bot.discord_bridge import DiscordBridge

        bridge = DiscordBridge(self.remote, self.settings)
        self.discord_bridge = bridge
        # Run the bot in its own thread since run() blocks
        self._discord_thread = threading.Thread(target=bridge.run_bot, name="DiscordThread", daemon=True)
        self._discord_thread.start()
        logger.info("Discord bridge started.")
        return True

    def stop_discord(self, timeout: float = 5.0) -> None:
        """Stop the Discord bridge if it is running."""
        bridge, self.discord_bridge = self.discord_bridge, None
        if bridge is None:
            return
        if not self.discord_running:
            # run_bot returned (bad token, lost gateway); its loop is closed
            logger.info("Discord bridge already exited.")
            self._discord_thread = None
            return
        try:
            # close() is a coroutine bound to the bridge's own loop
            future = asyncio.run_coroutine_threadsafe(bridge.close(), bridge.loop)
            future.result(timeout=timeout)
        except Exception as e:
            logger.error(f"Failed to stop Discord bridge: {e}", exc_info=True)
        if self._discord_thread is not None:
            self._discord_thread.join(timeout=timeout)
        self._discord_thread = None
        logger.info("Discord bridge stopped.")

    @property
    def discord_running(self) -> bool:
        return self._discord_thread is not None and self._discord_thread.is_alive()
