"""
Asyncio TCP transport to a sys-botbase host.

The stream is opened lazily on the first send.  Any socket failure closes the
stream and surfaces as :class:`~botfleet.control.errors.TransportError`; the
next send reconnects.  Retrying is left to the caller.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from ..control.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_PORT = 6000


class SocketConnection:
    """Write-only connection to one bot."""

    def __init__(self, host: str, port: int = DEFAULT_PORT, *, timeout: float = 5.0) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout
        self.name = host
        self._writer: Optional[asyncio.StreamWriter] = None
        self._lock = asyncio.Lock()

    @property
    def connected(self) -> bool:
        return self._writer is not None and not self._writer.is_closing()

    async def _connect(self) -> asyncio.StreamWriter:
        logger.info(f"Connecting to {self.host}:{self.port}…")
        _, writer = await asyncio.wait_for(
            asyncio.open_connection(self.host, self.port), timeout=self.timeout
        )
        logger.info(f"Connected to {self.host}:{self.port}")
        return writer

    async def send(self, payload: bytes) -> None:
        """Write ``payload`` and wait until it is flushed to the socket."""
        async with self._lock:
            try:
                if not self.connected:
                    self._writer = await self._connect()
                self._writer.write(payload)
                await asyncio.wait_for(self._writer.drain(), timeout=self.timeout)
            except (OSError, asyncio.TimeoutError) as e:
                await self._drop()
                raise TransportError(f"{self.name}: send failed: {e}") from e

    async def _drop(self) -> None:
        writer, self._writer = self._writer, None
        if writer is None:
            return
        writer.close()
        try:
            await writer.wait_closed()
        except OSError as e:
            logger.debug(f"Error while closing {self.name}: {e}")

    async def close(self) -> None:
        async with self._lock:
            await self._drop()

    def __repr__(self) -> str:
        return f"SocketConnection({self.host!r}, {self.port})"
