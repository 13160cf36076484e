"""Device model shared by the registry, resolver and dispatch engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

# Capability tag carried by bots that accept remote-control input
REMOTE_CONTROL = "remote-control"


class Connection(Protocol):
    """What the dispatch engine needs from a device connection."""

    name: str

    async def send(self, payload: bytes) -> None:
        ...

    async def close(self) -> None:
        ...


@dataclass
class Device:
    """
    A managed bot reachable over a connection.

    ``address`` is the identity; ``use_crlf`` selects the line-ending mode the
    encoder applies; ``capability`` is the role tag checked by the resolver.
    """

    address: str
    connection: Connection
    capability: str = REMOTE_CONTROL
    use_crlf: bool = True
    is_running: bool = False
    name: str = field(default="")

    def __post_init__(self) -> None:
        if not self.name:
            self.name = getattr(self.connection, "name", "") or self.address
