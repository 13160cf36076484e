import pytest

from botfleet.control.errors import TransportError
from botfleet.devices.device import Device
from botfleet.devices.registry import DeviceRegistry


class FakeConnection:
    """Records payloads instead of writing them to a socket."""

    def __init__(self, name, fail=False):
        self.name = name
        self.fail = fail
        self.sent = []
        self.attempts = 0
        self.closed = False

    async def send(self, payload):
        self.attempts += 1
        if self.fail:
            raise TransportError(f"{self.name}: connection refused")
        self.sent.append(payload)

    async def close(self):
        self.closed = True


def make_device(address, running=True, fail=False, use_crlf=True, capability="remote-control"):
    return Device(
        address=address,
        connection=FakeConnection(address, fail=fail),
        capability=capability,
        use_crlf=use_crlf,
        is_running=running,
    )


@pytest.fixture
def registry():
    return DeviceRegistry()
