import asyncio

import pytest

from botfleet.control.actions import ClickButton, ScreenState, SetScreen, SwitchButton
from botfleet.control.dispatch import DispatchEngine
from botfleet.control.errors import (
    DeviceUnavailable,
    EmptyFleet,
    InvalidArgument,
    TransportError,
)
from botfleet.devices.registry import DeviceRegistry

from conftest import make_device


@pytest.mark.parametrize("button", list(SwitchButton))
def test_click_sends_exactly_one_payload(button):
    device = make_device("10.0.0.1")
    engine = DispatchEngine(DeviceRegistry([device]))
    ack = asyncio.run(engine.dispatch_to_one(device, ClickButton(button)))
    assert device.connection.sent == [f"click {button.value}\r\n".encode()]
    assert ack.device is device
    assert ack.payload == device.connection.sent[0]


def test_invalid_button_never_reaches_the_connection():
    device = make_device("10.0.0.1")
    engine = DispatchEngine(DeviceRegistry([device]))
    with pytest.raises(InvalidArgument):
        asyncio.run(engine.dispatch_to_one(device, ClickButton("TURBO")))
    assert device.connection.attempts == 0


def test_stopped_device_is_rejected_before_send():
    device = make_device("10.0.0.1", running=False)
    engine = DispatchEngine(DeviceRegistry([device]))
    with pytest.raises(DeviceUnavailable):
        asyncio.run(engine.dispatch_to_one(device, ClickButton(SwitchButton.A)))
    assert device.connection.attempts == 0


def test_transport_error_propagates_without_retry():
    device = make_device("10.0.0.1", fail=True)
    engine = DispatchEngine(DeviceRegistry([device]))
    with pytest.raises(TransportError):
        asyncio.run(engine.dispatch_to_one(device, ClickButton(SwitchButton.A)))
    assert device.connection.attempts == 1


def test_payload_follows_device_line_ending():
    crlf = make_device("10.0.0.1", use_crlf=True)
    bare = make_device("10.0.0.2", use_crlf=False)
    engine = DispatchEngine(DeviceRegistry([crlf, bare]))
    action = SetScreen(ScreenState.ON)
    asyncio.run(engine.dispatch_to_one(crlf, action))
    asyncio.run(engine.dispatch_to_one(bare, action))
    assert crlf.connection.sent == [b"setScreenOn\r\n"]
    assert bare.connection.sent == [b"setScreenOn"]


@pytest.mark.parametrize("failing", [0, 2, 4])
def test_broadcast_tolerates_one_failing_device(failing):
    devices = [make_device(f"10.0.0.{i}", fail=i == failing) for i in range(5)]
    engine = DispatchEngine(DeviceRegistry(devices))
    report = asyncio.run(engine.dispatch_to_all(SetScreen(ScreenState.ON)))
    assert (report.success_count, report.total) == (4, 5)
    assert all(d.connection.attempts == 1 for d in devices)
    assert [o.device.address for o in report.failures] == [f"10.0.0.{failing}"]
    assert isinstance(report.failures[0].error, TransportError)


def test_broadcast_counts_stopped_devices_as_failures_without_sending():
    running = make_device("10.0.0.1")
    stopped = make_device("10.0.0.2", running=False)
    engine = DispatchEngine(DeviceRegistry([running, stopped]))
    report = asyncio.run(engine.dispatch_to_all(SetScreen(ScreenState.OFF)))
    assert (report.success_count, report.total) == (1, 2)
    assert stopped.connection.attempts == 0
    assert isinstance(report.failures[0].error, DeviceUnavailable)


def test_broadcast_over_empty_fleet_raises():
    engine = DispatchEngine(DeviceRegistry())
    with pytest.raises(EmptyFleet, match="No bots are currently connected."):
        asyncio.run(engine.dispatch_to_all(SetScreen(ScreenState.ON)))


def test_broadcast_rejects_invalid_action_before_touching_devices():
    device = make_device("10.0.0.1")
    engine = DispatchEngine(DeviceRegistry([device]))
    with pytest.raises(InvalidArgument):
        asyncio.run(engine.dispatch_to_all(SetScreen("On")))
    assert device.connection.attempts == 0
