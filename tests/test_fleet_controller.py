import threading

from botfleet.config import DeviceSpec, FleetSettings
from botfleet.devices.connection import SocketConnection
from botfleet.fleet_controller import FleetController


def make_controller():
    settings = FleetSettings(
        devices=(
            DeviceSpec("10.0.0.1"),
            DeviceSpec("10.0.0.2", port=7000, use_crlf=False, capability="trade"),
        ),
        connect_timeout=1.5,
    )
    return FleetController(settings)


def test_registry_is_built_from_settings():
    controller = make_controller()
    first, second = controller.registry.list_devices()
    assert isinstance(first.connection, SocketConnection)
    assert (second.connection.port, second.use_crlf, second.capability) == (7000, False, "trade")
    assert first.connection.timeout == 1.5
    assert not first.is_running


def test_start_and_stop_bots():
    controller = make_controller()
    controller.start_all_bots()
    assert all(d.is_running for d in controller.registry.list_devices())
    assert controller.stop_bot("10.0.0.1")
    assert not controller.stop_bot("10.0.0.9")
    assert controller.registry.find_first_running().address == "10.0.0.2"


def test_discord_needs_a_token():
    controller = make_controller()
    assert not controller.start_discord()
    assert not controller.discord_running
    controller.stop_discord()


class ExitedBridge:
    def __init__(self):
        self.close_calls = 0

    def close(self):
        self.close_calls += 1

    @property
    def loop(self):
        raise AssertionError("closed loop must not be used")


def test_stop_discord_after_bot_thread_exited():
    controller = make_controller()
    bridge = ExitedBridge()
    thread = threading.Thread(target=lambda: None)
    thread.start()
    thread.join()
    controller.discord_bridge = bridge
    controller._discord_thread = thread

    controller.stop_discord()

    assert bridge.close_calls == 0
    assert controller.discord_bridge is None
    assert not controller.discord_running
