import pytest

from botfleet.devices.registry import DeviceRegistry

from conftest import make_device


def test_lookups_follow_registration_order():
    registry = DeviceRegistry([
        make_device("10.0.0.1", running=False, capability="trade"),
        make_device("10.0.0.2", running=True),
        make_device("10.0.0.3", running=True),
    ])
    assert registry.find_by_address("10.0.0.3").address == "10.0.0.3"
    assert registry.find_by_address("10.0.0.9") is None
    assert registry.find_first_running().address == "10.0.0.2"
    assert registry.find_first_with_capability("remote-control").address == "10.0.0.2"
    assert registry.find_first_with_capability("dump") is None


def test_duplicate_addresses_are_rejected(registry):
    registry.add(make_device("10.0.0.1"))
    with pytest.raises(ValueError):
        registry.add(make_device("10.0.0.1"))


def test_set_running_and_remove(registry):
    registry.add(make_device("10.0.0.1", running=False))
    assert registry.set_running("10.0.0.1", True)
    assert registry.find_first_running().address == "10.0.0.1"
    assert not registry.set_running("10.0.0.2", True)
    assert registry.remove("10.0.0.1").address == "10.0.0.1"
    assert registry.remove("10.0.0.1") is None
    assert len(registry) == 0


def test_list_devices_returns_a_snapshot(registry):
    registry.add(make_device("10.0.0.1"))
    snapshot = registry.list_devices()
    registry.add(make_device("10.0.0.2"))
    assert len(snapshot) == 1
    assert len(registry.list_devices()) == 2


def test_device_name_defaults_to_connection_name():
    device = make_device("10.0.0.1")
    assert device.name == "10.0.0.1"
