import pytest

from botfleet.config import FleetSettings, parse_device
from botfleet.control.errors import ConfigError


def test_defaults_from_empty_environment():
    settings = FleetSettings.from_env({})
    assert settings.discord_token is None
    assert settings.command_prefix == "$"
    assert settings.devices == ()
    assert settings.connect_timeout == 5.0
    assert settings.sudo_user_ids == frozenset()


def test_full_environment():
    settings = FleetSettings.from_env({
        "DISCORD_TOKEN": "abc",
        "COMMAND_PREFIX": "!",
        "BOT_PORT": "6001",
        "BOT_DEVICES": "192.168.0.20, 192.168.0.21:7000/raw@trade",
        "BOT_CONNECT_TIMEOUT": "2.5",
        "REMOTE_CONTROL_ROLES": "Remote, Mods",
        "SUDO_USER_IDS": "11,22",
    })
    assert settings.discord_token == "abc"
    assert settings.command_prefix == "!"
    first, second = settings.devices
    assert (first.host, first.port, first.use_crlf, first.capability) == (
        "192.168.0.20", 6001, True, "remote-control"
    )
    assert (second.host, second.port, second.use_crlf, second.capability) == (
        "192.168.0.21", 7000, False, "trade"
    )
    assert settings.connect_timeout == 2.5
    assert settings.remote_control_roles == ("Remote", "Mods")
    assert settings.sudo_user_ids == frozenset({11, 22})


@pytest.mark.parametrize("entry", ["", ":6000", "host:abc", "host/cr", "host/lf"])
def test_malformed_device_entries(entry):
    with pytest.raises(ConfigError):
        parse_device(entry)


@pytest.mark.parametrize("key", ["BOT_PORT", "BOT_CONNECT_TIMEOUT", "SUDO_USER_IDS"])
def test_malformed_numbers(key):
    with pytest.raises(ConfigError):
        FleetSettings.from_env({key: "lots"})


def test_duplicate_hosts_are_a_config_error():
    with pytest.raises(ConfigError, match="10.0.0.1"):
        FleetSettings.from_env({"BOT_DEVICES": "10.0.0.1:6000,10.0.0.1:6001"})


def test_controller_reports_duplicate_hosts_as_config_error():
    from botfleet.fleet_controller import FleetController

    with pytest.raises(ConfigError):
        FleetController(FleetSettings.from_env({"BOT_DEVICES": "10.0.0.1/raw, 10.0.0.1"}))
