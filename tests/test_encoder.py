from botfleet.control.actions import (
    ClickButton,
    ResetStick,
    ScreenState,
    SetScreen,
    SetStick,
    SwitchButton,
    SwitchStick,
)
from botfleet.control.encoder import encode


def test_click_with_crlf():
    assert encode(ClickButton(SwitchButton.A), True) == b"click A\r\n"


def test_click_without_crlf_is_unterminated():
    assert encode(ClickButton(SwitchButton.HOME), False) == b"click HOME"


def test_screen_commands():
    assert encode(SetScreen(ScreenState.ON), True) == b"setScreenOn\r\n"
    assert encode(SetScreen(ScreenState.OFF), True) == b"setScreenOff\r\n"


def test_set_stick_uses_decimal_axes():
    payload = encode(SetStick(SwitchStick.LEFT, -32768, 32767), True)
    assert payload == b"setStick LEFT -32768 32767\r\n"


def test_reset_stick_is_neutral_position():
    assert encode(ResetStick(SwitchStick.RIGHT), True) == b"setStick RIGHT 0 0\r\n"


def test_line_ending_mode_changes_every_payload():
    actions = [
        ClickButton(SwitchButton.B),
        SetScreen(ScreenState.OFF),
        SetStick(SwitchStick.RIGHT, 100, -100),
        ResetStick(SwitchStick.LEFT),
    ]
    for action in actions:
        assert encode(action, True) != encode(action, False)
