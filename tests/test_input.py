import pytest

from mino.input import (
    GAMEPAD_AXIS_COUNT,
    GAMEPAD_BUTTON_COUNT,
    KEY_COUNT,
    Gamepad,
    GamepadAxis,
    GamepadButton,
    Key,
    KeyMod,
    MouseButton,
    WindowConfig,
    WindowState,
)


def test_enum_counts_and_aliases():
    assert GAMEPAD_BUTTON_COUNT == 17
    assert GAMEPAD_AXIS_COUNT == 6
    assert Key.LEFT_OPTION is Key.LEFT_ALT
    assert Key.COMMAND is Key.WIN
    pad = Gamepad(connected=True, buttons=1 << GamepadButton.L1, p_buttons=0)
    assert pad.button_pressed(GamepadButton.LB)
    assert pad.button_just_pressed(GamepadButton.LB)
    assert not pad.button_pressed(GamepadButton.RIGHT_STICK)
    state = WindowState()
    state.key_down[Key.LEFT_ALT] = True
    assert state.key_pressed(Key.LEFT_OPTION)


def test_key_count_is_one_past_last_key():
    assert KEY_COUNT == Key.WIN + 1
    assert list(Key)[-1] is Key.WIN
    state = WindowState()
    state.key_down[Key.WIN] = True
    assert state.key_pressed(Key.COMMAND)
    assert state.key_just_pressed(Key.WIN)


def test_gamepad_button_states():
    pad = Gamepad(connected=True)
    pad.buttons = 1 << GamepadButton.A
    pad.p_buttons = 1 << GamepadButton.B
    assert pad.button_pressed(GamepadButton.A)
    assert not pad.button_pressed(GamepadButton.B)
    assert pad.button_just_pressed(GamepadButton.A)
    assert not pad.button_just_pressed(GamepadButton.B)
    assert pad.button_just_released(GamepadButton.B)
    assert not pad.button_just_released(GamepadButton.A)


def test_held_button_is_not_just_pressed():
    pad = Gamepad(connected=True, buttons=1 << GamepadButton.X, p_buttons=1 << GamepadButton.X)
    assert pad.button_pressed(GamepadButton.X)
    assert not pad.button_just_pressed(GamepadButton.X)
    assert not pad.button_just_released(GamepadButton.X)


def test_disconnected_gamepad_reports_nothing():
    pad = Gamepad(connected=False, buttons=1 << GamepadButton.A)
    pad.axes[GamepadAxis.LEFT_TRIGGER] = 0.5
    assert not pad.button_pressed(GamepadButton.A)
    assert not pad.button_just_pressed(GamepadButton.A)
    assert pad.axis_value(GamepadAxis.LEFT_TRIGGER) == 0.0


def test_axis_value_connected():
    pad = Gamepad(connected=True)
    pad.axes[GamepadAxis.RIGHT_STICK_Y] = -0.25
    assert pad.axis_value(GamepadAxis.RIGHT_STICK_Y) == -0.25


def test_set_vibration_clamps():
    pad = Gamepad()
    pad.set_vibration(1.5, -0.2)
    assert (pad.left_motor, pad.right_motor) == (1.0, 0.0)
    pad.set_vibration(0.3, 0.7)
    assert (pad.left_motor, pad.right_motor) == (0.3, 0.7)


def test_mouse_states():
    state = WindowState(mouse_buttons=1 << MouseButton.LEFT, p_mouse_buttons=1 << MouseButton.RIGHT)
    assert state.mouse_pressed(MouseButton.LEFT)
    assert state.mouse_just_pressed(MouseButton.LEFT)
    assert state.mouse_just_released(MouseButton.RIGHT)
    assert not state.mouse_just_pressed(MouseButton.MIDDLE)
    assert not state.mouse_just_released(MouseButton.MIDDLE)


def test_key_states():
    state = WindowState()
    state.key_down[Key.SPACE] = True
    state.p_key_down[Key.ENTER] = True
    assert state.key_pressed(Key.SPACE)
    assert state.key_just_pressed(Key.SPACE)
    assert not state.key_just_released(Key.SPACE)
    assert state.key_just_released(Key.ENTER)
    assert not state.key_just_pressed(Key.ENTER)


def test_invalid_key_rejected():
    with pytest.raises(ValueError):
        WindowState().key_pressed(-1)


def test_key_mod_set_subset_semantics():
    state = WindowState(key_mod=int(KeyMod.CTRL))
    assert state.key_mod_set(KeyMod.CTRL | KeyMod.SHIFT)
    assert state.key_mod_set(KeyMod.CTRL)
    assert not state.key_mod_set(KeyMod.SHIFT)


def test_gamepad_lookup():
    first = Gamepad(connected=True, player_id=0)
    second = Gamepad(player_id=1)
    state = WindowState(gamepads=[first, second])
    assert state.gamepad_count() == 2
    assert state.get_gamepad(1) is second
    assert state.get_gamepad(2) is None
    assert state.get_gamepad(-1) is None
    assert state.first_connected_gamepad() is first


def test_no_gamepads():
    state = WindowState()
    assert state.gamepad_count() == 0
    assert state.first_connected_gamepad() is None


def test_window_config_fields():
    config = WindowConfig("Demo", 800, 600)
    assert (config.title, config.width, config.height) == ("Demo", 800, 600)