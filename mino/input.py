"""Keyboard, mouse and gamepad state tracked by a window."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag

from .bits import bit_set, bit_unset, clamp


class KeyMod(IntFlag):
    """Modifier keys that change the meaning of other input."""

    CTRL = 1 << 0
    SHIFT = 1 << 1
    ALT = 1 << 2
    WIN = 1 << 3
    CAPS_LOCK = 1 << 4
    SCROLL_LOCK = 1 << 5
    NUM_LOCK = 1 << 6


class Key(IntEnum):
    """Keyboard key codes."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7
    I = 8  # noqa: E741
    J = 9
    K = 10
    L = 11
    M = 12
    N = 13
    O = 14  # noqa: E741
    P = 15
    Q = 16
    R = 17
    S = 18
    T = 19
    U = 20
    V = 21
    W = 22
    X = 23
    Y = 24
    Z = 25
    LEFT_ALT = 26
    LEFT_OPTION = 26
    RIGHT_ALT = 27
    RIGHT_OPTION = 27
    DOWN_ARROW = 28
    LEFT_ARROW = 29
    RIGHT_ARROW = 30
    UP_ARROW = 31
    TILDE = 32
    BACKSLASH = 33
    BACKSPACE = 34
    LEFT_BRACKET = 35
    RIGHT_BRACKET = 36
    CAPS_LOCK = 37
    COMMA = 38
    MENU = 39
    LEFT_CTRL = 40
    RIGHT_CTRL = 41
    DELETE = 42
    NUM_0 = 43
    NUM_1 = 44
    NUM_2 = 45
    NUM_3 = 46
    NUM_4 = 47
    NUM_5 = 48
    NUM_6 = 49
    NUM_7 = 50
    NUM_8 = 51
    NUM_9 = 52
    END = 53
    ENTER = 54
    EQUAL = 55
    ESCAPE = 56
    F1 = 57
    F2 = 58
    F3 = 59
    F4 = 60
    F5 = 61
    F6 = 62
    F7 = 63
    F8 = 64
    F9 = 65
    F10 = 66
    F11 = 67
    F12 = 68
    HOME = 69
    INSERT = 70
    LEFT_WIN = 71
    LEFT_SUPER = 71
    LEFT_COMMAND = 71
    RIGHT_WIN = 72
    RIGHT_SUPER = 72
    RIGHT_COMMAND = 72
    MINUS = 73
    NUM_LOCK = 74
    NUM_PAD_0 = 75
    NUM_PAD_1 = 76
    NUM_PAD_2 = 77
    NUM_PAD_3 = 78
    NUM_PAD_4 = 79
    NUM_PAD_5 = 80
    NUM_PAD_6 = 81
    NUM_PAD_7 = 82
    NUM_PAD_8 = 83
    NUM_PAD_9 = 84
    NUM_PAD_ADD = 85
    NUM_PAD_DECIMAL = 86
    NUM_PAD_DIVIDE = 87
    NUM_PAD_ENTER = 88
    NUM_PAD_EQUAL = 89
    NUM_PAD_MULTIPLY = 90
    NUM_PAD_SUBTRACT = 91
    PAGE_DOWN = 92
    PAGE_UP = 93
    PAUSE = 94
    PERIOD = 95
    PRINT_SCREEN = 96
    QUOTE = 97
    SCROLL_LOCK = 98
    SEMICOLON = 99
    LEFT_SHIFT = 100
    RIGHT_SHIFT = 101
    SLASH = 102
    SPACE = 103
    TAB = 104
    ALT = 105
    OPTION = 105
    CTRL = 106
    SHIFT = 107
    WIN = 108
    SUPER = 108
    COMMAND = 108


KEY_COUNT = len(Key)


class MouseButton(IntEnum):
    """Buttons on a standard mouse."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    BACK = 3
    FORWARD = 4


class GamepadButton(IntEnum):
    """Buttons on a standard gamepad, in Xbox layout."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    A = 4
    B = 5
    X = 6
    Y = 7
    START = 8
    SELECT = 9
    L1 = 10
    R1 = 11
    L3 = 12
    R3 = 13
    HOME = 14
    L2 = 15
    R2 = 16
    LB = 10
    RB = 11
    LT = 15
    RT = 16
    LEFT_STICK = 12
    RIGHT_STICK = 13


GAMEPAD_BUTTON_COUNT = len(GamepadButton)


class GamepadAxis(IntEnum):
    """Analog axes on a standard gamepad."""

    LEFT_STICK_X = 0
    LEFT_STICK_Y = 1
    RIGHT_STICK_X = 2
    RIGHT_STICK_Y = 3
    LEFT_TRIGGER = 4
    RIGHT_TRIGGER = 5


GAMEPAD_AXIS_COUNT = len(GamepadAxis)


def _axes() -> list[float]:
    return [0.0] * GAMEPAD_AXIS_COUNT


@dataclass
class Gamepad:
    """One player's gamepad with its current and previous-frame state."""

    connected: bool = False
    axes: list[float] = field(default_factory=_axes)
    p_axes: list[float] = field(default_factory=_axes)
    buttons: int = 0
    p_buttons: int = 0
    left_motor: float = 0.0
    p_left_motor: float = 0.0
    right_motor: float = 0.0
    p_right_motor: float = 0.0
    player_id: int = 0

    def button_pressed(self, button: GamepadButton) -> bool:
        """Return True if ``button`` is held; always False when disconnected."""
        if not self.connected:
            return False
        return bit_set(self.buttons, GamepadButton(button))

    def button_just_pressed(self, button: GamepadButton) -> bool:
        """Return True if ``button`` went down since the last update."""
        if not self.connected:
            return False
        index = GamepadButton(button)
        return bit_set(self.buttons, index) and not bit_set(self.p_buttons, index)

    def button_just_released(self, button: GamepadButton) -> bool:
        """Return True if ``button`` went up since the last update."""
        if not self.connected:
            return False
        index = GamepadButton(button)
        return bit_unset(self.buttons, index) and not bit_unset(self.p_buttons, index)

    def axis_value(self, axis: GamepadAxis) -> float:
        """Return the normalised value of ``axis``; 0 when disconnected."""
        if not self.connected:
            return 0.0
        return self.axes[GamepadAxis(axis)]

    def set_vibration(self, left_motor: float, right_motor: float) -> None:
        """Set both motor speeds, each clamped to [0, 1]."""
        self.left_motor = clamp(left_motor, 0.0, 1.0)
        self.right_motor = clamp(right_motor, 0.0, 1.0)


@dataclass(frozen=True)
class WindowConfig:
    """Settings used to create a window."""

    title: str
    width: int
    height: int


def _keys() -> list[bool]:
    return [False] * KEY_COUNT


@dataclass
class WindowState:
    """Input state of a window for the current and previous frame."""

    key_down: list[bool] = field(default_factory=_keys)
    p_key_down: list[bool] = field(default_factory=_keys)
    key_mod: int = 0
    key_char: str = ""
    width: int = 0
    height: int = 0
    mouse_x: int = 0
    mouse_y: int = 0
    p_mouse_x: int = 0
    p_mouse_y: int = 0
    scroll_x: int = 0
    scroll_y: int = 0
    p_scroll_x: int = 0
    p_scroll_y: int = 0
    mouse_buttons: int = 0
    p_mouse_buttons: int = 0
    gamepads: list[Gamepad] = field(default_factory=list)

    def mouse_pressed(self, button: MouseButton) -> bool:
        """Return True if the mouse ``button`` is held."""
        return bit_set(self.mouse_buttons, MouseButton(button))

    def mouse_just_pressed(self, button: MouseButton) -> bool:
        """Return True if the mouse ``button`` went down since the last update."""
        index = MouseButton(button)
        return bit_set(self.mouse_buttons, index) and not bit_set(
            self.p_mouse_buttons, index
        )

    def mouse_just_released(self, button: MouseButton) -> bool:
        """Return True if the mouse ``button`` went up since the last update."""
        index = MouseButton(button)
        return bit_unset(self.mouse_buttons, index) and not bit_unset(
            self.p_mouse_buttons, index
        )

    def key_pressed(self, key: Key) -> bool:
        """Return True if ``key`` is held."""
        return self.key_down[Key(key)]

    def key_just_pressed(self, key: Key) -> bool:
        """Return True if ``key`` went down since the last update."""
        index = Key(key)
        return self.key_down[index] and not self.p_key_down[index]

    def key_just_released(self, key: Key) -> bool:
        """Return True if ``key`` went up since the last update."""
        index = Key(key)
        return not self.key_down[index] and self.p_key_down[index]

    def key_mod_set(self, modifier: KeyMod) -> bool:
        """Return True if every active modifier is contained in ``modifier``."""
        return (self.key_mod | modifier) == modifier

    def get_gamepad(self, player_id: int) -> Gamepad | None:
        """Return the gamepad for ``player_id``, or None if there is none."""
        if 0 <= player_id < len(self.gamepads):
            return self.gamepads[player_id]
        return None

    def first_connected_gamepad(self) -> Gamepad | None:
        """Return the first gamepad that was connected, or None."""
        return self.get_gamepad(0)

    def gamepad_count(self) -> int:
        """Return how many gamepads are tracked, connected or not."""
        return len(self.gamepads)