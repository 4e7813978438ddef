# mino

A small toolkit for writing games. It holds the parts of a game
framework that work without a real window or sound device:

- `mino.bits` has the bit helpers `bit_set`, `bit_unset`, `set_bit` and
  `unset_bit`, which work on 64-bit values with indices 0 to 63. It also
  has `clamp`, `has_prefix`, and `copy_pad`. `copy_pad` returns exactly
  `size` bytes, cut short or padded with NUL bytes.
- `mino.geometry` has the constants `PI`, `PI_2`, `TO_DEG` and `TO_RAD`,
  `Vec2` points, and `Aff3` 2D affine matrices. `Aff3` has the methods
  `identity`, `concat`, `invert`, `rotate`, `scale`, `translate` and
  `transform`. Both classes are frozen dataclasses, so every operation
  returns a new value. `str()` of an `Aff3` prints it as a small matrix
  block.
- `mino.synth` has a `Phasor` that produces a ramp wave at a given
  frequency, with a sample rate of 44100 Hz. Its `Oscillator` turns
  that ramp into a sine or square wave; the saw type returns the ramp
  as it is. `wave_multiply` scales a wave.
- `mino.color` has `Color`, an RGBA value with channels from 0 to 255.
  It is also available as `RGBA`. `Color.from_hex` builds a `Color`
  from a 32-bit ARGB value.
- `mino.input` has the `Key`, `KeyMod`, `MouseButton`, `GamepadButton`
  and `GamepadAxis` enums. It also has the `Gamepad` and `WindowState`
  state classes and `WindowConfig`. These classes compare this frame's
  input with the previous frame's, so they can tell you whether a
  button was just pressed or just released.

## Install

```
pip install .
```

## Examples

```python
from mino.geometry import Aff3, Vec2

m = Aff3.identity().scale(2, 3)
print(m.transform(Vec2(1, 1)))       # Vec2(x=2.0, y=3.0)

from mino.synth import Oscillator, Phasor

phasor = Phasor()
phasor.set_frequency(440.0)
wave = phasor.stream(256)            # ramp values in [-1, 1)
tone = Oscillator.sine().stream(wave)

from mino.color import Color

Color.from_hex(0xFF336699)           # Color(r=51, g=102, b=153, a=255)

from mino.input import Gamepad, GamepadButton, Key, WindowState

state = WindowState()
state.key_down[Key.A] = True
state.key_just_pressed(Key.A)        # True: up last frame, down now

pad = Gamepad(connected=True, buttons=1 << GamepadButton.A)
state.gamepads.append(pad)
state.get_gamepad(0).button_pressed(GamepadButton.A)   # True
pad.set_vibration(1.5, -0.2)         # motors clamped to 1.0 and 0.0
```

## What it does not do

mino does not open windows, draw graphics, play sound, or read real
keyboards, mice or gamepads. `WindowState` and `Gamepad` are plain data.
Your own code fills them in each frame and moves the current values
into the `p_` fields before it reads the new input. The synthesis
functions return lists of float samples; you must send those lists to
an audio device yourself.

## Tests

```
pip install .[test]
pytest
```