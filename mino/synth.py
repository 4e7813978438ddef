"""Wave generation: phasors and oscillators producing sample streams."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .geometry import PI_2

SAMPLE_RATE = 44100
BUFFER_SIZE = 8192
BUFFER_COUNT = 2
CHANNEL_COUNT = 1


def wave_multiply(wave: Iterable[float], scale: float) -> list[float]:
    """Return the wave with every sample multiplied by ``scale``."""
    return [sample * scale for sample in wave]


@dataclass
class Phasor:
    """A ramp generator whose phase advances by ``phase_interval`` each sample."""

    phase: float = 0.0
    phase_interval: float = 0.0

    def set_frequency(self, frequency: float) -> None:
        """Set the phase interval for ``frequency`` Hz at the sample rate."""
        self.phase_interval = frequency / SAMPLE_RATE

    def stream(self, length: int) -> list[float]:
        """Advance ``length`` samples and return them, each in [-1, 1)."""
        samples = []
        for _ in range(length):
            self.phase = math.fmod(self.phase + self.phase_interval, 1)
            samples.append(self.phase * 2 - 1)
        return samples


class OscillatorType(Enum):
    SINE = 0
    SAW = 1
    SQUARE = 2


@dataclass(frozen=True)
class Oscillator:
    """Shapes a phasor ramp into a waveform."""

    type: OscillatorType = OscillatorType.SINE

    @classmethod
    def sine(cls) -> Oscillator:
        """Return a sine oscillator."""
        return cls(OscillatorType.SINE)

    def stream(self, wave: Iterable[float]) -> list[float]:
        """Shape a ramp wave in [-1, 1] into this oscillator's waveform."""
        if self.type is OscillatorType.SINE:
            return [math.sin((sample + 1) * PI_2 / 2) for sample in wave]
        if self.type is OscillatorType.SQUARE:
            return [1.0 if sample > 0 else -1.0 for sample in wave]
        return list(wave)