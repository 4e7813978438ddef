"""RGBA colour values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"channel {name} must be in 0..255, got {value}")

    @classmethod
    def from_hex(cls, color: int) -> Color:
        """Build a colour from a 32-bit hexadecimal value in ARGB order."""
        return cls(
            r=(color >> 16) & 0xFF,
            g=(color >> 8) & 0xFF,
            b=color & 0xFF,
            a=(color >> 24) & 0xFF,
        )


RGBA = Color