"""Game toolkit: bit helpers, 2D geometry, wave synthesis, colours and input state."""

__version__ = "0.1.0"
__all__ = ["bits", "geometry", "synth", "color", "input"]