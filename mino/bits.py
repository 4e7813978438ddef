"""Bit-flag helpers and small value utilities."""

from __future__ import annotations

_UINT64_MASK = (1 << 64) - 1
_BIT_WIDTH = 64


def _mask(index: int) -> int:
    if not 0 <= index < _BIT_WIDTH:
        raise ValueError(f"bit index must be in 0..{_BIT_WIDTH - 1}, got {index}")
    return 1 << index


def bit_set(bits: int, index: int) -> bool:
    """Return True if the bit at ``index`` is set in ``bits``."""
    mask = _mask(index)
    return (bits & _UINT64_MASK & mask) == mask


def bit_unset(bits: int, index: int) -> bool:
    """Return True if the bit at ``index`` is not set in ``bits``."""
    return not bit_set(bits, index)


def set_bit(bits: int, index: int) -> int:
    """Return ``bits`` with the bit at ``index`` set to 1."""
    return (bits | _mask(index)) & _UINT64_MASK


def unset_bit(bits: int, index: int) -> int:
    """Return ``bits`` with the bit at ``index`` set to 0."""
    return bits & ~_mask(index) & _UINT64_MASK


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Constrain ``value`` to lie between ``minimum`` and ``maximum``."""
    if value > maximum:
        return maximum
    if value < minimum:
        return minimum
    return value


def has_prefix(text: str | None, prefix: str | None) -> bool:
    """Return True if ``text`` starts with ``prefix``; False if either is None."""
    if text is None or prefix is None:
        return False
    return text.startswith(prefix)


def copy_pad(src: bytes | str | None, size: int) -> bytes:
    """Return exactly ``size`` bytes: ``src`` up to its first NUL, truncated or NUL-padded."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if src is None:
        return bytes(size)
    data = src.encode("utf-8") if isinstance(src, str) else bytes(src)
    data = data.split(b"\0", 1)[0][:size]
    return data.ljust(size, b"\0")