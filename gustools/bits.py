"""Bit manipulation helpers for fixed-width unsigned integers."""

from __future__ import annotations

_MASK16 = 0xFFFF
_MASK32 = 0xFFFFFFFF


def _check_position(position: int, width: int) -> None:
    if not 0 <= position < width:
        raise ValueError(f"bit position {position} outside 0..{width - 1}")


def format_bin(value: int, width: int) -> str:
    """Return ``value`` as ``width`` binary digits in dash-separated groups of four."""
    if width <= 0 or width % 4:
        raise ValueError(f"width must be a positive multiple of 4: {width}")
    digits = format(value & ((1 << width) - 1), f"0{width}b")
    return "-".join(digits[start:start + 4] for start in range(0, width, 4))


def format_hex32(value: int) -> str:
    """Return the eight hex nibbles of a 32-bit value, separated by spaces."""
    return " ".join(f"{(value >> shift) & 0xF:X}" for shift in range(28, -4, -4))


def extract_bits(value: int, start: int, end: int) -> int:
    """Return bits ``start``..``end`` (inclusive) of a 32-bit value, shifted down."""
    if start > end:
        raise ValueError(f"start bit {start} is after end bit {end}")
    _check_position(start, 32)
    _check_position(end, 32)
    return ((value & _MASK32) >> start) & ((1 << (end - start + 1)) - 1)


def swap_segments16(value: int, nbits: int) -> int:
    """Exchange the ``nbits`` lowest bits of a 16-bit value with its highest bits."""
    if not 0 <= nbits <= 16:
        raise ValueError(f"segment length {nbits} outside 0..16")
    value &= _MASK16
    high_base = 16 - nbits
    low_part = high_part = 0
    for i in range(nbits):
        if (value >> i) & 1:
            high_part |= 1 << (high_base + i)
        if (value >> (high_base + i)) & 1:
            low_part |= 1 << i
        value &= ~((1 << i) | (1 << (high_base + i))) & _MASK16
    return value | low_part | high_part


def set_bit(value: int, position: int, flag: bool) -> int:
    """Return a 32-bit value with the bit at ``position`` set or cleared."""
    _check_position(position, 32)
    mask = 1 << position
    value &= _MASK32
    return value | mask if flag else value & ~mask & _MASK32


def invert_bit(value: int, position: int) -> int:
    """Return a 32-bit value with the bit at ``position`` flipped."""
    _check_position(position, 32)
    return (value ^ (1 << position)) & _MASK32


def rotate32(value: int, shifts: int) -> int:
    """Rotate a 32-bit value left by ``shifts`` (right when negative)."""
    shifts %= 32
    value &= _MASK32
    return ((value << shifts) | (value >> (32 - shifts))) & _MASK32


def bit_at16(value: int, position: int) -> bool:
    """Return whether the bit at ``position`` of a 16-bit value is set."""
    _check_position(position, 16)
    return bool((value & _MASK16) >> position & 1)


def bits_equal16(first: int, second: int, position: int) -> bool:
    """Return whether two 16-bit values agree at ``position``."""
    return bit_at16(first, position) == bit_at16(second, position)