"""Packed BCD encoding of subscriber numbers and 64-bit byte order helpers."""

from __future__ import annotations

_EMPTY_FILL_LENGTH = 8
_UINT64_MASK = 0xFFFF_FFFF_FFFF_FFFF


def str_to_bcd(digits: str, size: int) -> bytes:
    """Encode a digit string as swapped-nibble BCD in a buffer of ``size`` bytes.

    Each pair of digits becomes one byte, the first digit in the low nibble
    and the second in the high nibble. An odd trailing digit is padded with
    an ``F`` high nibble. An empty string yields ``0xFF`` filler in the first
    eight bytes. Unused bytes are zero.

    Raises ``ValueError`` when ``size`` is not positive or the digits do not
    fit in the buffer.
    """
    if size <= 0:
        raise ValueError("BCD buffer size must be positive")

    out = bytearray(size)
    if not digits:
        fill = min(size, _EMPTY_FILL_LENGTH)
        out[:fill] = b"\xff" * fill
        return bytes(out)

    if len(digits) > size * 2:
        raise ValueError(
            f"{len(digits)} digits do not fit in a {size}-byte BCD buffer"
        )

    values = [(ord(ch) - ord("0")) & 0xFF for ch in digits]
    pairs = zip(values[0::2], values[1::2])
    for index, (low, high) in enumerate(pairs):
        out[index] = low | ((high << 4) & 0xF0)
    if len(values) % 2:
        out[len(values) // 2] = values[-1] | 0xF0
    return bytes(out)


def ntoh64(value: int) -> int:
    """Reverse the byte order of an unsigned 64-bit integer."""
    return int.from_bytes((value & _UINT64_MASK).to_bytes(8, "little"), "big")