"""Seven-segment display codes for the HEX0-HEX5 displays."""

from __future__ import annotations

DIGIT_CODES = (
    0x3F, 0x06, 0x5B, 0x4F, 0x66, 0x6D, 0x7D, 0x07,
    0x7F, 0x6F, 0x77, 0x7C, 0x39, 0x5E, 0x79, 0x71,
)

DISPLAY_COUNT = 6


def encode_digit(value: int) -> int:
    """Return the segment code for a hexadecimal digit 0-15."""
    if not 0 <= value < len(DIGIT_CODES):
        raise ValueError(f"digit out of range: {value}")
    return DIGIT_CODES[value]


def encode_two_digits(value: int) -> int:
    """Encode 0-99 as tens in bits 8-15 and units in bits 0-7; larger values show 99."""
    if value < 0:
        raise ValueError(f"negative value: {value}")
    tens, units = divmod(min(value, 99), 10)
    return (encode_digit(tens) << 8) | encode_digit(units)


def place_on_display(code: int, position: int) -> tuple[int, int]:
    """Return the (HEX3-0, HEX5-4) register values lighting only display ``position``."""
    if not 0 <= position < DISPLAY_COUNT:
        raise ValueError(f"display position out of range: {position}")
    if position < 4:
        return code << (8 * position), 0
    return 0, code << (8 * (position - 4))