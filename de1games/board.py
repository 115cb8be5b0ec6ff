"""Memory-mapped access to the DE1-SoC peripherals and VGA framebuffer."""

from __future__ import annotations

import mmap
import os
import struct
from typing import Optional

PERIPHERAL_BASE = 0xFF200000
PERIPHERAL_SIZE = 0x00010000
LEDR_OFFSET = 0x0000
HEX3_0_OFFSET = 0x0020
HEX5_4_OFFSET = 0x0030
SWITCHES_OFFSET = 0x0040
KEYS_OFFSET = 0x0050

FRAME_BASE = 0xC8000000
LWIDTH = 512
VISIBLE_WIDTH = 320
VISIBLE_HEIGHT = 240
PIXEL_SIZE = 2
FRAME_SIZE = LWIDTH * VISIBLE_HEIGHT * PIXEL_SIZE

DEFAULT_DEVICE = "/dev/mem"

_WORD = struct.Struct("<I")
_PIXEL = struct.Struct("<H")


class BoardError(Exception):
    """Raised when the board's memory cannot be opened or mapped."""


class Registers:
    """32-bit little-endian registers laid out in a writable buffer."""

    def __init__(self, buffer):
        self._buffer = buffer

    def _check(self, offset: int) -> None:
        if offset % _WORD.size or not 0 <= offset <= len(self._buffer) - _WORD.size:
            raise ValueError(f"invalid register offset {offset:#x}")

    def read(self, offset: int) -> int:
        """Return the unsigned 32-bit value of the register at ``offset``."""
        self._check(offset)
        return _WORD.unpack_from(self._buffer, offset)[0]

    def write(self, offset: int, value: int) -> None:
        """Store ``value`` (truncated to 32 bits) in the register at ``offset``."""
        self._check(offset)
        _WORD.pack_into(self._buffer, offset, value & 0xFFFFFFFF)


class Framebuffer:
    """RGB565 pixel buffer with a line stride of ``LWIDTH`` pixels."""

    width = VISIBLE_WIDTH
    height = VISIBLE_HEIGHT

    def __init__(self, buffer):
        if len(buffer) < FRAME_SIZE:
            raise ValueError(f"framebuffer needs at least {FRAME_SIZE} bytes")
        self._buffer = buffer

    @staticmethod
    def _offset(x: int, y: int) -> int:
        if not (0 <= x < VISIBLE_WIDTH and 0 <= y < VISIBLE_HEIGHT):
            raise IndexError(f"pixel ({x}, {y}) is outside the visible area")
        return (y * LWIDTH + x) * PIXEL_SIZE

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour of the visible pixel at (x, y)."""
        return _PIXEL.unpack_from(self._buffer, self._offset(x, y))[0]

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Set the visible pixel at (x, y) to ``color``."""
        _PIXEL.pack_into(self._buffer, self._offset(x, y), color & 0xFFFF)

    def fill(self, color: int) -> None:
        """Paint the whole visible area with ``color``."""
        row = _PIXEL.pack(color & 0xFFFF) * VISIBLE_WIDTH
        line_bytes = LWIDTH * PIXEL_SIZE
        for y in range(VISIBLE_HEIGHT):
            start = y * line_bytes
            self._buffer[start:start + len(row)] = row

    def copy_from(self, other: "Framebuffer") -> None:
        """Copy the full frame of ``other`` into this buffer."""
        self._buffer[:FRAME_SIZE] = bytes(other._buffer[:FRAME_SIZE])


class Board:
    """The DE1-SoC board: keys, switches, LEDs, seven-segment displays and VGA."""

    def __init__(self, registers: Registers, screen: Optional[Framebuffer]):
        self.registers = registers
        self.screen = screen
        self._maps: list = []
        self._fd: Optional[int] = None
        self._closed = False

    @classmethod
    def open(cls, device: str = DEFAULT_DEVICE) -> "Board":
        """Map the framebuffer and peripheral window from ``device``."""
        flags = os.O_RDWR | getattr(os, "O_SYNC", 0)
        try:
            fd = os.open(device, flags)
        except OSError as exc:
            raise BoardError(f"cannot open {device}: {exc}") from exc

        maps = []
        try:
            access = dict(flags=mmap.MAP_SHARED, prot=mmap.PROT_READ | mmap.PROT_WRITE)
            maps.append(mmap.mmap(fd, FRAME_SIZE, offset=FRAME_BASE, **access))
            maps.append(mmap.mmap(fd, PERIPHERAL_SIZE, offset=PERIPHERAL_BASE, **access))
        except (OSError, ValueError) as exc:
            for mapping in maps:
                mapping.close()
            os.close(fd)
            raise BoardError(f"cannot map board memory: {exc}") from exc

        vga_map, peripheral_map = maps
        board = cls(Registers(peripheral_map), Framebuffer(vga_map))
        board._maps = maps
        board._fd = fd
        return board

    def keys(self) -> int:
        """Return the push-button register."""
        return self.registers.read(KEYS_OFFSET)

    def switches(self) -> int:
        """Return the slide-switch register."""
        return self.registers.read(SWITCHES_OFFSET)

    def set_leds(self, value: int) -> None:
        """Drive the red LEDs."""
        self.registers.write(LEDR_OFFSET, value)

    def set_hex(self, low: int, high: int) -> None:
        """Write the HEX3-0 and HEX5-4 seven-segment registers."""
        self.registers.write(HEX3_0_OFFSET, low)
        self.registers.write(HEX5_4_OFFSET, high)

    def close(self) -> None:
        """Blank the displays and release any mappings. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        self.set_hex(0, 0)
        for mapping in self._maps:
            mapping.close()
        self._maps = []
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None

    def __enter__(self) -> "Board":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()