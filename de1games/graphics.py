"""Drawing primitives on an RGB565 framebuffer: shapes, lines and a small digit font."""

from __future__ import annotations

from enum import IntEnum

from de1games.board import VISIBLE_HEIGHT, VISIBLE_WIDTH, Framebuffer


class Color(IntEnum):
    """Named RGB565 colours."""

    BLACK = 0x0000
    RED = 0xF800
    GREEN = 0x07E0
    BLUE = 0x001F
    GRAY = 0x8410
    WHITE = 0xFFFF
    YELLOW = 0xFFE0
    CYAN = 0x07FF
    MAGENTA = 0xF81F
    ORANGE = 0xFC00
    PURPLE = 0x780F
    BROWN = 0xA145
    PINK = 0xF81F
    LIME = 0x07F0
    NAVY = 0x000F
    TEAL = 0x0410


def color_from_name(name: str) -> Color:
    """Return the colour called ``name`` (upper case, exact); raise ValueError otherwise."""
    try:
        return Color[name]
    except KeyError:
        raise ValueError(f"invalid colour {name!r}") from None


FONT_WIDTH = 3
FONT_HEIGHT = 5
FONT_CHAR_SPACING = 2
FONT_SCALE = 2

FONT_3X5 = (
    ((1, 1, 1), (1, 0, 1), (1, 0, 1), (1, 0, 1), (1, 1, 1)),
    ((0, 1, 0), (1, 1, 0), (0, 1, 0), (0, 1, 0), (1, 1, 1)),
    ((1, 1, 1), (0, 0, 1), (1, 1, 1), (1, 0, 0), (1, 1, 1)),
    ((1, 1, 1), (0, 0, 1), (0, 1, 1), (0, 0, 1), (1, 1, 1)),
    ((1, 0, 1), (1, 0, 1), (1, 1, 1), (0, 0, 1), (0, 0, 1)),
    ((1, 1, 1), (1, 0, 0), (1, 1, 1), (0, 0, 1), (1, 1, 1)),
    ((1, 1, 1), (1, 0, 0), (1, 1, 1), (1, 0, 1), (1, 1, 1)),
    ((1, 1, 1), (0, 0, 1), (0, 1, 0), (0, 1, 0), (0, 1, 0)),
    ((1, 1, 1), (1, 0, 1), (1, 1, 1), (1, 0, 1), (1, 1, 1)),
    ((1, 1, 1), (1, 0, 1), (1, 1, 1), (0, 0, 1), (1, 1, 1)),
)


class Canvas:
    """Clipped drawing operations on a framebuffer's visible area."""

    width = VISIBLE_WIDTH
    height = VISIBLE_HEIGHT

    def __init__(self, framebuffer: Framebuffer):
        self.framebuffer = framebuffer

    def set_pix(self, x: int, y: int, color: int) -> None:
        """Set one pixel; points outside the visible area are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.framebuffer.set_pixel(x, y, color)

    def fill(self, color: int) -> None:
        """Paint the whole visible area."""
        self.framebuffer.fill(color)

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Fill the half-open rectangle [x0, x1) x [y0, y1)."""
        xs = range(max(x0, 0), min(x1, self.width))
        for y in range(max(y0, 0), min(y1, self.height)):
            for x in xs:
                self.framebuffer.set_pixel(x, y, color)

    def fill_circle(self, xc: int, yc: int, r: int, color: int) -> None:
        """Fill every point within distance ``r`` of (xc, yc)."""
        for dy in range(-r, r + 1):
            for dx in range(-r, r + 1):
                if dx * dx + dy * dy <= r * r:
                    self.set_pix(xc + dx, yc + dy, color)

    def draw_digit(self, digit: int, x: int, y: int, color: int) -> None:
        """Draw a 0-9 digit in the scaled 3x5 font with its top-left at (x, y)."""
        if not 0 <= digit <= 9:
            return
        for row, bits in enumerate(FONT_3X5[digit]):
            for col, bit in enumerate(bits):
                if bit:
                    left = x + col * FONT_SCALE
                    top = y + row * FONT_SCALE
                    self.fill_rect(left, top, left + FONT_SCALE, top + FONT_SCALE, color)

    def draw_number(self, value: int, x: int, y: int, color: int) -> None:
        """Draw ``value`` right-aligned so that its last digit ends just before ``x``."""
        cursor = x
        for char in reversed(str(value)):
            cursor -= FONT_WIDTH * FONT_SCALE
            if char.isdigit():
                self.draw_digit(int(char), cursor, y, color)
            cursor -= FONT_CHAR_SPACING

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a line between two points, both ends included."""
        dx, sx = abs(x1 - x0), (1 if x0 < x1 else -1)
        dy, sy = -abs(y1 - y0), (1 if y0 < y1 else -1)
        err = dx + dy
        while True:
            self.set_pix(x0, y0, color)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def draw_circle(self, xc: int, yc: int, r: int, color: int) -> None:
        """Draw the outline of a circle of radius ``r`` centred on (xc, yc)."""
        x, y, err = -r, 0, 2 - 2 * r
        while True:
            self.set_pix(xc - x, yc + y, color)
            self.set_pix(xc - y, yc - x, color)
            self.set_pix(xc + x, yc - y, color)
            self.set_pix(xc + y, yc + x, color)
            e2 = err
            if e2 <= y:
                y += 1
                err += y * 2 + 1
            if e2 > x or err > y:
                x += 1
                err += x * 2 + 1
            if x >= 0:
                break

    def draw_rect(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw the outline of the rectangle with corners (x0, y0) and (x1, y1)."""
        self.draw_line(x0, y0, x1, y0, color)
        self.draw_line(x1, y0, x1, y1, color)
        self.draw_line(x1, y1, x0, y1, color)
        self.draw_line(x0, y1, x0, y0, color)

    def draw_tile(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Fill the rectangle with corners (x0, y0) and (x1, y1), edges included."""
        xmin, xmax = sorted((x0, x1))
        ymin, ymax = sorted((y0, y1))
        self.fill_rect(xmin, ymin, xmax + 1, ymax + 1, color)