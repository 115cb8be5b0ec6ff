"""A hexadecimal digit chosen on SW0-SW3 that walks across HEX0-HEX5."""

from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional, Sequence, Tuple

from de1games.board import DEFAULT_DEVICE, Board, BoardError
from de1games.sevenseg import DISPLAY_COUNT, encode_digit, place_on_display

DEFAULT_DELAY = 0.4
KEY_REVERSE = 0b0001
DIGIT_MASK = 0x0F

_DIRECTION_NAMES = {1: "Direita", -1: "Esquerda"}


class Marquee:
    """Position and direction of the moving digit.

    Messages about direction changes are appended to ``messages``.
    """

    def __init__(self):
        self.position = 0
        self.direction = 1
        self.prev_keys = 0
        self.digit = 0
        self.messages: List[str] = []

    def step(self, keys: int, switches: int) -> Tuple[int, int]:
        """Advance one frame; return the (HEX3-0, HEX5-4) register values to show.

        KEY0 pressed since the last frame reverses the direction. The digit is
        shown at the current position, then the position moves on, wrapping
        around the six displays.
        """
        self.digit = switches & DIGIT_MASK
        code = encode_digit(self.digit)

        if keys & KEY_REVERSE and not self.prev_keys & KEY_REVERSE:
            self.direction = -self.direction
            self.messages.append(
                f"Direção invertida! Sentido: {_DIRECTION_NAMES[self.direction]}"
            )
        self.prev_keys = keys

        registers = place_on_display(code, self.position)
        self.position = (self.position + self.direction) % DISPLAY_COUNT
        return registers


def run(board: Board, delay: float = DEFAULT_DELAY) -> None:
    """Move the digit across the displays until interrupted."""
    marquee = Marquee()
    while True:
        low, high = marquee.step(board.keys(), board.switches())
        for message in marquee.messages:
            print(message)
        marquee.messages.clear()
        board.set_hex(low, high)
        print(f"Dígito: {marquee.digit:X} | Posição: HEX{marquee.position} \r", end="", flush=True)
        time.sleep(delay)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the board and run the marquee; return the process exit status."""
    parser = argparse.ArgumentParser(description="Walk a hex digit across the seven-segment displays.")
    parser.add_argument("--device", default=DEFAULT_DEVICE, help="physical memory device")
    parser.add_argument("--delay", type=float, default=DEFAULT_DELAY, help="seconds per move")
    args = parser.parse_args(argv)

    try:
        board = Board.open(args.device)
    except BoardError as exc:
        print(exc, file=sys.stderr)
        print("Falha ao inicializar periféricos.", file=sys.stderr)
        return 1

    print("Iniciado. Use SW0-SW3 para escolher o dígito.")
    print("Pressione KEY0 para inverter o sentido.")
    print("Pressione CTRL+C para sair.", flush=True)
    with board:
        try:
            run(board, args.delay)
        except KeyboardInterrupt:
            pass
    return 0