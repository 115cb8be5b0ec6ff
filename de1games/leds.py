"""Mirror the slide switches SW0-SW9 onto the red LEDs LEDR0-LEDR9."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional, Sequence

from de1games.board import DEFAULT_DEVICE, Board, BoardError

DEFAULT_INTERVAL = 0.1


def mirror_switches(board: Board) -> int:
    """Copy the switch register to the LED register and return the value copied."""
    value = board.switches()
    board.set_leds(value)
    return value


def run(board: Board, interval: float = DEFAULT_INTERVAL) -> None:
    """Keep the LEDs in step with the switches until interrupted."""
    while True:
        mirror_switches(board)
        time.sleep(interval)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the board and mirror the switches; return the process exit status."""
    parser = argparse.ArgumentParser(description="Show the switch positions on the LEDs.")
    parser.add_argument("--device", default=DEFAULT_DEVICE, help="physical memory device")
    parser.add_argument("--interval", type=float, default=DEFAULT_INTERVAL, help="seconds between updates")
    args = parser.parse_args(argv)

    try:
        board = Board.open(args.device)
    except BoardError as exc:
        print(exc, file=sys.stderr)
        print("Falha ao inicializar periféricos.", file=sys.stderr)
        return 1

    print("Programa iniciado.")
    print("Movimente as chaves (SW0-SW9) e veja os LEDs (LEDR0-LEDR9) corresponderem.")
    print("Pressione CTRL+C para sair.", flush=True)
    with board:
        try:
            run(board, args.interval)
        except KeyboardInterrupt:
            pass
    return 0