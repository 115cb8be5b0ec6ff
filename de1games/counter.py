"""Count from 0 to 99 on the HEX1 and HEX0 seven-segment displays, forever."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Iterator, Optional, Sequence, Tuple

from de1games.board import DEFAULT_DEVICE, Board, BoardError
from de1games.sevenseg import encode_two_digits

DEFAULT_DELAY = 0.5
LAST_COUNT = 99


def count_values() -> Iterator[Tuple[int, int]]:
    """Yield (count, HEX3-0 register value) for each count from 0 to 99."""
    for count in range(LAST_COUNT + 1):
        yield count, encode_two_digits(count)


def run(board: Board, delay: float = DEFAULT_DELAY) -> None:
    """Show the count on the displays, repeating until interrupted."""
    while True:
        for count, code in count_values():
            board.set_hex(code, 0)
            print(f"Exibindo: {count:02d}\r", end="", flush=True)
            time.sleep(delay)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the board and count; return the process exit status."""
    parser = argparse.ArgumentParser(description="Count 0-99 on the seven-segment displays.")
    parser.add_argument("--device", default=DEFAULT_DEVICE, help="physical memory device")
    parser.add_argument("--delay", type=float, default=DEFAULT_DELAY, help="seconds per count")
    args = parser.parse_args(argv)

    try:
        board = Board.open(args.device)
    except BoardError as exc:
        print(exc, file=sys.stderr)
        print("Falha ao inicializar periféricos.", file=sys.stderr)
        return 1

    print("Iniciando contador de 0 a 99 nos displays de 7 segmentos.")
    print("A dezena será exibida no HEX1 e a unidade no HEX0.")
    print("Pressione CTRL+C para sair.", flush=True)
    with board:
        try:
            run(board, args.delay)
        except KeyboardInterrupt:
            pass
    return 0