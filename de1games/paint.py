"""Fill the VGA screen with a colour typed by name."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence, TextIO

from de1games.board import DEFAULT_DEVICE, Board, BoardError
from de1games.graphics import Canvas, Color, color_from_name

QUIT_WORD = "SAIR"

_PROMPT = (
    "\nDigite um nome de cor ou 'SAIR' para finalizar.\n"
    "Cores: RED, GREEN, BLUE, WHITE, BLACK, YELLOW, PURPLE, ORANGE, etc.\n"
    "> "
)


def run(canvas: Canvas, lines: Iterable[str], out: TextIO) -> Color:
    """Read colour names from ``lines`` and fill the screen; return the final colour.

    Input is upper-cased; ``SAIR`` or the end of input stops the loop.
    """
    current = Color.BLACK
    canvas.fill(current)
    out.write("Programa para preencher a tela VGA.\n")

    source = iter(lines)
    while True:
        out.write(_PROMPT)
        out.flush()
        line = next(source, None)
        if line is None:
            break
        name = line.split("\n", 1)[0].upper()
        if name == QUIT_WORD:
            break
        try:
            current = color_from_name(name)
        except ValueError:
            out.write(f"ERRO: Cor '{name}' invalida!\n")
            continue
        out.write(f"Cor definida como {name}.\n")
        canvas.fill(current)
        out.write("Tela preenchida com a nova cor.\n")
    return current


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the board and run the colour prompt; return the process exit status."""
    parser = argparse.ArgumentParser(description="Fill the VGA screen with a named colour.")
    parser.add_argument("--device", default=DEFAULT_DEVICE, help="physical memory device")
    args = parser.parse_args(argv)

    try:
        board = Board.open(args.device)
    except BoardError as exc:
        print(exc, file=sys.stderr)
        return 1

    with board:
        if board.screen is None:
            print("the board has no screen", file=sys.stderr)
            return 1
        run(Canvas(board.screen), sys.stdin, sys.stdout)
    print("\nRecursos da VGA liberados. Saindo.")
    return 0