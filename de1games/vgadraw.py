"""Interactive drawing of lines, circles and rectangles on the VGA screen."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Callable, MutableMapping, Optional, Sequence, TextIO, Tuple

from de1games.board import DEFAULT_DEVICE, Board, BoardError
from de1games.graphics import Canvas, Color, color_from_name

_ALIASES = {
    "1": "COLOR", "COLOR": "COLOR",
    "2": "LINE", "LINE": "LINE",
    "3": "CIRC", "CIRC": "CIRC",
    "4": "RECT", "RECT": "RECT",
    "5": "TILE", "TILE": "TILE",
    "6": "FUNDO", "FUNDO": "FUNDO",
    "7": "SAIR", "SAIR": "SAIR",
}

_SHAPES = {
    "LINE": (4, "LINE x0 y0 x1 y1"),
    "CIRC": (3, "CIRC xc yc r"),
    "RECT": (4, "RECT x0 y0 x1 y1"),
    "TILE": (4, "TILE x0 y0 x1 y1"),
}

MENU = (
    "\n--- Menu de Opcoes Interativo ---\n"
    "Use: <COMANDO> <parametros>\n"
    "1. COLOR <cor>        - Define a cor (ex: RED, BLUE, ...)\n"
    "2. LINE <x0 y0 x1 y1>   - Desenha uma linha\n"
    "3. CIRC <xc yc r>     - Desenha um circulo\n"
    "4. RECT <x0 y0 x1 y1>   - Desenha um retangulo\n"
    "5. TILE <x0 y0 x1 y1>   - Desenha retangulo preenchido\n"
    "6. FUNDO              - Preenche a tela\n"
    "7. SAIR               - Termina o programa\n"
)


@dataclass(frozen=True)
class Command:
    """A parsed command: its canonical name and its arguments."""

    name: str
    args: Tuple = ()


def parse_command(line: str) -> Optional[Command]:
    """Parse one input line; return None for a blank line.

    Raises ValueError for an unknown command or badly formed parameters.
    """
    text = line.split("\n", 1)[0].upper()
    parts = text.split(None, 1)
    if not parts:
        return None
    word = parts[0]
    params = parts[1] if len(parts) > 1 else ""

    name = _ALIASES.get(word)
    if name is None:
        raise ValueError(f"Comando desconhecido: {word}")
    if name == "COLOR":
        return Command(name, (params,))
    if name in _SHAPES:
        count, usage = _SHAPES[name]
        try:
            numbers = tuple(int(token) for token in params.split()[:count])
        except ValueError:
            numbers = ()
        if len(numbers) != count:
            raise ValueError(f"Formato invalido. Use: {usage}")
        return Command(name, numbers)
    return Command(name)


def _set_color(name: str, state: MutableMapping, out: TextIO) -> None:
    try:
        state["color"] = color_from_name(name)
    except ValueError:
        out.write(f"Cor '{name}' invalida!\n")
        return
    out.write(f"Cor definida como {name}\n")


def execute(canvas: Canvas, command: Command, state: MutableMapping, out: TextIO) -> bool:
    """Carry out ``command`` with the colour in ``state["color"]``; return False to quit."""
    name = command.name
    if name == "SAIR":
        return False
    if name == "COLOR":
        _set_color(command.args[0], state, out)
    elif name == "FUNDO":
        canvas.fill(state["color"])
        out.write("Tela preenchida com a cor atual.\n")
    elif name in _SHAPES:
        draw = {
            "LINE": canvas.draw_line,
            "CIRC": canvas.draw_circle,
            "RECT": canvas.draw_rect,
            "TILE": canvas.draw_tile,
        }[name]
        draw(*command.args, state["color"])
    else:
        raise ValueError(f"Comando desconhecido: {name}")
    return True


def run_demo(
    canvas: Canvas,
    state: MutableMapping,
    out: TextIO,
    pause: Callable[[float], None] = time.sleep,
) -> None:
    """Draw the fixed demonstration sequence, leaving the colour set to white."""
    out.write("\n--- Iniciando Sequencia de Demonstracao Automatica ---\n")
    pause(1)

    out.write("\n[Teste 1] Preenchendo o fundo com a cor GRAY...\n")
    _set_color("GRAY", state, out)
    canvas.fill(state["color"])
    pause(2)

    out.write("[Teste 2] Desenhando um circulo PURPLE (xc=160, yc=120, raio=100)...\n")
    _set_color("PURPLE", state, out)
    canvas.draw_circle(160, 120, 100, state["color"])
    pause(2)

    out.write(
        "[Teste 3] Desenhando um retangulo preenchido CYAN de (x=20, y=180) a (x=300, y=220)...\n"
    )
    _set_color("CYAN", state, out)
    canvas.draw_tile(20, 180, 300, 220, state["color"])
    pause(2)

    out.write("[Teste 4] Desenhando uma linha WHITE de (x=10, y=10) a (x=310, y=230)...\n")
    _set_color("WHITE", state, out)
    canvas.draw_line(10, 10, 310, 230, state["color"])
    pause(2)

    out.write("[Teste 5] Desenhando um retangulo vazado RED de (x=-50, y=-50) a (x=10, y=10)...\n")
    _set_color("RED", state, out)
    canvas.draw_rect(-50, -50, 10, 10, state["color"])
    pause(2)

    out.write("\n--- Demonstracao Concluida ---\n")
    _set_color("WHITE", state, out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the board, run the demo and then the command prompt; return the exit status."""
    parser = argparse.ArgumentParser(description="Draw shapes on the VGA screen.")
    parser.add_argument("--device", default=DEFAULT_DEVICE, help="physical memory device")
    args = parser.parse_args(argv)

    try:
        board = Board.open(args.device)
    except BoardError as exc:
        print(exc, file=sys.stderr)
        return 1

    out = sys.stdout
    with board:
        if board.screen is None:
            print("the board has no screen", file=sys.stderr)
            return 1
        canvas = Canvas(board.screen)
        state = {"color": Color.WHITE}
        out.write("Sistema de desenho VGA - DE1-SoC (Linux on ARMv7)\n")
        out.write("Tela VGA inicializada com sucesso.\n")
        run_demo(canvas, state, out)

        while True:
            out.write(MENU)
            out.write("> ")
            out.flush()
            line = sys.stdin.readline()
            if not line:
                break
            try:
                command = parse_command(line)
            except ValueError as exc:
                out.write(f"{exc}\n")
                continue
            if command is not None and not execute(canvas, command, state, out):
                break
    print("\nRecursos da VGA liberados. Saindo.")
    return 0