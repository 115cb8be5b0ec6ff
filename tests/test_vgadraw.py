import io

import pytest

from de1games.board import FRAME_SIZE, Framebuffer
from de1games.graphics import Canvas, Color
from de1games.vgadraw import Command, execute, main, parse_command, run_demo


def make_canvas():
    return Canvas(Framebuffer(bytearray(FRAME_SIZE)))


@pytest.mark.parametrize("line", ["line 1 2 3 4", "2 1 2 3 4\n", "LINE 1 2 3 4 99"])
def test_parse_line_aliases(line):
    assert parse_command(line) == Command("LINE", (1, 2, 3, 4))


def test_parse_circle_and_negative_numbers():
    assert parse_command("circ -5 10 7") == Command("CIRC", (-5, 10, 7))


def test_parse_colour_keeps_rest_of_line_upper_cased():
    assert parse_command("1 red") == Command("COLOR", ("RED",))
    assert parse_command("color") == Command("COLOR", ("",))


@pytest.mark.parametrize("line", ["", "   ", "\n"])
def test_parse_blank_line_gives_none(line):
    assert parse_command(line) is None


def test_parse_bad_parameters_raise_usage():
    with pytest.raises(ValueError, match="Formato invalido. Use: LINE x0 y0 x1 y1"):
        parse_command("LINE 1 2")
    with pytest.raises(ValueError, match="Use: TILE"):
        parse_command("tile a b c d")


def test_parse_unknown_command():
    with pytest.raises(ValueError, match="Comando desconhecido: FOO"):
        parse_command("foo 1 2")


def test_execute_draws_line_in_current_colour():
    canvas = make_canvas()
    state = {"color": Color.RED}
    assert execute(canvas, Command("LINE", (0, 0, 5, 0)), state, io.StringIO()) is True
    assert canvas.framebuffer.get_pixel(3, 0) == Color.RED
    assert canvas.framebuffer.get_pixel(6, 0) == Color.BLACK


def test_execute_tile_includes_edges():
    canvas = make_canvas()
    state = {"color": Color.CYAN}
    execute(canvas, parse_command("tile 4 4 2 2"), state, io.StringIO())
    assert canvas.framebuffer.get_pixel(4, 4) == Color.CYAN
    assert canvas.framebuffer.get_pixel(2, 2) == Color.CYAN
    assert canvas.framebuffer.get_pixel(5, 5) == Color.BLACK


def test_execute_colour_then_fill():
    canvas = make_canvas()
    state = {"color": Color.WHITE}
    out = io.StringIO()
    execute(canvas, parse_command("color navy"), state, out)
    execute(canvas, parse_command("fundo"), state, out)
    assert state["color"] is Color.NAVY
    assert canvas.framebuffer.get_pixel(319, 239) == Color.NAVY
    assert "Cor definida como NAVY\n" in out.getvalue()
    assert "Tela preenchida com a cor atual." in out.getvalue()


def test_execute_invalid_colour_keeps_state():
    state = {"color": Color.WHITE}
    out = io.StringIO()
    execute(make_canvas(), Command("COLOR", ("PLAID",)), state, out)
    assert state["color"] is Color.WHITE
    assert "Cor 'PLAID' invalida!" in out.getvalue()


def test_execute_sair_returns_false():
    assert execute(make_canvas(), parse_command("7"), {"color": Color.WHITE}, io.StringIO()) is False


def test_run_demo_draws_sequence_and_resets_colour():
    canvas = make_canvas()
    state = {"color": Color.BLACK}
    pauses = []
    run_demo(canvas, state, io.StringIO(), pauses.append)
    fb = canvas.framebuffer
    assert pauses == [1, 2, 2, 2, 2, 2]
    assert state["color"] is Color.WHITE
    assert fb.get_pixel(0, 0) == Color.GRAY
    assert fb.get_pixel(160, 20) == Color.PURPLE
    assert fb.get_pixel(100, 200) == Color.CYAN
    assert fb.get_pixel(10, 10) == Color.RED
    assert fb.get_pixel(310, 230) == Color.WHITE


def test_main_reports_missing_device(tmp_path):
    assert main(["--device", str(tmp_path / "missing")]) == 1