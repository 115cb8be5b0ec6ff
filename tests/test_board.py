import pytest

from de1games.board import (
    FRAME_SIZE,
    HEX3_0_OFFSET,
    HEX5_4_OFFSET,
    KEYS_OFFSET,
    LWIDTH,
    PERIPHERAL_SIZE,
    PIXEL_SIZE,
    SWITCHES_OFFSET,
    VISIBLE_HEIGHT,
    VISIBLE_WIDTH,
    Board,
    BoardError,
    Framebuffer,
    Registers,
)


def make_board():
    regs = bytearray(PERIPHERAL_SIZE)
    frame = bytearray(FRAME_SIZE)
    return Board(Registers(regs), Framebuffer(frame)), regs, frame


def test_register_round_trip():
    regs = Registers(bytearray(PERIPHERAL_SIZE))
    regs.write(SWITCHES_OFFSET, 0x3FF)
    assert regs.read(SWITCHES_OFFSET) == 0x3FF
    assert regs.read(KEYS_OFFSET) == 0


def test_register_is_little_endian():
    buffer = bytearray(PERIPHERAL_SIZE)
    Registers(buffer).write(HEX3_0_OFFSET, 0x063F)
    assert bytes(buffer[HEX3_0_OFFSET:HEX3_0_OFFSET + 4]) == b"\x3f\x06\x00\x00"


def test_register_write_truncates_to_32_bits():
    regs = Registers(bytearray(16))
    regs.write(4, (1 << 32) | 0x1234)
    assert regs.read(4) == 0x1234


@pytest.mark.parametrize("offset", [-4, 2, PERIPHERAL_SIZE, PERIPHERAL_SIZE - 2])
def test_register_bad_offset(offset):
    regs = Registers(bytearray(PERIPHERAL_SIZE))
    with pytest.raises(ValueError):
        regs.read(offset)


def test_framebuffer_pixel_round_trip():
    fb = Framebuffer(bytearray(FRAME_SIZE))
    fb.set_pixel(10, 20, 0xF800)
    assert fb.get_pixel(10, 20) == 0xF800
    assert fb.get_pixel(11, 20) == 0


def test_framebuffer_uses_line_stride():
    buffer = bytearray(FRAME_SIZE)
    fb = Framebuffer(buffer)
    fb.set_pixel(0, 1, 0xFFFF)
    start = LWIDTH * PIXEL_SIZE
    assert bytes(buffer[start:start + 2]) == b"\xff\xff"


@pytest.mark.parametrize("x,y", [(-1, 0), (VISIBLE_WIDTH, 0), (0, VISIBLE_HEIGHT), (0, -1)])
def test_framebuffer_out_of_range(x, y):
    fb = Framebuffer(bytearray(FRAME_SIZE))
    with pytest.raises(IndexError):
        fb.set_pixel(x, y, 1)
    with pytest.raises(IndexError):
        fb.get_pixel(x, y)


def test_framebuffer_too_small():
    with pytest.raises(ValueError):
        Framebuffer(bytearray(FRAME_SIZE - 1))


def test_fill_covers_visible_area_only():
    buffer = bytearray(FRAME_SIZE)
    fb = Framebuffer(buffer)
    fb.fill(0x841F)
    assert fb.get_pixel(0, 0) == 0x841F
    assert fb.get_pixel(VISIBLE_WIDTH - 1, VISIBLE_HEIGHT - 1) == 0x841F
    hidden = VISIBLE_WIDTH * PIXEL_SIZE
    assert bytes(buffer[hidden:hidden + 2]) == b"\x00\x00"


def test_copy_from():
    source = Framebuffer(bytearray(FRAME_SIZE))
    source.fill(0x07E0)
    source.set_pixel(5, 5, 0xFFFF)
    target = Framebuffer(bytearray(FRAME_SIZE))
    target.copy_from(source)
    assert target.get_pixel(5, 5) == 0xFFFF
    assert target.get_pixel(100, 100) == 0x07E0


def test_board_reads_inputs():
    board, regs, _ = make_board()
    board.registers.write(KEYS_OFFSET, 0b0110)
    board.registers.write(SWITCHES_OFFSET, 0x100)
    assert board.keys() == 0b0110
    assert board.switches() == 0x100


def test_board_leds_and_hex():
    board, _, _ = make_board()
    board.set_leds(0x2AA)
    board.set_hex(0x063F, 0x4F5B)
    assert board.registers.read(0) == 0x2AA
    assert board.registers.read(HEX3_0_OFFSET) == 0x063F
    assert board.registers.read(HEX5_4_OFFSET) == 0x4F5B


def test_close_blanks_displays_and_is_idempotent():
    board, _, _ = make_board()
    board.set_hex(0x3F, 0x06)
    board.close()
    board.close()
    assert board.registers.read(HEX3_0_OFFSET) == 0
    assert board.registers.read(HEX5_4_OFFSET) == 0


def test_context_manager_closes():
    board, _, _ = make_board()
    with board as entered:
        assert entered is board
        board.set_hex(0x7F, 0x7F)
    assert board.registers.read(HEX3_0_OFFSET) == 0


def test_open_missing_device(tmp_path):
    with pytest.raises(BoardError):
        Board.open(str(tmp_path / "missing"))


def test_open_unmappable_file(tmp_path):
    path = tmp_path / "mem"
    path.write_bytes(b"\x00" * 64)
    with pytest.raises(BoardError):
        Board.open(str(path))