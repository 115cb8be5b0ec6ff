# de1games

Small games and peripheral demos for the DE1-SoC board, running under the
Linux system on the board's ARM processor. The programs drive the VGA
framebuffer (320×240, RGB565), read the push buttons (KEY0–KEY3) and slide
switches (SW0–SW9), and write to the red LEDs and the six seven-segment
displays, all through memory-mapped registers from `/dev/mem`.

The game logic is kept apart from the hardware, so the games, drawing code
and display encoders can be used and tested on any machine.

## Installation

```
pip install de1games
```

No third-party libraries are needed. Opening `/dev/mem` on the board
normally requires root privileges.

## Commands

| Command       | What it does                                                        |
|---------------|---------------------------------------------------------------------|
| `de1-flappy`  | One- or two-player Flappy Bird on the VGA output                    |
| `de1-snake`   | Snake on an 8-pixel grid, steered with two keys                     |
| `de1-leds`    | Mirrors the switches on the red LEDs                                |
| `de1-counter` | Counts 0–99 repeatedly on HEX1/HEX0                                 |
| `de1-marquee` | Moves the hex digit set on SW0–SW3 across the six displays          |
| `de1-paint`   | Fills the screen with a colour typed by name                        |
| `de1-vgadraw` | Interactive line, circle, rectangle and tile drawing, after a demo  |

Every command accepts `--device PATH` (default `/dev/mem`). `de1-leds` also
takes `--interval SECONDS` (default 0.1); `de1-counter` and `de1-marquee`
take `--delay SECONDS` (defaults 0.5 and 0.4). `de1-leds`, `de1-counter`
and `de1-marquee` run until interrupted with Ctrl+C.

Run them on the board as root, for example:

```
sudo de1-flappy
```

### Flappy Bird controls

- KEY0 quits, KEY1 makes player 1 (yellow) jump, KEY2 makes player 2 (red) jump.
  After a game over, KEY1 or KEY2 starts a new round.
- SW1–SW0: pipe speed (2, 3, 4 or 5 pixels per frame).
- SW3–SW2: gap height (100, 90, 80 or 70 pixels).
- SW4: three closely spaced pipes instead of two.
- SW5: lighter gravity; SW6: stronger jump; SW7: larger bird.
- SW8: two-player mode; SW9: pause.

The combined score of the current round is drawn in the top-right corner of
the screen. The best score of each player is shown on HEX1/HEX0 and
HEX5/HEX4.

### Snake controls

KEY0 quits. From the start screen KEY1 or KEY2 starts a game; while playing,
KEY1 turns left and KEY2 turns right. Each piece of food is worth 10 points
and the game speeds up as the score grows. After a game over, KEY1 or KEY2
returns to the start screen.

### Marquee controls

SW0–SW3 choose the hexadecimal digit shown; KEY0 reverses the direction in
which it moves.

### Drawing commands (`de1-vgadraw`)

```
COLOR <name>         LINE x0 y0 x1 y1      CIRC xc yc r
RECT x0 y0 x1 y1     TILE x0 y0 x1 y1      FUNDO
SAIR
```

Commands may also be given by their number (1–7) and are not case
sensitive. Colour names are BLACK, RED, GREEN, BLUE, GRAY, WHITE, YELLOW,
CYAN, MAGENTA, ORANGE, PURPLE, BROWN, PINK, LIME, NAVY and TEAL.
`de1-paint` accepts the same names and `SAIR` to quit.

## Using the library

The games advance one frame per `step` call, taking the raw key and switch
register values, so they can be driven without a board:

```python
import random

from de1games.flappy import Difficulty, FlappyGame

game = FlappyGame(random.Random(1))
switches = 0b01_0000_0000          # SW8: two players
difficulty = Difficulty.from_switches(switches)
game.step(0b0010, switches)        # KEY1 pressed: player 1 jumps
```

`SnakeGame` in `de1games.snake` works the same way with `step(keys)`, and
`Marquee` in `de1games.marquee` returns the display register values from
`step(keys, switches)`.

Other building blocks:

- `de1games.sevenseg`: `encode_digit`, `encode_two_digits` and
  `place_on_display` produce seven-segment register values.
- `de1games.graphics`: `Canvas` draws pixels, filled rectangles and circles,
  lines, outlines and the 3×5 digit font onto a `Framebuffer`;
  `color_from_name` maps colour names to `Color` values.
- `de1games.board`: `Registers` and `Framebuffer` wrap any writable buffer,
  such as a `bytearray`; `Board.open` maps the peripherals and the
  framebuffer; `Board` is a context manager that blanks the seven-segment
  displays and releases the mappings on exit.
- `de1games.flappy_app`: `render_frame` draws a Flappy Bird frame onto a
  `Canvas`.

## What it does not do

The commands only run against the board's memory-mapped hardware. There is
no window or simulator for playing on a desktop machine; off the board the
games and drawing code are usable only as a library.

## Running the tests

```
pip install "de1games[test]"
pytest
```