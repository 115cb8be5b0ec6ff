[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "de1games"
version = "0.1.0"
description = "Flappy Bird, Snake and small peripheral demos for the DE1-SoC board's VGA output, keys, switches, LEDs and seven-segment displays"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "de1-soc",
    "fpga",
    "vga",
    "framebuffer",
    "flappy-bird",
    "snake",
    "seven-segment",
    "embedded",
    "games",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
de1-flappy = "de1games.flappy_app:main"
de1-snake = "de1games.snake:main"
de1-leds = "de1games.leds:main"
de1-counter = "de1games.counter:main"
de1-marquee = "de1games.marquee:main"
de1-paint = "de1games.paint:main"
de1-vgadraw = "de1games.vgadraw:main"

[tool.hatch.build.targets.wheel]
packages = ["de1games"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
