"""Games and peripheral demos for the DE1-SoC board's VGA, keys, switches, LEDs and displays."""

__version__ = "0.1.0"