"""Higher or lower: a terminal number-guessing game, with small text helpers."""

__version__ = "1.0.0"