"""State and rules of the higher-or-lower guessing game."""

import enum
import random
from typing import Optional

from .numbers import atoi

DEFAULT_MAX_NUMBER = 10
END_OF_TRANSMISSION = "\x04"
HIGHER = "h"
LOWER = "l"


class Outcome(enum.Enum):
    """Result of comparing the current number with the next one."""

    TIE = "tie"
    WIN = "win"
    LOSS = "loss"


class QuitGame(Exception):
    """Raised when the player asks to leave the game."""


def resolve_max_number(arg: Optional[str]) -> int:
    """Return the upper bound of the range given on the command line.

    A missing argument, or one that parses below 2, gives the default of 10.
    """
    if arg is None:
        return DEFAULT_MAX_NUMBER
    value = atoi(arg)
    return DEFAULT_MAX_NUMBER if value < 2 else value


def parse_key(key: str) -> Optional[str]:
    """Turn a pressed key into a guess.

    Returns ``"h"`` or ``"l"`` for a valid guess and None for any other key.
    Raises :class:`QuitGame` for Ctrl-D or when the input has ended.
    """
    if key in (END_OF_TRANSMISSION, ""):
        raise QuitGame()
    if key in (HIGHER, LOWER):
        return key
    return None


class Game:
    """One round of play: the current number, the next one and the score."""

    def __init__(self, max_number: int, rng: Optional[random.Random] = None) -> None:
        if max_number < 1:
            raise ValueError("max_number must be at least 1")
        self.max_number = max_number
        self.rng = rng if rng is not None else random.Random()
        self.score = 0
        self.next_num = 0
        self.current_num = self.rng.randint(1, max_number)

    def draw_next(self) -> int:
        """Draw the number the player has to guess against."""
        self.next_num = self.rng.randint(1, self.max_number)
        return self.next_num

    def judge(self, guess: str) -> Outcome:
        """Compare the drawn number with the current one for ``guess``.

        A tie changes nothing. A right guess raises the score and makes the
        drawn number the current one.
        """
        if self.current_num == self.next_num:
            return Outcome.TIE
        went_higher = self.current_num < self.next_num
        if (went_higher and guess == HIGHER) or (not went_higher and guess == LOWER):
            self.score += 1
            self.current_num = self.next_num
            return Outcome.WIN
        return Outcome.LOSS