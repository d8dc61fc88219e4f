"""Command line entry point running the interactive game."""

import random
import sys
import time
from typing import Callable, List, Optional, TextIO

from .game import Game, Outcome, QuitGame, parse_key, resolve_max_number
from .printf import fprintf
from .terminal import getch

_PAUSE_SECONDS = 1


def _read_guess(game: Game, read_key: Callable[[], str], out: TextIO) -> str:
    """Prompt until a valid guess is pressed; raise QuitGame on quit."""
    while True:
        fprintf(out, "press 'h' or 'l': ")
        key = read_key()
        guess = parse_key(key)
        fprintf(out, "\nKEY PRESSED: %c\n", key)
        if guess is not None:
            return guess
        fprintf(out, "Genius, ")


def play(
    game: Game,
    read_key: Callable[[], str],
    out: TextIO,
    pause: Callable[[float], None],
) -> int:
    """Run rounds until the player loses or quits; return the final score."""
    while True:
        fprintf(out, "\nCURRENT NUMBER IS: %d\nWILL IT BE HIGHER OR LOWER?\n",
                game.current_num)
        try:
            guess = _read_guess(game, read_key, out)
        except QuitGame:
            fprintf(out, "\nKEY PRESSED: EXIT\nYOUR SCORE IS: %d\n", game.score)
            return game.score
        game.draw_next()
        pause(_PAUSE_SECONDS)
        fprintf(out, "NEXT NUMBER NUMBER IS: %d\n", game.next_num)
        pause(_PAUSE_SECONDS)
        outcome = game.judge(guess)
        if outcome is Outcome.TIE:
            fprintf(out, "\nIT'S A TIE :D\n")
        elif outcome is Outcome.WIN:
            fprintf(out, "\nCONGRATULATIONS! YOUR SCORE IS NOW: %d\n", game.score)
        else:
            pause(_PAUSE_SECONDS)
            fprintf(out, "\nGAME OVER! :(\nYOUR SCORE IS: %d\n", game.score)
            return game.score


def main(argv: Optional[List[str]] = None) -> int:
    """Start the game; an optional single argument sets the top of the range."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        fprintf(sys.stderr, "0 ARGS FOR NORMAL RANGE, 1 ARG FOR CUSTOM")
        return 1
    game = Game(resolve_max_number(args[0] if args else None), random.Random())
    out = sys.stdout
    pause = time.sleep
    fprintf(out, "WELCOME TO HIGHER OR LOWER GAME\n")
    pause(_PAUSE_SECONDS)
    fprintf(out, "GUESS IF THE NEXT NUMBER WILL BE HIGHER OR LOWER!\n")
    pause(_PAUSE_SECONDS)
    fprintf(out, "NUMBERS RANGE BETWEEN 1 AND %d\n", game.max_number)
    pause(_PAUSE_SECONDS)
    play(game, getch, out, pause)
    return 0


if __name__ == "__main__":
    sys.exit(main())