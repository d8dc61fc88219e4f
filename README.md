# higher_lower

A small game for the terminal. A number is shown, and you guess whether the
next random number will be higher or lower.

## Playing

```
higher-lower          # numbers from 1 to 10
higher-lower 100      # numbers from 1 to 100
```

With no argument, the numbers run from 1 to 10. With one argument, they run
from 1 to that number. The argument is read as a leading integer, so `15abc`
counts as 15. An argument below 2, or text that does not start with a number,
falls back to 10. More than one argument is an error: the program prints
`0 ARGS FOR NORMAL RANGE, 1 ARG FOR CUSTOM` to standard error and exits with
status 1.

During play you press a single key. On a POSIX terminal you do not need to
press Enter, and the key is not echoed:

- `h` means the next number will be higher.
- `l` means the next number will be lower.
- `Ctrl-D` quits and prints your score. The end of input does the same.

Any other key is rejected with "Genius, " and you are asked again.

A correct guess adds one to your score, and the revealed number becomes the
current number. If the two numbers are equal, it is a tie: the score and the
current number stay the same and play goes on. A wrong guess ends the game
and prints your final score. There is a one-second pause between steps.

When standard input is not a terminal, or the platform has no `termios`
module, keys are read from it one character at a time as they arrive.

## Using it as a library

The game logic lives in `higher_lower.game`:

```python
import random
from higher_lower.game import Game, Outcome, parse_key, resolve_max_number

game = Game(resolve_max_number("20"), random.Random(42))
print(game.current_num)
game.draw_next()
outcome = game.judge(parse_key("h"))
if outcome is Outcome.WIN:
    print("score:", game.score)
```

- `resolve_max_number(arg)` turns the command-line argument (or `None`) into
  the top of the range.
- `parse_key(key)` returns `"h"` or `"l"`, `None` for any other key, and
  raises `QuitGame` for Ctrl-D or an empty string.
- `Game(max_number, rng)` holds `current_num`, `next_num` and `score`;
  `draw_next()` draws the next number and `judge(guess)` returns
  `Outcome.TIE`, `Outcome.WIN` or `Outcome.LOSS`. A `max_number` below 1
  raises `ValueError`.

`higher_lower.cli.play(game, read_key, out, pause)` runs a whole game and
returns the final score. You pass your own key reader, output stream and
pause function, so it can be driven from a script or from tests.
`higher_lower.terminal.getch(stream)` reads one key press.

## Helpers

- `higher_lower.printf` has `format_printf`, `printf` and `fprintf`, which
  handle `%c %s %p %d %i %u %x %X %%`. A `%` before any other character is
  kept as is; a lone `%` at the end of the format is dropped, and `printf`
  and `fprintf` then return -1 instead of the number of characters written.
- `higher_lower.strings` has `split`, `strtrim`, `substr`, `itoa` and
  `strnstr` (which returns an index, or `None` when there is no match).
- `higher_lower.numbers.atoi` parses a leading integer, wrapping to a signed
  32-bit value.
- `higher_lower.linereader.LineReader` reads a text or binary stream line by
  line, keeping newlines; `line_length` gives the length of a string up to
  its first newline.

## What it does not do

The game keeps no high scores and stores nothing between runs.