# geesespotter

This is a small puzzle game for the terminal, in the spirit of minesweeper.
Geese hide on a rectangular field. Your goal is to reveal every field that
has no goose without disturbing one.

## Installing

    pip install .

## Playing

    geesespotter

The same game also starts with `python -m geesespotter.game`.

The game first asks for three things:

- the board width, at most 60
- the board height, at most 20
- the number of geese, from 0 up to the number of fields

If an answer is out of range or is not a number, the game asks again.

Then choose an action each turn:

- `S` shows (reveals) the field at an x and y location.
- `M` marks a field you suspect holds a goose, or unmarks it.
- `R` restarts with a new board.
- `Q` quits.

Actions are case-insensitive. The game prints the board after every action:

- `*` is a hidden field.
- `M` is a marked field.
- A digit is a revealed field. It gives the number of geese next to that field.
- `9` is a goose.

Rules:

- Revealing a field with no neighbouring geese also reveals its eight unmarked neighbours. This does not spread any further.
- A marked field cannot be revealed until you unmark it.
- A field that is already revealed cannot be marked.
- A location off the board is rejected.
- If you reveal a goose, the game ends and a new one begins.
- When every goose-free field is revealed, you win. The whole board is shown and a new game starts.

The game also ends when input runs out.

## Using the board in code

`geesespotter.board.Board` holds the field and its rules:

- `spread_geese(count, rng)` places geese on distinct empty fields. `rng` is any object with a `randrange(stop)` method.
- `compute_neighbours()` sets each field to its count of neighbouring geese.
- `hide()` hides every field.
- `mark(x, y)` toggles the mark on a hidden field and returns a `MarkResult`.
- `reveal(x, y)` reveals a field and returns a `RevealResult`.
- `reveal_all()` clears every mark and hides nothing.
- `is_won()` tells whether every goose-free field is revealed.
- `render()` returns the board as text.

```python
import random
from geesespotter.board import Board, RevealResult

board = Board(5, 4)
board.spread_geese(3, random.Random(1))
board.compute_neighbours()
board.hide()

result = board.reveal(0, 0)
if result is RevealResult.GOOSE:
    print("Honk!")
print(board.render())
print(board.is_won())
```

Error cases:

- Locations off the board raise `IndexError`.
- Non-positive dimensions raise `ValueError`.
- Asking for more geese than there are empty fields raises `ValueError`.

`geesespotter.game.Game(input_stream, output_stream, rng)` runs the interactive
loop over any text streams. This makes it easy to script. For example, you can
feed it an `io.StringIO` and a seeded `random.Random`. `Game.run()` plays until
`Q` or until input runs out.

## Running the tests

    pip install .[test]
    pytest