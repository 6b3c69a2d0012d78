# upwords

A small library that keeps the board of an Upwords-style word game. The board
is a grid of letter tiles, and each square holds a stack of tiles up to five
high.

Everything lives in the `upwords.game` module. The package has no
dependencies outside the standard library. The `test` extra installs pytest.

## Boards

A board is plain text with one line per row. A `.` is an empty square. Any
other character is a tile with a stack height of one. Rows shorter than the
longest row are padded with empty squares.

```python
from upwords.game import GameState, Direction

game = GameState.from_file("board.txt")
# or: game = GameState.from_text("....\n.CAT\n....\n")

game.rows, game.cols      # board size
game.board                # list of rows of single-character strings
game.heights              # list of rows of stack heights
```

## Placing tiles

`place_tiles(row, col, direction, tiles)` lays a string of tiles from a
starting square and returns the number of tiles it placed. `direction` is
`Direction.HORIZONTAL` or `Direction.VERTICAL`, or the strings `"H"` or `"V"`.

```python
placed = game.place_tiles(1, 1, Direction.VERTICAL, "CAT")
```

How placement works:

- A space in `tiles` skips the square underneath and leaves it unchanged.
- Every other tile replaces the letter on its square and adds one to that
  square's stack height.
- The board grows to the right or downward when the tiles run past its edge.
- A square whose stack is already five high is left as it is, so no stack
  grows above five.
- The call places nothing and returns `0` if the starting square is off the
  board or the direction is not recognised.

## Checking a move

`place_tiles` does not apply word rules by itself. Two separate checks are
available for that.

`covers_only_existing_tiles(row, col, direction, tiles)` returns `True` when
every tile would land on an identical letter that is already on the board.

`is_valid_placement(row, col, direction, tiles, words)` returns `True` only
when all of the following hold:

- the letters along the run, with spaces filled in from the board, spell a
  word in `words`;
- at least one new letter lands on an empty square;
- the move connects to an existing tile through a space;
- no tile repeats the letter already beneath it.

`load_words(path)` reads a word list with one word per line and returns it as
a `frozenset`:

```python
from upwords.game import load_words

words = load_words("words.txt")
ok = game.is_valid_placement(2, 3, Direction.HORIZONTAL, "CA LE", words)
```

## Saving

`to_text()` returns the board followed by a grid of stack heights, one digit
per square, with each row ending in a newline. `save(path)` writes that text
to a file.

## What it does not do

- There is no command-line program and no interactive game; the package is a
  library only.
- No placement history is kept. `undo_place_tiles()` returns the game
  unchanged.
- Players, turns and scoring are not tracked.