"""Board state and tile placement for a stacking word game."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from typing import Union

EMPTY = "."
MAX_STACK_HEIGHT = 5

PathType = Union[str, "PathLike[str]"]


class Direction(str, Enum):
    """Direction in which a run of tiles is laid."""

    HORIZONTAL = "H"
    VERTICAL = "V"


def load_words(path: PathType) -> frozenset[str]:
    """Read a word list with one word per line."""
    with open(path, encoding="utf-8", newline="") as handle:
        return frozenset(line.rstrip("\n") for line in handle)


def _as_direction(direction: str | Direction) -> Direction | None:
    try:
        return Direction(direction)
    except ValueError:
        return None


@dataclass
class GameState:
    """A board of letters together with the stack height of every cell."""

    board: list[list[str]] = field(default_factory=list)
    heights: list[list[int]] = field(default_factory=list)

    @property
    def rows(self) -> int:
        return len(self.board)

    @property
    def cols(self) -> int:
        return len(self.board[0]) if self.board else 0

    @classmethod
    def from_text(cls, text: str) -> GameState:
        """Build a state from board text; short lines are padded with empty cells."""
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        width = max((len(line) for line in lines), default=0)
        board = [list(line.ljust(width, EMPTY)) for line in lines]
        heights = [[0 if cell == EMPTY else 1 for cell in row] for row in board]
        return cls(board=board, heights=heights)

    @classmethod
    def from_file(cls, path: PathType) -> GameState:
        """Load the initial board from a file."""
        with open(path, encoding="utf-8", newline="") as handle:
            return cls.from_text(handle.read())

    def _cell(self, row: int, col: int) -> str:
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self.board[row][col]
        return EMPTY

    def _grow(self, needed_rows: int, needed_cols: int) -> None:
        if needed_cols > self.cols:
            extra = needed_cols - self.cols
            for letters, stack in zip(self.board, self.heights):
                letters.extend(EMPTY * extra)
                stack.extend([0] * extra)
        width = self.cols if self.board else max(needed_cols, 0)
        while self.rows < needed_rows:
            self.board.append([EMPTY] * width)
            self.heights.append([0] * width)

    def place_tiles(self, row: int, col: int, direction: str | Direction, tiles: str) -> int:
        """Lay tiles from (row, col); spaces skip a cell. Returns the number placed.

        The board grows to fit the run. A cell already holding a full stack
        is left as it is; a corrupt stack stops placement at that point.
        """
        direction = _as_direction(direction)
        if direction is None or not (0 <= row < self.rows and 0 <= col < self.cols):
            return 0

        if direction is Direction.VERTICAL:
            self._grow(row + len(tiles), col + 1)
            step_row, step_col = 1, 0
        else:
            self._grow(row + 1, col + len(tiles))
            step_row, step_col = 0, 1

        placed = 0
        for offset, tile in enumerate(tiles):
            if tile == " ":
                continue
            r, c = row + offset * step_row, col + offset * step_col
            current, height = self.board[r][c], self.heights[r][c]
            if (current == EMPTY and height >= MAX_STACK_HEIGHT) or (
                current != EMPTY and height > MAX_STACK_HEIGHT
            ):
                return placed
            if current == EMPTY or height < MAX_STACK_HEIGHT:
                self.board[r][c] = tile
                self.heights[r][c] += 1
                placed += 1
        return placed

    def undo_place_tiles(self) -> GameState:
        """Placement history is not kept, so the state is returned unchanged."""
        return self

    def to_text(self) -> str:
        """Render the letter grid followed by the stack-height grid."""
        letters = "".join("".join(row) + "\n" for row in self.board)
        stacks = "".join("".join(str(h) for h in row) + "\n" for row in self.heights)
        return letters + stacks

    def save(self, path: PathType) -> None:
        """Write the rendered state to a file."""
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(self.to_text())

    def covers_only_existing_tiles(
        self, row: int, col: int, direction: str | Direction, tiles: str
    ) -> bool:
        """True when every tile lands on an identical existing letter."""
        direction = _as_direction(direction)
        for offset, tile in enumerate(tiles):
            if direction is Direction.HORIZONTAL:
                r, c = row, col + offset
                if c >= self.cols:
                    return False
            elif direction is Direction.VERTICAL:
                r, c = row + offset, col
                if r >= self.rows:
                    return False
            else:
                continue
            current = self._cell(r, c)
            if current == EMPTY or tile == " " or tile != current:
                return False
        return True

    def _simulated_word(self, row: int, col: int, direction: Direction | None, tiles: str) -> str:
        if direction is None:
            return ""
        letters = []
        for offset, tile in enumerate(tiles):
            if direction is Direction.VERTICAL:
                r, c, outside = row + offset, col, row + offset >= self.rows
            else:
                r, c, outside = row, col + offset, col + offset >= self.cols
            if outside:
                letters.append(tile)
            else:
                letters.append(self._cell(r, c) if tile == " " else tile)
        return "".join(letters)

    def is_valid_placement(
        self,
        row: int,
        col: int,
        direction: str | Direction,
        tiles: str,
        words: Collection[str],
    ) -> bool:
        """Check that a move forms a listed word, adds letters and joins existing tiles."""
        direction = _as_direction(direction)
        is_word = self._simulated_word(row, col, direction, tiles) in words

        connects = False
        new_letters = 0
        repeats_letter = False

        if direction is Direction.HORIZONTAL:
            for offset, tile in enumerate(tiles):
                current = self._cell(row, col + offset)
                if current == EMPTY:
                    new_letters += 1
                elif tile == " ":
                    connects = True
                elif tile != current:
                    return False
                else:
                    repeats_letter = True
        elif direction is Direction.VERTICAL:
            for offset, tile in enumerate(tiles):
                if row + offset >= self.rows:
                    continue
                current = self._cell(row + offset, col)
                if tile == " ":
                    if current == EMPTY:
                        return False
                    connects = True
                elif current == EMPTY:
                    new_letters += 1
                elif current == tile:
                    repeats_letter = True
                else:
                    return False

        return connects and new_letters > 0 and not repeats_letter and is_word