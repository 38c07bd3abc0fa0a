"""
The Boggle board: a rows x cols grid of dice with 8-neighbor adjacency.

Dice are stored row-major. A die keeps its position for the lifetime of the
board; shuffle_and_roll only changes which face each die shows.
"""

import random
from typing import List, Optional, Sequence, Tuple
from pydantic import BaseModel, Field, ConfigDict, model_validator

from .die import Die
from .models import Cell, Tile, STANDARD_DICE


NUMBER_OF_DICE = len(STANDARD_DICE)

# Row-major offsets of the 8 surrounding cells
_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def grid_cells(rows: int, cols: int) -> List[Cell]:
    """All cells of a rows x cols grid in row-major order."""
    return [Cell(r, c) for r in range(rows) for c in range(cols)]


def check_cell(rows: int, cols: int, cell: Cell) -> Cell:
    """Return `cell` as a Cell, or raise IndexError if it is off the grid."""
    row, col = cell
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexError(f"Cell {tuple(cell)} is outside a {rows}x{cols} board")
    return Cell(row, col)


def grid_neighbors(rows: int, cols: int, cell: Cell) -> List[Cell]:
    """The in-bounds cells adjacent to `cell`, in row-major order."""
    row, col = check_cell(rows, cols, cell)
    return [
        Cell(row + dr, col + dc)
        for dr, dc in _OFFSETS
        if 0 <= row + dr < rows and 0 <= col + dc < cols
    ]


def render_labels(labels: Sequence[Sequence[str]]) -> str:
    """Render rows of labels as text, padding cells so `QU` lines up."""
    width = max((len(label) for row in labels for label in row), default=1)
    return "\n".join(" ".join(label.ljust(width) for label in row).rstrip() for row in labels)


class LabelGrid(BaseModel):
    """Immutable snapshot of the labels a board is showing."""

    model_config = ConfigDict(frozen=True)

    rows: int
    cols: int
    labels: Tuple[Tuple[str, ...], ...]

    def cells(self) -> List[Cell]:
        return grid_cells(self.rows, self.cols)

    def neighbors_of(self, cell: Cell) -> List[Cell]:
        return grid_neighbors(self.rows, self.cols, cell)

    def label_at(self, cell: Cell) -> str:
        row, col = check_cell(self.rows, self.cols, cell)
        return self.labels[row][col]

    def render(self) -> str:
        return render_labels(self.labels)


class Board(BaseModel):
    """
    A grid of dice.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        dice: The dice in row-major order, exactly rows * cols of them;
            the sequence is fixed, only the faces showing change
        seed: Optional random seed; each die gets its own seed derived from it
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    rows: int = Field(default=4, ge=1)
    cols: int = Field(default=4, ge=1)
    dice: Tuple[Die, ...] = Field(default=(), frozen=True)
    seed: Optional[int] = None

    @model_validator(mode="after")
    def _dice_fill_grid(self) -> "Board":
        if len(self.dice) != self.rows * self.cols:
            raise ValueError(
                f"A {self.rows}x{self.cols} board needs {self.rows * self.cols} dice, "
                f"got {len(self.dice)}"
            )
        return self

    @classmethod
    def create(
        cls,
        dice_faces: Sequence[Sequence[str]] = STANDARD_DICE,
        rows: int = 4,
        cols: int = 4,
        seed: Optional[int] = None,
    ) -> "Board":
        """
        Factory method to create a board from per-die face lists.

        Args:
            dice_faces: One face list per die, row-major
            rows: Number of rows
            cols: Number of columns
            seed: Optional random seed for reproducibility

        Returns:
            A new Board with every die rolled

        Raises:
            ValueError: If a face list is empty or the dice don't fill the grid
        """
        rng = random.Random(seed)
        dice = []
        for faces in dice_faces:
            die_seed = rng.getrandbits(64) if seed is not None else None
            dice.append(Die(faces=list(faces), seed=die_seed))
        return cls(rows=rows, cols=cols, dice=dice, seed=seed)

    @classmethod
    def from_labels(cls, labels: Sequence[Sequence[str]]) -> "Board":
        """
        Create a fixed board from a grid of labels.

        Each cell gets a one-sided die, so rolling never changes the board.
        """
        if not labels or not labels[0]:
            raise ValueError("Board needs at least one row and one column")
        cols = len(labels[0])
        if any(len(row) != cols for row in labels):
            raise ValueError("All board rows must have the same length")
        dice = [Die(faces=[label]) for row in labels for label in row]
        return cls(rows=len(labels), cols=cols, dice=dice)

    def _index(self, cell: Cell) -> int:
        row, col = check_cell(self.rows, self.cols, cell)
        return row * self.cols + col

    def cells(self) -> List[Cell]:
        """All cells in row-major order."""
        return grid_cells(self.rows, self.cols)

    def neighbors_of(self, cell: Cell) -> List[Cell]:
        """The up to 8 cells adjacent to `cell`, in row-major order."""
        return grid_neighbors(self.rows, self.cols, cell)

    def label_at(self, cell: Cell) -> str:
        """The label currently shown by the die at `cell`."""
        return self.dice[self._index(cell)].get_value()

    def tile_at(self, cell: Cell) -> Tile:
        """The tile currently shown by the die at `cell`."""
        return self.dice[self._index(cell)].tile

    def die_at(self, cell: Cell) -> Die:
        """A copy of the die at `cell`."""
        return self.dice[self._index(cell)].clone()

    def get_dice(self) -> List[Die]:
        """Return a new list of independent copies of the dice, row-major."""
        return [die.clone() for die in self.dice]

    def shuffle_and_roll(self) -> None:
        """Re-roll every die in place. Die positions don't change."""
        for die in self.dice:
            die.roll()

    def snapshot(self) -> LabelGrid:
        """Return an immutable copy of the labels currently showing."""
        labels = tuple(
            tuple(self.dice[r * self.cols + c].get_value() for c in range(self.cols))
            for r in range(self.rows)
        )
        return LabelGrid(rows=self.rows, cols=self.cols, labels=labels)

    def render(self) -> str:
        """Render the board to a string, one row per line."""
        return self.snapshot().render()
