"""Data models for the Boggle engine."""

from typing import List, Optional, NamedTuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# Standard Boggle dice, one face list per die (16 dice, 6 faces each)
STANDARD_DICE: List[List[str]] = [
    ["A", "A", "E", "E", "G", "N"], ["E", "L", "R", "T", "T", "Y"],
    ["W", "A", "O", "O", "T", "T"], ["A", "B", "B", "J", "O", "O"],
    ["E", "H", "R", "T", "V", "W"], ["C", "I", "M", "O", "T", "U"],
    ["D", "I", "S", "T", "T", "Y"], ["E", "I", "O", "S", "S", "T"],
    ["Y", "D", "E", "L", "R", "V"], ["A", "C", "H", "O", "P", "S"],
    ["U", "H", "I", "M", "N", "QU"], ["E", "E", "I", "N", "S", "U"],
    ["E", "E", "G", "H", "N", "W"], ["A", "F", "F", "K", "P", "S"],
    ["H", "L", "N", "N", "R", "Z"], ["X", "D", "E", "I", "L", "R"],
]


def fold_word(word: str) -> str:
    """Canonical form of a word or label for matching: case-folded, then uppercased."""
    return word.casefold().upper()


class Cell(NamedTuple):
    """A grid coordinate on the board."""
    row: int
    col: int


class Tile(BaseModel):
    """A single labeled die face, the unit of text placed at a cell."""
    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1)
    id: str

    @field_validator("label")
    @classmethod
    def _uppercase(cls, value: str) -> str:
        return fold_word(value)


class WordCheck(BaseModel):
    """Result of checking a single word against the board and lexicon."""
    word: str
    valid: bool
    in_lexicon: bool = False
    path: Optional[List[Cell]] = None
    reason: Optional[str] = None  # EMPTY_WORD, NOT_IN_LEXICON, NOT_ON_BOARD, ALREADY_FOUND
    points: int = 0


class BoggleConfig(BaseModel):
    """Configuration for a Boggle game."""
    rows: int = Field(default=4, ge=1)
    cols: int = Field(default=4, ge=1)
    dice: List[List[str]] = Field(default_factory=lambda: [list(d) for d in STANDARD_DICE])
    seed: Optional[int] = None
    dictionary: Optional[str] = None  # Path to a word list; None uses the bundled one

    @field_validator("dice")
    @classmethod
    def _faces_not_empty(cls, dice: List[List[str]]) -> List[List[str]]:
        for i, faces in enumerate(dice):
            if not faces:
                raise ValueError(f"Die {i} has no faces")
            if any(not face for face in faces):
                raise ValueError(f"Die {i} has an empty face label")
        return dice

    @model_validator(mode="after")
    def _dice_fill_grid(self) -> "BoggleConfig":
        if len(self.dice) != self.rows * self.cols:
            raise ValueError(
                f"A {self.rows}x{self.cols} board needs {self.rows * self.cols} dice, "
                f"got {len(self.dice)}"
            )
        return self
