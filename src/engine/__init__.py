"""Boggle engine: dice, board, path search and word validation."""

from .models import Cell, Tile, WordCheck, BoggleConfig, STANDARD_DICE
from .die import Die
from .board import Board, LabelGrid, NUMBER_OF_DICE
from .pathfinder import exists, find_path
from .validator import WordValidator
from .scoring import score_word
from .game import Boggle

__all__ = [
    # Models
    "Cell",
    "Tile",
    "WordCheck",
    "BoggleConfig",
    "STANDARD_DICE",
    # Board
    "Die",
    "Board",
    "LabelGrid",
    "NUMBER_OF_DICE",
    # Path search
    "exists",
    "find_path",
    # Validation
    "WordValidator",
    "score_word",
    # Game
    "Boggle",
]
