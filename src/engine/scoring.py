"""Standard Boggle scoring."""

from typing import Dict

MIN_WORD_LENGTH = 3

# Points by letter count; words of 8 or more letters score LONG_WORD_POINTS
WORD_POINTS: Dict[int, int] = {
    3: 1,
    4: 1,
    5: 2,
    6: 3,
    7: 5,
}
LONG_WORD_POINTS = 11


def score_word(word: str) -> int:
    """Points for a word by its letter count (a QU tile counts as two letters)."""
    length = len(word)
    if length < MIN_WORD_LENGTH:
        return 0
    return WORD_POINTS.get(length, LONG_WORD_POINTS)
