"""
Word validation: a word counts if it is in the lexicon AND can be traced on
the board.

The lexicon lookup runs first because it is a set membership test; the path
search only runs for dictionary words.
"""

from .board import Board
from .models import WordCheck, fold_word
from .pathfinder import exists, find_path
from ..lexicon import Lexicon


class WordValidator:
    """Answers "is this a Boggle word?" for one board and one lexicon."""

    def __init__(self, board: Board, lexicon: Lexicon):
        self.board = board
        self.lexicon = lexicon

    def is_a_boggle_word(self, word: str) -> bool:
        """Return True if `word` is in the lexicon and on the board, ignoring case."""
        if not self.lexicon.contains(word):
            return False
        return exists(self.board.snapshot(), word)

    def check(self, word: str) -> WordCheck:
        """
        Check a word and report why it was rejected.

        Returns a WordCheck with the path used when the word is valid and a
        reason code (EMPTY_WORD, NOT_IN_LEXICON, NOT_ON_BOARD) when it is not.
        """
        word = fold_word(word)
        if not word:
            return WordCheck(word=word, valid=False, reason="EMPTY_WORD")

        if not self.lexicon.contains(word):
            return WordCheck(word=word, valid=False, reason="NOT_IN_LEXICON")

        path = find_path(self.board.snapshot(), word)
        if path is None:
            return WordCheck(word=word, valid=False, in_lexicon=True, reason="NOT_ON_BOARD")

        return WordCheck(word=word, valid=True, in_lexicon=True, path=path)
