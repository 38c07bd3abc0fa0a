from typing import ClassVar, Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict

from .board import Board, NUMBER_OF_DICE
from .die import Die
from .models import BoggleConfig, WordCheck
from .scoring import score_word
from .validator import WordValidator
from ..lexicon import Lexicon


class Boggle(BaseModel):
    """
    A Boggle game: one board, one lexicon, and the words found so far.

    The game owns its board. shuffle_and_roll is the only operation that
    changes which labels are showing, and it starts a fresh round.

    Attributes:
        board: The dice grid
        lexicon: Words that count
        found: Valid words submitted this round, uppercase
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    NUMBER_OF_DICE: ClassVar[int] = NUMBER_OF_DICE

    board: Board
    lexicon: Lexicon
    found: List[str] = Field(default_factory=list)
    _validator: WordValidator = None

    def model_post_init(self, __context) -> None:
        """Wire the validator to this game's board and lexicon."""
        self._validator = WordValidator(self.board, self.lexicon)

    @classmethod
    def create(
        cls,
        config: Optional[BoggleConfig] = None,
        lexicon: Optional[Lexicon] = None,
    ) -> "Boggle":
        """
        Factory method to create a game with a freshly rolled board.

        Args:
            config: Board and dictionary settings (defaults to the standard set)
            lexicon: Word list to use; loaded from config.dictionary, or the
                bundled list, when not given

        Returns:
            A new Boggle game

        Raises:
            FileNotFoundError: If the configured dictionary file is missing
            ValueError: If the dice configuration is invalid
        """
        if config is None:
            config = BoggleConfig()

        if lexicon is None:
            if config.dictionary:
                lexicon = Lexicon.from_file(config.dictionary)
            else:
                lexicon = Lexicon.default()

        board = Board.create(
            dice_faces=config.dice,
            rows=config.rows,
            cols=config.cols,
            seed=config.seed,
        )
        return cls(board=board, lexicon=lexicon)

    @property
    def validator(self) -> WordValidator:
        return self._validator

    @property
    def found_words(self) -> List[str]:
        """Valid words found this round, sorted."""
        return sorted(self.found)

    @property
    def score(self) -> int:
        """Total points for the words found this round."""
        return sum(score_word(word) for word in self.found)

    def get_dice(self) -> List[Die]:
        """Return independent copies of the board's dice."""
        return self.board.get_dice()

    def shuffle_and_roll(self) -> None:
        """Roll every die and start a new round."""
        self.board.shuffle_and_roll()
        self.found = []

    def is_a_boggle_word(self, word: str) -> bool:
        """Return True if `word` is in the lexicon and on the board."""
        return self._validator.is_a_boggle_word(word)

    def check(self, word: str) -> WordCheck:
        """Check a word without recording it."""
        return self._validator.check(word)

    def submit(self, word: str) -> WordCheck:
        """
        Check a word and record it if it is valid and new this round.

        A repeat of an already found word is rejected with ALREADY_FOUND.
        """
        result = self._validator.check(word)
        if not result.valid:
            return result

        if result.word in self.found:
            return result.model_copy(update={"valid": False, "reason": "ALREADY_FOUND"})

        self.found.append(result.word)
        return result.model_copy(update={"points": score_word(result.word)})

    def get_state(self) -> Dict:
        """
        Get the current game state as a dictionary.

        Useful for serialization.
        """
        grid = self.board.snapshot()
        return {
            "rows": grid.rows,
            "cols": grid.cols,
            "board": [list(row) for row in grid.labels],
            "found_words": self.found_words,
            "score": self.score,
        }
