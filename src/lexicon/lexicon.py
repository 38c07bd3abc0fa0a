"""
An immutable, case-insensitive word list.

Words are stored case-folded (str.casefold), the same fold the board search
applies before uppercasing, so "Straße" and "STRASSE" name the same word.
The default list ships with the package in data/words.txt; any
whitespace-delimited word list can be loaded instead.
"""

from bisect import bisect_left
from pathlib import Path
from typing import Iterable, List, Union

# Bundled word list
_DATA_FILE = Path(__file__).parent / "data" / "words.txt"


class Lexicon:
    """A fixed set of words with case-insensitive lookups."""

    def __init__(self, words: Iterable[str]):
        normalized = {w.strip().casefold() for w in words}
        normalized.discard("")
        self._words = frozenset(normalized)
        self._sorted = tuple(sorted(self._words))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Lexicon":
        """
        Load a lexicon from a whitespace-delimited word list.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file contains no words
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Dictionary file not found: {path}")

        words = path.read_text(encoding="utf-8").split()
        if not words:
            raise ValueError(f"Dictionary file is empty: {path}")

        return cls(words)

    @classmethod
    def default(cls) -> "Lexicon":
        """Load the bundled word list."""
        return cls.from_file(_DATA_FILE)

    def contains(self, word: str) -> bool:
        """Return True if `word` is in the lexicon, ignoring case."""
        return bool(word) and word.casefold() in self._words

    def size(self) -> int:
        """Number of words in the lexicon."""
        return len(self._words)

    def words_starting_with(self, prefix: str) -> List[str]:
        """Return the sorted words beginning with `prefix`, ignoring case."""
        prefix = prefix.casefold()
        result = []
        for word in self._sorted[bisect_left(self._sorted, prefix):]:
            if not word.startswith(prefix):
                break
            result.append(word)
        return result

    def has_prefix(self, prefix: str) -> bool:
        """Return True if any word begins with `prefix`, ignoring case."""
        prefix = prefix.casefold()
        i = bisect_left(self._sorted, prefix)
        return i < len(self._sorted) and self._sorted[i].startswith(prefix)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"Lexicon(size={self.size()})"
