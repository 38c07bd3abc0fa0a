"""
Path search: can a word be traced on the board?

A word is on the board if there is a path of adjacent cells, none used twice,
whose labels concatenate to the word. Labels can be longer than one letter
(the "QU" face), so each step matches the whole label against the front of
the remaining suffix instead of comparing single characters.

The board argument is anything with cells(), neighbors_of() and label_at():
a Board or the LabelGrid returned by Board.snapshot().
"""

from typing import List, Optional, Protocol, Set

from .models import Cell, fold_word


class Grid(Protocol):
    def cells(self) -> List[Cell]: ...
    def neighbors_of(self, cell: Cell) -> List[Cell]: ...
    def label_at(self, cell: Cell) -> str: ...


def _could_fit(board: Grid, word: str) -> bool:
    """Cheap rejection before searching."""
    labels = [board.label_at(cell) for cell in board.cells()]
    if len(word) > sum(len(label) for label in labels):
        return False
    letters = set("".join(labels))
    return all(ch in letters for ch in word)


def _extend(
    board: Grid,
    cell: Cell,
    suffix: str,
    visited: Set[Cell],
    path: List[Cell],
) -> bool:
    """Depth-first step from `cell` (already on the path) matching `suffix`."""
    if not suffix:
        return True

    for neighbor in board.neighbors_of(cell):
        if neighbor in visited:
            continue
        label = board.label_at(neighbor)
        if not suffix.startswith(label):
            continue

        visited.add(neighbor)
        path.append(neighbor)
        if _extend(board, neighbor, suffix[len(label):], visited, path):
            return True
        # Backtrack
        path.pop()
        visited.remove(neighbor)

    return False


def find_path(board: Grid, word: str) -> Optional[List[Cell]]:
    """
    Find a placement of `word` on the board.

    Start cells and neighbors are tried in row-major order, so the same board
    and word always give the same path.

    Returns:
        The cells spelling the word in order, or None if the word can't be
        traced (including the empty word)
    """
    word = fold_word(word)
    if not word or not _could_fit(board, word):
        return None

    for start in board.cells():
        label = board.label_at(start)
        if not word.startswith(label):
            continue

        # Each start gets its own visited set
        visited = {start}
        path = [start]
        if _extend(board, start, word[len(label):], visited, path):
            return path

    return None


def exists(board: Grid, word: str) -> bool:
    """Return True if `word` can be traced on the board."""
    return find_path(board, word) is not None
