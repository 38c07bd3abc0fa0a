"""
An n-sided die whose faces are decorated with strings.

Faces are numbered 1..n. The die remembers which face is currently showing
and can be rolled to a new, uniformly random face.
"""

import random
from typing import Dict, Optional, Tuple
from uuid import uuid4
from pydantic import BaseModel, Field, ConfigDict, ValidationInfo, field_validator

from .models import Tile, fold_word


class Die(BaseModel):
    """
    A die with at least one face.

    Attributes:
        faces: Face labels in face-number order (face 1 is faces[0]), fixed at construction
        current: Face number currently showing (1-indexed)
        id: Identifier shared with copies of this die
        seed: Optional random seed for reproducible rolls
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    faces: Tuple[str, ...] = Field(..., min_length=1, frozen=True)
    current: Optional[int] = Field(default=None, ge=1)
    id: str = Field(default_factory=lambda: uuid4().hex[:8])
    seed: Optional[int] = None
    _rng: random.Random = None

    @field_validator("faces")
    @classmethod
    def _normalize_faces(cls, faces: Tuple[str, ...]) -> Tuple[str, ...]:
        if any(not face for face in faces):
            raise ValueError("Face labels must be non-empty")
        return tuple(fold_word(face) for face in faces)

    @field_validator("current")
    @classmethod
    def _current_in_range(cls, current: Optional[int], info: ValidationInfo) -> Optional[int]:
        faces = info.data.get("faces")
        if current is not None and faces is not None and current > len(faces):
            raise ValueError(f"Face {current} does not exist on a {len(faces)}-sided die")
        return current

    def model_post_init(self, __context) -> None:
        """Initialize the random generator and show a face."""
        self._rng = random.Random(self.seed)
        if self.current is None:
            self.roll()

    @property
    def number_of_faces(self) -> int:
        """Number of faces on this die."""
        return len(self.faces)

    @property
    def tile(self) -> Tile:
        """The tile on the face currently showing."""
        return Tile(label=self.get_value(), id=f"{self.id}:{self.current}")

    def roll(self) -> str:
        """Roll the die to a random face and return the label on that face."""
        self.current = self._rng.randint(1, len(self.faces))
        return self.get_value()

    def get_value(self) -> str:
        """Return the label on the face currently showing."""
        return self.faces[self.current - 1]

    def get_value_map(self) -> Dict[int, str]:
        """
        Return the mapping of face numbers to labels.

        Keys run 1..n in ascending order. The dict is a fresh copy;
        modifying it has no effect on the die.
        """
        return {number: label for number, label in enumerate(self.faces, start=1)}

    def clone(self) -> "Die":
        """Return an independent die with the same faces and current face."""
        clone = Die(faces=self.faces, current=self.current, id=self.id, seed=self.seed)
        clone._rng.setstate(self._rng.getstate())
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Die):
            return NotImplemented
        return self.faces == other.faces and self.current == other.current

    def __repr__(self) -> str:
        return f"Die(faces={self.faces}, current={self.current})"
