"""
Farkle - Face Sources

Die faces are drawn from an injectable source so that games can be
replayed and tests can script exact rolls.
"""

import random
from abc import ABC, abstractmethod
from typing import Iterable

from farkle.engine.validators import NUM_FACES, validate_face_value


class FaceSource(ABC):
    """Abstract supplier of die faces."""

    @abstractmethod
    def next_face(self) -> int:
        """
        Draw one face.

        Returns:
            int: A value between 1 and 6
        """


class RandomFaceSource(FaceSource):
    """Uniformly random faces, optionally seeded for reproducible games."""

    def __init__(self, seed: int | None = None) -> None:
        self.rng = random.Random(seed)

    def next_face(self) -> int:
        return self.rng.randint(1, NUM_FACES)


class SequenceFaceSource(FaceSource):
    """
    Replays faces from a pre-recorded sequence.

    Raises IndexError when the sequence is exhausted.
    """

    def __init__(self, faces: Iterable[int]) -> None:
        """
        Initialize with a face sequence.

        Args:
            faces: Values to replay, each between 1 and 6
        """
        self.faces = [validate_face_value(f) for f in faces]
        self.index = 0

    def next_face(self) -> int:
        if self.index >= len(self.faces):
            raise IndexError(
                f"Face sequence exhausted after {len(self.faces)} faces"
            )
        face = self.faces[self.index]
        self.index += 1
        return face

    def extend(self, faces: Iterable[int]) -> None:
        """Append more faces to replay."""
        self.faces.extend(validate_face_value(f) for f in faces)

    @property
    def remaining(self) -> int:
        """Number of faces not yet drawn."""
        return len(self.faces) - self.index
