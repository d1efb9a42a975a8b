"""
Farkle - Player

A player keeps the selections scored during the current turn (the hand)
apart from the points already banked. Only banking moves points from the
hand into the score, so the score never decreases.
"""

from typing import Sequence

from farkle.engine.base import Selection
from farkle.engine.validators import validate_score


class Player:
    """A named participant with a banked score and an unbanked hand."""

    def __init__(self, name: str, score: int = 0) -> None:
        self._name = name
        self._score = validate_score(score)
        self._hand: list[Selection] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def score(self) -> int:
        """Points banked across the whole game."""
        return self._score

    @property
    def hand(self) -> Sequence[Selection]:
        """Selections scored this turn and not banked yet."""
        return tuple(self._hand)

    @property
    def hand_value(self) -> int:
        """Points currently at risk in the hand."""
        return sum(selection.value for selection in self._hand)

    def add_selection(self, selection: Selection) -> None:
        self._hand.append(selection)

    def undo_selection(self) -> Selection | None:
        """Remove and return the most recent selection, if any."""
        if not self._hand:
            return None
        return self._hand.pop()

    def empty_hand(self) -> None:
        """Discard the hand without scoring it (bust)."""
        self._hand.clear()

    def bank(self) -> int:
        """
        Move every selection in the hand into the score.

        Returns:
            Points banked by this call
        """
        points = self.hand_value
        self._score += points
        self._hand.clear()
        return points

    # Players are ordered by score only; ties are neither less nor greater.
    def __lt__(self, other: "Player") -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self._score < other._score

    def __le__(self, other: "Player") -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self._score <= other._score

    def __gt__(self, other: "Player") -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self._score > other._score

    def __ge__(self, other: "Player") -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self._score >= other._score

    def __repr__(self) -> str:
        return f"Player(name={self._name!r}, score={self._score}, hand={len(self._hand)})"
