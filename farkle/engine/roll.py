"""
Farkle - Dice Pool

This module implements the pool of six dice rolled during a turn: which
dice are still in play, which of them may be picked, how a picked group
is scored, and how the whole pool is classified after a roll.

Scoring Rules:
    - Single 1: 100 points, single 5: 50 points (up to two of them)
    - Three 1s: 1,000 points, three 5s: 500 points
    - Three of X (2, 3, 4, 6): X × 100 points
    - Each die beyond three adds the three-of-a-kind value again
    - 1-2-3-4-5-6 (Straight): 3,000 points
    - Three pairs (Triple Pair): 2,000 points

Only dice that are free or toggled in the current pick pass count toward
the classification. Dice locked by an earlier sub-roll are out of play
until every die is locked, at which point the next roll starts over with
six fresh dice (hot dice).
"""

from collections import Counter
from typing import Iterable

from farkle.engine.base import (
    DieState,
    InvalidSelectionError,
    RollType,
    Selection,
    ToggleResult,
)
from farkle.engine.dice import FaceSource, RandomFaceSource
from farkle.engine.validators import (
    NUM_FACES,
    validate_die_index,
    validate_face_values,
)


class Die:
    """A single six-sided die with its selection state."""

    __slots__ = ("value", "state")

    def __init__(self, value: int = 0, state: DieState = DieState.FREE) -> None:
        # 0 means "not rolled yet"
        self.value = value
        self.state = state

    @property
    def picked(self) -> bool:
        """Removed from the active pool, pending or locked."""
        return self.state is not DieState.FREE

    @property
    def picked_this_roll(self) -> bool:
        """Toggled in the current, unconfirmed pick pass."""
        return self.state is DieState.PENDING

    @property
    def is_active(self) -> bool:
        """Counted when classifying the pool."""
        return self.state is not DieState.LOCKED

    def pick(self) -> None:
        self.state = DieState.PENDING

    def unpick(self) -> None:
        self.state = DieState.FREE

    def settle(self) -> None:
        """Lock a picked die for the rest of the sub-roll sequence."""
        if self.state is DieState.PENDING:
            self.state = DieState.LOCKED

    def __repr__(self) -> str:
        return f"Die(value={self.value}, state={self.state.name})"


def _score_group(face: int, count: int) -> int:
    """Points for `count` dice showing `face`, assuming the group is legal."""
    if count == 0:
        return 0
    if face == 1:
        return Roll.THREE_ONES_POINTS * (count - 2) if count >= 3 else Roll.SINGLE_ONE_POINTS * count
    if face == 5:
        return Roll.THREE_FIVES_POINTS * (count - 2) if count >= 3 else Roll.SINGLE_FIVE_POINTS * count
    return face * 100 * (count - 2)


class Roll:
    """
    The pool of six dice for the current sub-roll.

    Dice are addressed by index 0-5. The index identifies a die for the
    whole sub-roll and is unrelated to its face value.
    """

    # Constants
    NUM_DICE = 6

    # Scoring values
    SINGLE_ONE_POINTS = 100
    SINGLE_FIVE_POINTS = 50
    THREE_ONES_POINTS = 1000
    THREE_FIVES_POINTS = 500
    STRAIGHT_POINTS = 3000
    TRIPLE_PAIR_POINTS = 2000

    SINGLE_SCORING_FACES = frozenset({1, 5})

    def __init__(self, face_source: FaceSource | None = None) -> None:
        if face_source is None:
            face_source = RandomFaceSource()
        self.face_source = face_source
        self.dice = [Die() for _ in range(self.NUM_DICE)]

    @classmethod
    def from_values(
        cls,
        values: Iterable[int],
        face_source: FaceSource | None = None,
    ) -> "Roll":
        """Create a pool that already shows the given faces, all free."""
        faces = validate_face_values(list(values))
        if len(faces) != cls.NUM_DICE:
            raise ValueError(f"Exactly {cls.NUM_DICE} dice required, got {len(faces)}.")
        roll = cls(face_source)
        for die, face in zip(roll.dice, faces):
            die.value = face
        return roll

    @property
    def values(self) -> tuple[int, ...]:
        """Face values of all six dice, in die order."""
        return tuple(die.value for die in self.dice)

    @property
    def is_exhausted(self) -> bool:
        """True once every die has been picked."""
        return all(die.picked for die in self.dice)

    @property
    def pending_indices(self) -> tuple[int, ...]:
        """Indices of dice toggled in the current pick pass."""
        return tuple(i for i, die in enumerate(self.dice) if die.picked_this_roll)

    def count_values(self) -> Counter[int]:
        """
        Count active dice per face value.

        Active dice are the free ones plus those toggled in the current
        pick pass, so the counts follow the player's toggles live.

        Returns:
            Counter keyed by face value 1-6
        """
        counts: Counter[int] = Counter()
        for die in self.dice:
            if die.is_active and 1 <= die.value <= NUM_FACES:
                counts[die.value] += 1
        return counts

    @classmethod
    def required_count(cls, face: int) -> int:
        """Smallest group of `face` that can score."""
        return 1 if face in cls.SINGLE_SCORING_FACES else 3

    def determine_pickable(self) -> tuple[bool, ...]:
        """
        Determine which dice may be picked right now.

        A die is pickable if it is not picked yet and enough active dice
        share its face for the group to score.
        """
        counts = self.count_values()
        return tuple(
            not die.picked
            and 1 <= die.value <= NUM_FACES
            and counts[die.value] >= self.required_count(die.value)
            for die in self.dice
        )

    def toggle_die(self, index: int) -> ToggleResult:
        """
        Pick or unpick a single die.

        Args:
            index: Position of the die (0-5)

        Returns:
            ToggleResult describing what happened

        Raises:
            ValueError: If the index is out of range
        """
        index = validate_die_index(index, self.NUM_DICE)
        die = self.dice[index]

        if die.picked:
            if not die.picked_this_roll:
                return ToggleResult.NOT_UNPICKABLE
            die.unpick()
            return ToggleResult.UNPICKED

        if not self.determine_pickable()[index]:
            return ToggleResult.NOT_PICKABLE
        die.pick()
        return ToggleResult.PICKED

    def new_roll(self) -> bool:
        """
        Roll every free die and settle the picked ones.

        An exhausted pool is replaced by six fresh dice first.

        Returns:
            True if the pool was reset (hot dice)
        """
        reset = self.is_exhausted
        if reset:
            self.dice = [Die() for _ in range(self.NUM_DICE)]

        for die in self.dice:
            if die.picked:
                die.settle()
            else:
                die.value = self.face_source.next_face()

        return reset

    def determine_type(self) -> tuple[Selection | None, RollType]:
        """
        Classify the pool after a roll.

        Straights and triple pairs pick all six dice automatically and
        come with their selection. Otherwise the roll is SIMPLE if any
        die can be picked, or a FARKLE if none can.

        Returns:
            Tuple of (selection or None, roll type)
        """
        counts = self.count_values()
        faces = range(1, NUM_FACES + 1)

        if all(counts[face] == 1 for face in faces):
            return self._pick_all(self.STRAIGHT_POINTS), RollType.STRAIGHT

        if sum(1 for face in faces if counts[face] == 2) == 3:
            return self._pick_all(self.TRIPLE_PAIR_POINTS), RollType.TRIPLE_PAIR

        if any(self.determine_pickable()):
            return None, RollType.SIMPLE
        return None, RollType.FARKLE

    def _pick_all(self, points: int) -> Selection:
        for die in self.dice:
            die.pick()
        return Selection(values=self.values, value=points)

    def construct_selection(self) -> Selection:
        """
        Score the dice toggled in the current pick pass.

        Returns:
            Selection of the pending dice

        Raises:
            InvalidSelectionError: If a face other than 1 or 5 appears once
                or twice, or the pending dice are worth nothing
        """
        values = tuple(die.value for die in self.dice if die.picked_this_roll)
        counts = Counter(values)

        for face, count in counts.items():
            if face not in self.SINGLE_SCORING_FACES and count < 3:
                raise InvalidSelectionError("can only select 3+ of a non-1/5 value")

        points = sum(_score_group(face, count) for face, count in counts.items())
        if points <= 0:
            raise InvalidSelectionError("selection must have positive value")

        return Selection(values=values, value=points)

    def deselect(self) -> None:
        """Unpick every die toggled in the current pick pass."""
        for die in self.dice:
            if die.picked_this_roll:
                die.unpick()

    def __repr__(self) -> str:
        return f"Roll({self.dice!r})"
