"""
Farkle - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable, Sequence

import pytest

from farkle.engine.dice import SequenceFaceSource
from farkle.engine.roll import Roll


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def selection_scores() -> dict[str, tuple[tuple[int, ...], int, str]]:
    """
    Picked dice with the points they are worth.

    Returns:
        Dict mapping name to (dice_values, expected_points, description)
    """
    return {
        # Singles
        "single_one": ((1,), 100, "Single 1"),
        "single_five": ((5,), 50, "Single 5"),
        "two_ones": ((1, 1), 200, "Two 1s"),
        "two_fives": ((5, 5), 100, "Two 5s"),
        "one_and_five": ((1, 5), 150, "One 1 and one 5"),

        # Three of a kind
        "three_ones": ((1, 1, 1), 1000, "Three 1s"),
        "three_twos": ((2, 2, 2), 200, "Three 2s"),
        "three_fives": ((5, 5, 5), 500, "Three 5s"),
        "three_sixes": ((6, 6, 6), 600, "Three 6s"),

        # More of a kind, linear growth
        "four_ones": ((1, 1, 1, 1), 2000, "Four 1s"),
        "five_ones": ((1, 1, 1, 1, 1), 3000, "Five 1s"),
        "six_ones": ((1, 1, 1, 1, 1, 1), 4000, "Six 1s"),
        "four_threes": ((3, 3, 3, 3), 600, "Four 3s"),
        "five_fours": ((4, 4, 4, 4, 4), 1200, "Five 4s"),
        "six_sixes": ((6, 6, 6, 6, 6, 6), 2400, "Six 6s"),
        "four_fives": ((5, 5, 5, 5), 1000, "Four 5s"),

        # Mixed
        "three_ones_three_twos": ((1, 1, 1, 2, 2, 2), 1200, "Three 1s + three 2s"),
        "three_sixes_plus_five": ((6, 6, 6, 5), 650, "Three 6s + single 5"),
        "four_fives_plus_one": ((1, 5, 5, 5, 5), 1100, "Four 5s + single 1"),
    }


# =============================================================================
# ROLL FIXTURES
# =============================================================================

@pytest.fixture
def faces() -> Callable[..., SequenceFaceSource]:
    """Factory for scripted face sources."""
    def _make(*values: int) -> SequenceFaceSource:
        return SequenceFaceSource(values)
    return _make


@pytest.fixture
def pending_roll() -> Callable[[Sequence[int]], Roll]:
    """
    Factory for a pool whose first dice are toggled in the current pass.

    The dice are picked directly so that any group can be scored,
    remaining dice are filled with free 2s.
    """
    def _make(values: Sequence[int]) -> Roll:
        padded = list(values) + [2] * (Roll.NUM_DICE - len(values))
        roll = Roll.from_values(padded)
        for die in roll.dice[:len(values)]:
            die.pick()
        return roll
    return _make


# Faces that classify as a farkle: two pairs, one 4 and one 6.
FARKLE_FACES = (2, 3, 4, 6, 2, 3)
STRAIGHT_FACES = (1, 2, 3, 4, 5, 6)
TRIPLE_PAIR_FACES = (2, 2, 3, 3, 5, 5)


@pytest.fixture
def farkle_faces() -> tuple[int, ...]:
    return FARKLE_FACES


@pytest.fixture
def straight_faces() -> tuple[int, ...]:
    return STRAIGHT_FACES


@pytest.fixture
def triple_pair_faces() -> tuple[int, ...]:
    return TRIPLE_PAIR_FACES
