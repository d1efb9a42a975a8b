"""
Farkle - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence

NUM_DICE = 6
NUM_FACES = 6


def validate_die_index(index: int, dice_count: int = NUM_DICE) -> int:
    """
    Validate the index of a die in the pool.

    Args:
        index: Position of the die (0-based)
        dice_count: Number of dice in the pool

    Returns:
        Validated index

    Raises:
        ValueError: If the index is not an integer or out of range
    """
    if not isinstance(index, int) or isinstance(index, bool):
        raise ValueError(f"Die index must be an integer, got {type(index).__name__}.")

    if not (0 <= index < dice_count):
        raise ValueError(
            f"Die index {index} is out of range. Must be between 0 and {dice_count - 1}."
        )

    return index


def validate_face_value(value: int) -> int:
    """
    Validate a face value produced by a face source.

    Raises:
        ValueError: If the value is not 1-6
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"Face value must be an integer, got {type(value).__name__}.")

    if not (1 <= value <= NUM_FACES):
        raise ValueError(f"Face value {value} must be between 1 and {NUM_FACES}.")

    return value


def validate_face_values(values: Sequence[int]) -> tuple[int, ...]:
    """Validate every value of a sequence, returning them as a tuple."""
    return tuple(validate_face_value(v) for v in values)


def validate_score(score: int) -> int:
    """
    Validate a score value.

    Args:
        score: Score to validate

    Returns:
        Validated score

    Raises:
        ValueError: If score is not a non-negative integer
    """
    if not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score


def normalize_player_names(names: Sequence[str], count: int) -> tuple[str, ...]:
    """
    Build exactly `count` display names.

    Names are taken positionally and stripped. Missing or blank names
    fall back to "Player N" (1-based).

    Args:
        names: Names entered by the players, possibly fewer than `count`
        count: Number of players in the game

    Returns:
        Tuple of `count` non-empty names
    """
    result: list[str] = []
    for i in range(count):
        name = names[i].strip() if i < len(names) and names[i] else ""
        result.append(name or f"Player {i + 1}")
    return tuple(result)
