"""
Farkle - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Every enum is closed: callers are expected to handle each
member explicitly rather than compare against strings or integer codes.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence


class GameState(Enum):
    """Phase of a single player's turn."""
    FIRST_ROLL = auto()   # Turn just started, nothing rolled yet
    ROLLING = auto()      # A selection was confirmed; roll again or bank
    PICKING = auto()      # A simple roll must be picked from and confirmed
    TURN_ENDED = auto()   # Terminal for this turn


class RollType(Enum):
    """Classification of a freshly rolled pool."""
    FARKLE = auto()
    SIMPLE = auto()
    TRIPLE_PAIR = auto()
    STRAIGHT = auto()


class ToggleResult(Enum):
    """Outcome of toggling a single die."""
    PICKED = auto()
    UNPICKED = auto()
    NOT_PICKABLE = auto()
    NOT_UNPICKABLE = auto()


class DieState(Enum):
    """Selection state of a die within the current turn."""
    FREE = auto()      # In the active pool, will be re-rolled
    LOCKED = auto()    # Scored by a previous sub-roll of this turn
    PENDING = auto()   # Toggled during the current, unconfirmed pick pass


class TurnAction(Enum):
    """Player intents understood by the turn state machine."""
    ROLL = "roll"
    TOGGLE = "toggle"
    CONFIRM = "confirm"
    BANK = "bank"
    UNDO = "undo"


class InvalidSelectionError(ValueError):
    """Raised when a set of picked dice does not form a scoring selection."""


class IllegalActionError(ValueError):
    """Raised when the game is asked to do something its state forbids."""


@dataclass(frozen=True)
class Selection:
    """
    An immutable, scored group of dice.

    Attributes:
        values: Face values of the scored dice, in die order
        value: Points awarded for the group (always positive)
    """
    values: tuple[int, ...]
    value: int

    def __post_init__(self) -> None:
        """Reject selections that would not add to the hand."""
        if self.value <= 0:
            raise InvalidSelectionError("selection must have positive value")

    def __len__(self) -> int:
        return len(self.values)

    @property
    def die_count(self) -> int:
        """Number of dice in the selection."""
        return len(self.values)

    @classmethod
    def from_sequence(cls, values: Sequence[int], value: int) -> "Selection":
        """Create a Selection from any sequence type."""
        return cls(values=tuple(values), value=value)

    def __str__(self) -> str:
        faces = " ".join(str(v) for v in self.values)
        return f"{faces} ({self.value} points)"


@dataclass(frozen=True)
class TurnResult:
    """
    Outcome of a single player intent.

    Attributes:
        action: The intent that produced this result
        accepted: False when the intent was rejected without any state change
        state: Turn state after handling the intent
        roll_type: Classification of the roll (ROLL only)
        toggle: Result of the toggle (TOGGLE only)
        selection: Selection added to or removed from the hand, if any
        points: Points banked (BANK only)
        hot_dice: Whether the roll started over with six fresh dice (ROLL only)
        message: Human-readable explanation, mostly for rejections
    """
    action: TurnAction
    accepted: bool
    state: GameState
    roll_type: RollType | None = None
    toggle: ToggleResult | None = None
    selection: Selection | None = None
    points: int = 0
    hot_dice: bool = False
    message: str = ""

    @property
    def is_bust(self) -> bool:
        """Returns True if this result ended the turn with a farkle."""
        return self.roll_type is RollType.FARKLE


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        player_count: Number of players (1-10)
        turn_count: Number of rounds every player gets (1-20)
    """
    player_count: int = 1
    turn_count: int = 5

    MIN_PLAYERS = 1
    MAX_PLAYERS = 10
    MIN_TURNS = 1
    MAX_TURNS = 20

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.MIN_PLAYERS <= self.player_count <= self.MAX_PLAYERS:
            raise ValueError(
                f"Number of players must be between {self.MIN_PLAYERS} "
                f"and {self.MAX_PLAYERS}."
            )
        if not self.MIN_TURNS <= self.turn_count <= self.MAX_TURNS:
            raise ValueError(
                f"Number of turns must be between {self.MIN_TURNS} "
                f"and {self.MAX_TURNS}."
            )
