"""
Farkle Game Engine.

Pure Python game logic with zero UI/persistence dependencies.
Handles dice rolling, pickability, scoring, busts, hot dice and turn flow.
"""

from farkle.engine.base import (
    DieState,
    GameConfig,
    GameState,
    IllegalActionError,
    InvalidSelectionError,
    RollType,
    Selection,
    ToggleResult,
    TurnAction,
    TurnResult,
)
from farkle.engine.dice import FaceSource, RandomFaceSource, SequenceFaceSource
from farkle.engine.events import EventPayload, GameEvent
from farkle.engine.game import FarkleGame
from farkle.engine.player import Player
from farkle.engine.roll import Die, Roll
from farkle.engine.turn import Turn

__all__ = [
    # Data Classes
    "Selection",
    "TurnResult",
    "GameConfig",
    "EventPayload",
    # Enums
    "DieState",
    "GameEvent",
    "GameState",
    "RollType",
    "ToggleResult",
    "TurnAction",
    # Errors
    "IllegalActionError",
    "InvalidSelectionError",
    # Face Sources
    "FaceSource",
    "RandomFaceSource",
    "SequenceFaceSource",
    # Engine
    "Die",
    "Roll",
    "Player",
    "Turn",
    "FarkleGame",
]
