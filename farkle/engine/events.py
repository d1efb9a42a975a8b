"""
Farkle - Event Definitions

Event types and payloads emitted to listeners while a game is played.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from farkle.engine.base import GameState, RollType, TurnAction, TurnResult


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    DICE_ROLLED = auto()
    DIE_TOGGLED = auto()
    SELECTION_CONFIRMED = auto()
    SELECTION_REJECTED = auto()
    SELECTION_UNDONE = auto()
    HOT_DICE = auto()
    PLAYER_BUST = auto()
    TURN_BANKED = auto()
    TURN_ADVANCED = auto()
    GAME_OVER = auto()


@dataclass
class EventPayload:
    """Wrapper for event data."""

    event: GameEvent
    player_name: str | None = None
    round: int = 0
    data: dict[str, Any] = field(default_factory=dict)


_ACCEPTED_EVENT_MAP: dict[TurnAction, GameEvent] = {
    TurnAction.TOGGLE: GameEvent.DIE_TOGGLED,
    TurnAction.CONFIRM: GameEvent.SELECTION_CONFIRMED,
    TurnAction.BANK: GameEvent.TURN_BANKED,
    TurnAction.UNDO: GameEvent.SELECTION_UNDONE,
}


def classify_turn_result(result: TurnResult) -> tuple[GameEvent, ...]:
    """Determine the events announced by the outcome of an intent."""
    if result.action is TurnAction.ROLL:
        if not result.accepted:
            return ()
        events: list[GameEvent] = []
        if result.hot_dice:
            events.append(GameEvent.HOT_DICE)
        if result.roll_type is RollType.FARKLE:
            events.append(GameEvent.PLAYER_BUST)
        else:
            events.append(GameEvent.DICE_ROLLED)
        return tuple(events)

    if result.accepted:
        return (_ACCEPTED_EVENT_MAP[result.action],)

    # Confirming is only rejected while picking when the dice don't score.
    if result.action is TurnAction.CONFIRM and result.state is GameState.PICKING:
        return (GameEvent.SELECTION_REJECTED,)
    return ()


def result_data(result: TurnResult) -> dict[str, Any]:
    """Flatten a TurnResult into event data."""
    data: dict[str, Any] = {"state": result.state.name}
    if result.roll_type is not None:
        data["roll_type"] = result.roll_type.name
    if result.toggle is not None:
        data["toggle"] = result.toggle.name
    if result.selection is not None:
        data["selection"] = list(result.selection.values)
        data["value"] = result.selection.value
    if result.action is TurnAction.BANK and result.accepted:
        data["points"] = result.points
    if result.message:
        data["message"] = result.message
    return data
