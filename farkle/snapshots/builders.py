"""
Farkle - Snapshot Builders

Read the engine objects and turn them into snapshot models. Nothing here
mutates the game.
"""

from datetime import datetime

from farkle.engine.base import GameState
from farkle.engine.game import FarkleGame
from farkle.engine.roll import Roll
from farkle.snapshots.models import (
    DieView,
    PlayerView,
    ScoreRecord,
    SelectionView,
    TurnSnapshot,
)


def snapshot_roll(roll: Roll, pickable: tuple[bool, ...] | None = None) -> list[DieView]:
    """
    Describe every die of a pool.

    Args:
        roll: Pool to describe
        pickable: Pickability to report (defaults to the pool's own)
    """
    if pickable is None:
        pickable = roll.determine_pickable()
    return [
        DieView(
            index=i,
            value=die.value,
            picked=die.picked,
            pending=die.picked_this_roll,
            pickable=pickable[i],
        )
        for i, die in enumerate(roll.dice)
    ]


def snapshot_turn(game: FarkleGame) -> TurnSnapshot:
    """Capture the state of the current turn."""
    player = game.current_player
    turn = game.turn
    dice = snapshot_roll(turn.roll, turn.pickable()) if turn is not None else []
    state = turn.state if turn is not None else GameState.TURN_ENDED

    return TurnSnapshot(
        player_name=player.name,
        round=game.current_round,
        round_count=game.round_count,
        state=state.name,
        dice=dice,
        hand=[SelectionView.model_validate(s) for s in player.hand],
        hand_value=player.hand_value,
        score=player.score,
        leaderboard=[PlayerView.model_validate(p) for p in game.leaderboard()],
        is_over=game.is_over,
    )


def build_score_record(game: FarkleGame, recorded_at: datetime | None = None) -> ScoreRecord:
    """Final standings, highest score first."""
    return ScoreRecord(
        recorded_at=recorded_at or datetime.now(),
        standings=[PlayerView.model_validate(p) for p in game.leaderboard()],
    )
