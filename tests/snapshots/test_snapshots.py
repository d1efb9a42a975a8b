"""
Farkle - Snapshot Tests
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from farkle.engine.base import GameConfig
from farkle.engine.game import FarkleGame
from farkle.engine.roll import Roll
from farkle.snapshots import (
    DieView,
    PlayerView,
    SelectionView,
    build_score_record,
    snapshot_roll,
    snapshot_turn,
)


@pytest.fixture
def game(faces) -> FarkleGame:
    return FarkleGame(
        GameConfig(player_count=2, turn_count=3),
        names=["Ann", "Bob"],
        face_source=faces(1, 5, 2, 3, 4, 4),
    )


class TestSnapshotRoll:
    def test_describes_every_die(self):
        roll = Roll.from_values([1, 2, 3, 4, 6, 6])
        roll.toggle_die(0)
        dice = snapshot_roll(roll)
        assert len(dice) == 6
        assert dice[0] == DieView(index=0, value=1, picked=True, pending=True, pickable=False)
        assert dice[1].pickable is False

    def test_explicit_pickability(self):
        roll = Roll.from_values([1, 2, 3, 4, 6, 6])
        dice = snapshot_roll(roll, (False,) * 6)
        assert not any(d.pickable for d in dice)


class TestSnapshotTurn:
    def test_before_first_roll(self, game):
        snapshot = snapshot_turn(game)
        assert snapshot.player_name == "Ann"
        assert snapshot.round == 1
        assert snapshot.round_count == 3
        assert snapshot.state == "FIRST_ROLL"
        assert all(d.value == 0 and not d.pickable for d in snapshot.dice)
        assert snapshot.hand == []

    def test_after_confirming(self, game):
        game.roll()
        game.toggle(0)
        game.toggle(1)
        game.confirm_pick()
        snapshot = snapshot_turn(game)
        assert snapshot.state == "ROLLING"
        assert snapshot.hand == [SelectionView(values=[1, 5], value=150)]
        assert snapshot.hand_value == 150
        assert snapshot.score == 0
        assert [row.name for row in snapshot.leaderboard] == ["Ann", "Bob"]

    def test_serializes(self, game):
        game.roll()
        data = snapshot_turn(game).model_dump()
        assert data["state"] == "PICKING"
        assert data["dice"][0]["pickable"] is True


class TestScoreRecord:
    def test_standings_highest_first(self, game):
        game.roll()
        game.toggle(0)
        game.confirm_pick()
        game.bank()
        at = datetime(2024, 1, 2, 3, 4, 5)
        record = build_score_record(game, recorded_at=at)
        assert record.recorded_at == at
        assert record.standings == [
            PlayerView(name="Ann", score=100),
            PlayerView(name="Bob", score=0),
        ]

    def test_defaults_to_now(self, game):
        record = build_score_record(game)
        assert isinstance(record.recorded_at, datetime)


class TestModelValidation:
    def test_selection_view_requires_positive_value(self):
        with pytest.raises(ValidationError):
            SelectionView(values=[], value=0)

    def test_die_view_index_range(self):
        with pytest.raises(ValidationError):
            DieView(index=6, value=1)
