"""
Farkle - Game Orchestrator Tests
"""

import pytest
from farkle.engine.base import (
    GameConfig,
    GameState,
    IllegalActionError,
    Selection,
    TurnAction,
)
from farkle.engine.events import GameEvent
from farkle.engine.game import FarkleGame


def _game(faces, players: int = 2, turns: int = 1, values=(), names=("Ann", "Bob")) -> FarkleGame:
    return FarkleGame(
        GameConfig(player_count=players, turn_count=turns),
        names=names,
        face_source=faces(*values),
    )


def _give(player, points: int) -> None:
    player.add_selection(Selection(values=(1,), value=points))
    player.bank()


class TestSetup:
    """Tests for seating players."""

    def test_default_config(self, faces):
        game = FarkleGame(face_source=faces())
        assert len(game.players) == 1
        assert game.round_count == 5
        assert game.players[0].name == "Player 1"

    def test_names_fall_back_to_defaults(self, faces):
        game = FarkleGame(GameConfig(player_count=3), names=["Ann", "  "], face_source=faces())
        assert [p.name for p in game.players] == ["Ann", "Player 2", "Player 3"]

    def test_first_turn_is_ready(self, faces):
        game = _game(faces)
        assert game.current_round == 1
        assert game.current_player.name == "Ann"
        assert game.state is GameState.FIRST_ROLL
        assert not game.is_over


class TestAdvance:
    """Tests for passing the dice on."""

    def test_cannot_advance_mid_turn(self, faces):
        game = _game(faces)
        with pytest.raises(IllegalActionError, match="not ended"):
            game.advance()

    def test_next_player_gets_fresh_turn(self, faces, farkle_faces):
        game = _game(faces, values=farkle_faces)
        game.roll()
        assert game.advance() is True
        assert game.current_player.name == "Bob"
        assert game.current_round == 1
        assert game.state is GameState.FIRST_ROLL
        assert game.turn.roll.values == (0,) * 6

    def test_next_round_after_last_player(self, faces, farkle_faces):
        game = _game(faces, turns=2, values=farkle_faces * 2)
        game.roll()
        game.advance()
        game.roll()
        assert game.advance() is True
        assert game.current_round == 2
        assert game.current_player.name == "Ann"

    def test_game_over_after_last_round(self, faces, farkle_faces):
        game = _game(faces, values=farkle_faces * 2)
        game.roll()
        game.advance()
        game.roll()
        assert game.advance() is False
        assert game.is_over
        assert game.turn is None
        assert game.state is GameState.TURN_ENDED

    def test_intents_rejected_when_over(self, faces, farkle_faces):
        game = _game(faces, players=1, values=farkle_faces, names=())
        game.roll()
        game.advance()
        result = game.roll()
        assert not result.accepted
        assert result.message == "The game is over."
        with pytest.raises(IllegalActionError, match="over"):
            game.advance()

    def test_full_turn_banks_score(self, faces):
        game = _game(faces, values=(1, 2, 3, 4, 6, 6))
        game.roll()
        game.toggle(0)
        game.confirm_pick()
        assert game.bank().points == 100
        assert game.players[0].score == 100


class TestLeaderboard:
    """Tests for standings."""

    def test_sorted_highest_first(self, faces):
        game = _game(faces, players=3, names=("A", "B", "C"))
        _give(game.players[0], 100)
        _give(game.players[1], 300)
        _give(game.players[2], 200)
        assert [p.name for p in game.leaderboard()] == ["B", "C", "A"]

    def test_ties_keep_seating_order(self, faces):
        game = _game(faces, players=3, names=("A", "B", "C"))
        _give(game.players[1], 100)
        _give(game.players[2], 100)
        assert [p.name for p in game.leaderboard()] == ["B", "C", "A"]

    def test_winners_include_ties(self, faces):
        game = _game(faces, players=3, names=("A", "B", "C"))
        _give(game.players[0], 100)
        _give(game.players[2], 100)
        assert [p.name for p in game.winners()] == ["A", "C"]


class TestEvents:
    """Tests for event notification."""

    def test_start_announces_players(self, faces):
        game = _game(faces)
        events = []
        game.subscribe(events.append)
        game.start()
        assert events[0].event is GameEvent.GAME_STARTED
        assert events[0].data["players"] == ["Ann", "Bob"]

    def test_turn_events(self, faces):
        game = _game(faces, values=(1, 2, 3, 4, 6, 6))
        events = []
        game.subscribe(events.append)
        game.roll()
        game.toggle(0)
        game.confirm_pick()
        game.bank()
        game.advance()
        assert [e.event for e in events] == [
            GameEvent.DICE_ROLLED,
            GameEvent.DIE_TOGGLED,
            GameEvent.SELECTION_CONFIRMED,
            GameEvent.TURN_BANKED,
            GameEvent.TURN_ADVANCED,
        ]
        assert events[3].player_name == "Ann"
        assert events[3].data["points"] == 100
        assert events[4].player_name == "Bob"

    def test_bust_and_game_over(self, faces, farkle_faces):
        game = _game(faces, players=1, values=farkle_faces, names=())
        events = []
        game.subscribe(events.append)
        game.roll()
        game.advance()
        assert [e.event for e in events] == [GameEvent.PLAYER_BUST, GameEvent.GAME_OVER]
        assert events[1].data["standings"] == [("Player 1", 0)]

    def test_rejected_intents_are_silent(self, faces):
        game = _game(faces)
        events = []
        game.subscribe(events.append)
        game.bank()
        game.handle(TurnAction.UNDO)
        assert events == []

    def test_invalid_selection_is_announced(self, faces):
        game = _game(faces, values=(1, 2, 3, 4, 6, 6))
        events = []
        game.roll()
        game.subscribe(events.append)
        game.confirm_pick()
        assert [e.event for e in events] == [GameEvent.SELECTION_REJECTED]

    def test_failing_listener_does_not_break_game(self, faces, farkle_faces):
        game = _game(faces, values=farkle_faces)
        events = []

        def broken(payload):
            raise RuntimeError("boom")

        game.subscribe(broken)
        game.subscribe(events.append)
        result = game.roll()
        assert result.is_bust
        assert len(events) == 1

    def test_unsubscribe(self, faces, farkle_faces):
        game = _game(faces, values=farkle_faces)
        events = []
        unsubscribe = game.subscribe(events.append)
        unsubscribe()
        game.roll()
        assert events == []
