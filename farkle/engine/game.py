"""
Farkle - Game Orchestrator

Seats the players, hands the dice from one player to the next and counts
rounds until the last player of the last round has finished a turn.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from farkle.engine.base import (
    GameConfig,
    GameState,
    IllegalActionError,
    TurnAction,
    TurnResult,
)
from farkle.engine.dice import FaceSource, RandomFaceSource
from farkle.engine.events import (
    EventPayload,
    GameEvent,
    classify_turn_result,
    result_data,
)
from farkle.engine.player import Player
from farkle.engine.turn import Turn
from farkle.engine.validators import normalize_player_names

logger = logging.getLogger(__name__)

Listener = Callable[[EventPayload], None]


class FarkleGame:
    """
    A complete game for one or more players over a fixed number of rounds.

    Player intents are forwarded to the turn of the current player. Once
    that turn has ended, `advance` passes the dice on.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        names: Sequence[str] = (),
        face_source: FaceSource | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.face_source = face_source if face_source is not None else RandomFaceSource()
        self.players = [
            Player(name)
            for name in normalize_player_names(names, self.config.player_count)
        ]
        self.current_round = 1
        self.current_player_index = 0
        self.is_over = False
        self.turn: Turn | None = Turn(self.current_player, self.face_source)
        self._listeners: list[Listener] = []

    # ── Queries ────────────────────────────────────────────────────────

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def round_count(self) -> int:
        return self.config.turn_count

    @property
    def state(self) -> GameState:
        """State of the current turn; TURN_ENDED once the game is over."""
        if self.turn is None:
            return GameState.TURN_ENDED
        return self.turn.state

    def leaderboard(self) -> list[Player]:
        """Players sorted by score, highest first, ties in seating order."""
        return sorted(self.players, key=lambda p: p.score, reverse=True)

    def winners(self) -> list[Player]:
        """Every player sharing the highest score."""
        best = max(p.score for p in self.players)
        return [p for p in self.players if p.score == best]

    # ── Events ─────────────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener for game events.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: GameEvent, player: Player | None = None, **data) -> None:
        payload = EventPayload(
            event=event,
            player_name=player.name if player is not None else None,
            round=self.current_round,
            data=data,
        )
        for listener in list(self._listeners):
            try:
                listener(payload)
            except Exception:
                logger.exception("Listener failed on %s", event.name)

    def start(self) -> None:
        """Announce the start of the game to listeners."""
        logger.info(
            "Starting game: %d player(s), %d round(s)",
            len(self.players), self.round_count,
        )
        self._emit(
            GameEvent.GAME_STARTED,
            self.current_player,
            players=[p.name for p in self.players],
            rounds=self.round_count,
        )

    # ── Intents ────────────────────────────────────────────────────────

    def handle(self, action: TurnAction, index: int | None = None) -> TurnResult:
        """Forward an intent to the current turn and announce the outcome."""
        if self.turn is None:
            return TurnResult(
                action=action,
                accepted=False,
                state=GameState.TURN_ENDED,
                message="The game is over.",
            )

        player = self.current_player
        result = self.turn.handle(action, index)
        for event in classify_turn_result(result):
            self._emit(event, player, **result_data(result))
        return result

    def roll(self) -> TurnResult:
        return self.handle(TurnAction.ROLL)

    def toggle(self, index: int) -> TurnResult:
        return self.handle(TurnAction.TOGGLE, index)

    def confirm_pick(self) -> TurnResult:
        return self.handle(TurnAction.CONFIRM)

    def bank(self) -> TurnResult:
        return self.handle(TurnAction.BANK)

    def undo_pick(self) -> TurnResult:
        return self.handle(TurnAction.UNDO)

    def advance(self) -> bool:
        """
        Pass the dice to the next player once the current turn has ended.

        Returns:
            True if another turn started, False if the game is now over

        Raises:
            IllegalActionError: If the game is over or the turn is still running
        """
        if self.turn is None:
            raise IllegalActionError("The game is over.")
        if not self.turn.is_over:
            raise IllegalActionError("The current turn has not ended yet.")

        if self.current_player_index + 1 < len(self.players):
            self.current_player_index += 1
        elif self.current_round < self.round_count:
            self.current_player_index = 0
            self.current_round += 1
        else:
            self.turn = None
            self.is_over = True
            logger.info(
                "Game over after %d round(s); winner(s): %s",
                self.round_count, ", ".join(p.name for p in self.winners()),
            )
            self._emit(
                GameEvent.GAME_OVER,
                standings=[(p.name, p.score) for p in self.leaderboard()],
            )
            return False

        self.turn = Turn(self.current_player, self.face_source)
        logger.info(
            "Round %d of %d: %s to play (score %d)",
            self.current_round, self.round_count,
            self.current_player.name, self.current_player.score,
        )
        self._emit(
            GameEvent.TURN_ADVANCED,
            self.current_player,
            score=self.current_player.score,
        )
        return True
