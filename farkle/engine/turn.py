"""
Farkle - Turn State Machine

Drives one player's turn through rolling, picking and banking:

    FIRST_ROLL --roll--> PICKING (simple roll)
                     --> TURN_ENDED (farkle, hand discarded)
                     --> unchanged (straight / triple pair scored automatically)
    PICKING --confirm--> ROLLING (selection added to the hand)
    ROLLING --roll-----> same transitions as FIRST_ROLL
            --bank-----> TURN_ENDED (hand moved into the score)
            --undo-----> PICKING (last selection returned to the pool)

Intents that the current state does not allow are rejected without
touching the roll or the player.
"""

import logging

from farkle.engine.base import (
    GameState,
    InvalidSelectionError,
    RollType,
    ToggleResult,
    TurnAction,
    TurnResult,
)
from farkle.engine.dice import FaceSource
from farkle.engine.player import Player
from farkle.engine.roll import Roll

logger = logging.getLogger(__name__)


class Turn:
    """
    A single turn of one player.

    Owns a fresh Roll for the duration of the turn and mutates the
    player's hand and score only through the Player operations.
    """

    def __init__(
        self,
        player: Player,
        face_source: FaceSource | None = None,
        roll: Roll | None = None,
    ) -> None:
        self.player = player
        self.roll = roll if roll is not None else Roll(face_source)
        self.state = GameState.FIRST_ROLL
        self.last_roll_type: RollType | None = None

    @property
    def is_over(self) -> bool:
        return self.state is GameState.TURN_ENDED

    def pickable(self) -> tuple[bool, ...]:
        """Pickability of every die, all False outside of PICKING."""
        if self.state is not GameState.PICKING:
            return (False,) * Roll.NUM_DICE
        return self.roll.determine_pickable()

    def handle(self, action: TurnAction, index: int | None = None) -> TurnResult:
        """
        Dispatch a player intent.

        Args:
            action: The intent to carry out
            index: Die index, required for TOGGLE

        Returns:
            TurnResult describing the outcome
        """
        if action is TurnAction.ROLL:
            return self.roll_dice()
        if action is TurnAction.TOGGLE:
            if index is None:
                raise ValueError("A die index is required to toggle a die.")
            return self.toggle(index)
        if action is TurnAction.CONFIRM:
            return self.confirm_pick()
        if action is TurnAction.BANK:
            return self.bank()
        if action is TurnAction.UNDO:
            return self.undo_pick()
        raise ValueError(f"Unknown action {action!r}")

    def _reject(self, action: TurnAction, message: str) -> TurnResult:
        logger.debug("%s rejected for %s in %s: %s",
                     action.value, self.player.name, self.state.name, message)
        return TurnResult(action=action, accepted=False, state=self.state, message=message)

    def roll_dice(self) -> TurnResult:
        """Roll the free dice and classify the result."""
        if self.state is GameState.PICKING:
            return self._reject(
                TurnAction.ROLL,
                "You have already rolled. Pick from the die pool and confirm first.",
            )
        if self.state is GameState.TURN_ENDED:
            return self._reject(TurnAction.ROLL, "The turn is over.")

        hot_dice = self.roll.new_roll()
        selection, roll_type = self.roll.determine_type()
        self.last_roll_type = roll_type
        logger.info("%s rolled %s (%s)", self.player.name, self.roll.values, roll_type.name)

        if roll_type is RollType.FARKLE:
            lost = self.player.hand_value
            self.player.empty_hand()
            self.state = GameState.TURN_ENDED
            logger.info("%s farkled, losing %d points", self.player.name, lost)
            message = "Farkle!"
        elif roll_type is RollType.STRAIGHT or roll_type is RollType.TRIPLE_PAIR:
            # All six dice are picked, so the next roll starts a fresh pool.
            self.player.add_selection(selection)
            label = "Straight" if roll_type is RollType.STRAIGHT else "Triple pair"
            message = f"{label}! Selected {selection.value} points' worth of dice."
        elif roll_type is RollType.SIMPLE:
            self.state = GameState.PICKING
            message = ""
        else:
            raise ValueError(f"Unknown roll type {roll_type!r}")

        return TurnResult(
            action=TurnAction.ROLL,
            accepted=True,
            state=self.state,
            roll_type=roll_type,
            selection=selection,
            hot_dice=hot_dice,
            message=message,
        )

    def toggle(self, index: int) -> TurnResult:
        """Pick or unpick the die at `index` while picking."""
        if self.state is not GameState.PICKING:
            return self._reject(TurnAction.TOGGLE, "There is nothing to pick from right now.")

        result = self.roll.toggle_die(index)
        logger.debug("%s toggled die %d: %s", self.player.name, index, result.name)

        if result is ToggleResult.PICKED or result is ToggleResult.UNPICKED:
            return TurnResult(
                action=TurnAction.TOGGLE, accepted=True, state=self.state, toggle=result
            )
        if result is ToggleResult.NOT_PICKABLE:
            message = f"Die {index + 1} cannot be picked."
        elif result is ToggleResult.NOT_UNPICKABLE:
            message = f"Die {index + 1} was scored in an earlier roll and cannot be unpicked."
        else:
            raise ValueError(f"Unknown toggle result {result!r}")
        return TurnResult(
            action=TurnAction.TOGGLE,
            accepted=False,
            state=self.state,
            toggle=result,
            message=message,
        )

    def confirm_pick(self) -> TurnResult:
        """Score the picked dice and add them to the hand."""
        if self.state is not GameState.PICKING:
            return self._reject(TurnAction.CONFIRM, "There is no pick to confirm.")

        try:
            selection = self.roll.construct_selection()
        except InvalidSelectionError as e:
            self.roll.deselect()
            logger.debug("%s made an invalid selection: %s", self.player.name, e)
            return TurnResult(
                action=TurnAction.CONFIRM,
                accepted=False,
                state=self.state,
                message=f"The selection is invalid: {e}",
            )

        self.player.add_selection(selection)
        self.state = GameState.ROLLING
        logger.debug("%s selected %s", self.player.name, selection)
        return TurnResult(
            action=TurnAction.CONFIRM,
            accepted=True,
            state=self.state,
            selection=selection,
        )

    def bank(self) -> TurnResult:
        """Bank the hand and end the turn."""
        if self.state is not GameState.ROLLING:
            return self._reject(
                TurnAction.BANK, "You must pick from the die pool before banking."
            )

        points = self.player.bank()
        self.state = GameState.TURN_ENDED
        logger.info("%s banked %d points (score %d)", self.player.name, points, self.player.score)
        return TurnResult(
            action=TurnAction.BANK,
            accepted=True,
            state=self.state,
            points=points,
            message=f"Banked {points} points.",
        )

    def undo_pick(self) -> TurnResult:
        """Return the last confirmed selection to the pool."""
        if self.state is not GameState.ROLLING:
            return self._reject(TurnAction.UNDO, "There is no confirmed pick to undo.")

        self.roll.deselect()
        selection = self.player.undo_selection()
        self.state = GameState.PICKING
        logger.debug("%s undid selection %s", self.player.name, selection)
        return TurnResult(
            action=TurnAction.UNDO,
            accepted=True,
            state=self.state,
            selection=selection,
        )
