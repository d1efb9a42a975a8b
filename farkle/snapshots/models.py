"""
Farkle - Snapshot Models

Pydantic models that mirror the engine state handed to renderers and to
the end-of-game score export.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class DieView(BaseModel):
    """One die of the pool."""

    index: int = Field(ge=0, le=5)
    value: int = Field(ge=0, le=6)
    picked: bool = False
    pending: bool = False
    pickable: bool = False


class SelectionView(BaseModel):
    """Mirrors an engine Selection."""

    values: list[int]
    value: int = Field(gt=0)

    model_config = {"from_attributes": True}


class PlayerView(BaseModel):
    """A leaderboard row."""

    name: str
    score: int = Field(ge=0)

    model_config = {"from_attributes": True}


class TurnSnapshot(BaseModel):
    """Everything a renderer needs to draw the current turn."""

    player_name: str
    round: int
    round_count: int
    state: str
    dice: list[DieView] = Field(default_factory=list)
    hand: list[SelectionView] = Field(default_factory=list)
    hand_value: int = 0
    score: int = 0
    leaderboard: list[PlayerView] = Field(default_factory=list)
    is_over: bool = False


class ScoreRecord(BaseModel):
    """Final standings with the time they were taken."""

    recorded_at: datetime
    standings: list[PlayerView] = Field(default_factory=list)
