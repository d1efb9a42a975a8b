"""
Farkle Snapshots.

Read-only views of the engine state for renderers and score export.
"""

from farkle.snapshots.builders import build_score_record, snapshot_roll, snapshot_turn
from farkle.snapshots.models import (
    DieView,
    PlayerView,
    ScoreRecord,
    SelectionView,
    TurnSnapshot,
)

__all__ = [
    "DieView",
    "PlayerView",
    "ScoreRecord",
    "SelectionView",
    "TurnSnapshot",
    "build_score_record",
    "snapshot_roll",
    "snapshot_turn",
]
