"""
Core Engine for RoomQuest.

The engine orchestrates:
- The game-mode state machine (Exploration / Admin)
- Action dispatch (labels to navigation, combat and views)
- Session state (mode, current player, current room)
"""

from __future__ import annotations

from roomquest.engine.dispatcher import ActionDispatcher
from roomquest.engine.game import GameEngine
from roomquest.engine.models import (
    ActionOutcome,
    AdminOption,
    EngineConfig,
    ExplorationAction,
    GameMode,
    Session,
)
from roomquest.engine.ui import AdminConsole, ExplorationUI

__all__ = [
    # Main engine
    "GameEngine",
    "ActionDispatcher",
    # Models
    "ActionOutcome",
    "AdminOption",
    "EngineConfig",
    "ExplorationAction",
    "GameMode",
    "Session",
    # Collaborators
    "AdminConsole",
    "ExplorationUI",
]
