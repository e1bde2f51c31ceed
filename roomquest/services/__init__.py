"""
Service layer for RoomQuest.

Services orchestrate world logic using the world repository.
"""

from __future__ import annotations

from roomquest.services.combat import ChoiceProvider, CombatConfig, CombatResolver
from roomquest.services.player import PlayerService
from roomquest.services.reports import WorldReportService
from roomquest.services.world_graph import WorldGraph

__all__ = [
    "ChoiceProvider",
    "CombatConfig",
    "CombatResolver",
    "PlayerService",
    "WorldGraph",
    "WorldReportService",
]
