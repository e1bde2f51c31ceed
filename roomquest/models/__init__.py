"""
Core Data Models for RoomQuest.

These models define the room graph, its occupants, and the
result envelopes every engine operation reports through.
"""

from roomquest.models.result import ServiceResult, ValueResult
from roomquest.models.world import (
    Ability,
    Direction,
    Equipment,
    Item,
    LinkKind,
    LinkViolation,
    Monster,
    MonsterKind,
    Player,
    Room,
    RoomView,
    WorldChangeSet,
    connect_rooms,
)

__all__ = [
    # World
    "Ability",
    "Direction",
    "Equipment",
    "Item",
    "LinkKind",
    "LinkViolation",
    "Monster",
    "MonsterKind",
    "Player",
    "Room",
    "RoomView",
    "WorldChangeSet",
    "connect_rooms",
    # Results
    "ServiceResult",
    "ValueResult",
]
