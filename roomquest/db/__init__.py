"""
Database layer for RoomQuest.

Provides the storage contract and its implementations:
- WorldRepository: Protocol every store satisfies
- InMemoryWorldRepository: Dictionary-backed store (tests and the console game)
"""

from __future__ import annotations

from roomquest.db.interfaces import WorldRepository
from roomquest.db.memory import InMemoryWorldRepository

__all__ = [
    # Protocol interface
    "WorldRepository",
    # In-memory implementation
    "InMemoryWorldRepository",
]
