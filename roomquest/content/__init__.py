"""
Game content for RoomQuest.
"""

from roomquest.content.starter_world import StarterWorldResult, create_starter_world

__all__ = ["StarterWorldResult", "create_starter_world"]
