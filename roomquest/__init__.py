"""
RoomQuest - a turn-based room-graph adventure engine.
"""

__version__ = "0.1.0"
