"""
Console front end for RoomQuest.
"""

from roomquest.cli.console import AdminMenu, ConsoleUI, main, run_game

__all__ = ["AdminMenu", "ConsoleUI", "main", "run_game"]
