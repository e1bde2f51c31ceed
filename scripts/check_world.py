#!/usr/bin/env python3
"""
World health check script.

Builds the starter world and checks that every room link is mirrored
and that the starting character stands in an existing room.

Usage:
    python scripts/check_world.py
    python scripts/check_world.py --name Aria
"""

from __future__ import annotations

import argparse
import os
import sys

# Add the project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def check_links(repository) -> bool:
    """Check the room graph for dangling and one-way links."""
    from roomquest.services import WorldGraph

    print("Checking room links...")
    violations = WorldGraph(repository).audit_links()
    for violation in violations:
        print(f"  {violation.kind.value}: {violation.describe()}")
    if violations:
        print(f"  Links: {len(violations)} problems")
        return False
    print(f"  Links: {len(repository.get_rooms())} rooms, all mirrored")
    return True


def check_player(repository, player_id) -> bool:
    """Check the starting character is placed in a room that exists."""
    print("Checking starting character...")
    player = repository.get_player(player_id)
    if player is None:
        print("  Player: missing")
        return False
    if player.room_id is None or repository.get_room(player.room_id) is None:
        print(f"  Player: {player.name} is not in an existing room")
        return False
    print(f"  Player: {player.name} OK")
    return True


def main() -> int:
    """Main entry point."""
    from roomquest.content import create_starter_world
    from roomquest.db import InMemoryWorldRepository

    parser = argparse.ArgumentParser(description="Check the RoomQuest starter world")
    parser.add_argument("--name", default="Hero", help="Character name to seed")
    args = parser.parse_args()

    print("RoomQuest World Check")
    print("=" * 40)

    repository = InMemoryWorldRepository()
    world = create_starter_world(repository, player_name=args.name)

    links_ok = check_links(repository)
    player_ok = check_player(repository, world.player_id)

    print()
    print("Summary")
    print("=" * 40)
    print(f"  Links:  {'OK' if links_ok else 'FAILED'}")
    print(f"  Player: {'OK' if player_ok else 'FAILED'}")

    return 0 if (links_ok and player_ok) else 1


if __name__ == "__main__":
    sys.exit(main())
