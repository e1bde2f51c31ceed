"""
Database interface definitions for RoomQuest.

Uses Protocol classes to define the contract for world storage.
Implementations can use a real store or in-memory dictionaries for testing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from roomquest.models import Monster, Player, Room, WorldChangeSet


class WorldRepository(Protocol):
    """
    Interface for world storage.

    Reads return detached copies; nothing changes in storage until a
    change set is committed.
    """

    # Room operations
    def save_room(self, room: Room) -> None:
        """Insert or update a room record."""
        ...

    def get_room(self, room_id: UUID) -> Room | None:
        """Get a room by ID."""
        ...

    def get_rooms(self) -> list[Room]:
        """Get all rooms, in insertion order."""
        ...

    def delete_room(self, room_id: UUID) -> None:
        """Delete a room. Links pointing at it are left dangling."""
        ...

    # Player operations
    def save_player(self, player: Player) -> None:
        """Insert or update a player record."""
        ...

    def get_player(self, player_id: UUID) -> Player | None:
        """Get a player by ID."""
        ...

    def get_players(self) -> list[Player]:
        """Get all players, in insertion order."""
        ...

    def delete_player(self, player_id: UUID) -> None:
        """Delete a player record."""
        ...

    def get_players_in_room(self, room_id: UUID) -> list[Player]:
        """Get the players currently in a room."""
        ...

    # Monster operations
    def save_monster(self, monster: Monster) -> None:
        """Insert or update a monster record."""
        ...

    def get_monster(self, monster_id: UUID) -> Monster | None:
        """Get a monster by ID."""
        ...

    def get_monsters_in_room(self, room_id: UUID) -> list[Monster]:
        """Get the monsters currently in a room."""
        ...

    # Unit of work
    def commit(self, changes: WorldChangeSet) -> None:
        """
        Apply every mutation of one action at once.

        Either the whole change set is applied or none of it is.
        """
        ...
