"""
In-memory implementation of the world repository.

Stores everything in dictionaries, making tests fast and isolated
and giving the console game a store to run against.
"""

from __future__ import annotations

from copy import deepcopy
from uuid import UUID

from roomquest.models import Monster, Player, Room, WorldChangeSet


class InMemoryWorldRepository:
    """
    In-memory implementation of WorldRepository.

    Records are deep-copied in and out, so callers never hold live
    references into storage.
    """

    def __init__(self) -> None:
        self._rooms: dict[UUID, Room] = {}
        self._players: dict[UUID, Player] = {}
        self._monsters: dict[UUID, Monster] = {}

    # Room operations
    def save_room(self, room: Room) -> None:
        """Insert or update a room record."""
        self._rooms[room.id] = deepcopy(room)

    def get_room(self, room_id: UUID) -> Room | None:
        """Get a room by ID."""
        room = self._rooms.get(room_id)
        return deepcopy(room) if room else None

    def get_rooms(self) -> list[Room]:
        """Get all rooms, in insertion order."""
        return [deepcopy(r) for r in self._rooms.values()]

    def delete_room(self, room_id: UUID) -> None:
        """Delete a room. Links pointing at it are left dangling."""
        self._rooms.pop(room_id, None)

    # Player operations
    def save_player(self, player: Player) -> None:
        """Insert or update a player record."""
        self._players[player.id] = deepcopy(player)

    def get_player(self, player_id: UUID) -> Player | None:
        """Get a player by ID."""
        player = self._players.get(player_id)
        return deepcopy(player) if player else None

    def get_players(self) -> list[Player]:
        """Get all players, in insertion order."""
        return [deepcopy(p) for p in self._players.values()]

    def delete_player(self, player_id: UUID) -> None:
        """Delete a player record."""
        self._players.pop(player_id, None)

    def get_players_in_room(self, room_id: UUID) -> list[Player]:
        """Get the players currently in a room."""
        return [deepcopy(p) for p in self._players.values() if p.room_id == room_id]

    # Monster operations
    def save_monster(self, monster: Monster) -> None:
        """Insert or update a monster record."""
        self._monsters[monster.id] = deepcopy(monster)

    def get_monster(self, monster_id: UUID) -> Monster | None:
        """Get a monster by ID."""
        monster = self._monsters.get(monster_id)
        return deepcopy(monster) if monster else None

    def get_monsters_in_room(self, room_id: UUID) -> list[Monster]:
        """Get the monsters currently in a room."""
        return [deepcopy(m) for m in self._monsters.values() if m.room_id == room_id]

    # Unit of work
    def commit(self, changes: WorldChangeSet) -> None:
        """
        Apply every mutation of one action at once.

        The change set is validated in full before anything is written,
        so a rejected commit leaves storage untouched.
        """
        for player in changes.players:
            if player.room_id is not None and player.room_id not in self._rooms:
                raise ValueError(f"Room {player.room_id} does not exist")
        for monster_id in changes.removed_monster_ids:
            if monster_id not in self._monsters:
                raise KeyError(f"Monster {monster_id} does not exist")
        removed = set(changes.removed_monster_ids)
        for monster in changes.monsters:
            if monster.id in removed:
                raise ValueError(f"Monster {monster.id} is both updated and removed")

        for player in changes.players:
            self._players[player.id] = deepcopy(player)
        for monster in changes.monsters:
            self._monsters[monster.id] = deepcopy(monster)
        for monster_id in changes.removed_monster_ids:
            del self._monsters[monster_id]
