"""
World Graph service for RoomQuest.

Resolves the room graph at the point of use:
- Loading a room together with its occupants and neighbours
- Moving a player along a directional link
- Auditing links for bidirectional consistency

Broken links are reported, never raised.
"""

from __future__ import annotations

import logging
from uuid import UUID

from roomquest.db.interfaces import WorldRepository
from roomquest.models import (
    Direction,
    LinkKind,
    LinkViolation,
    Player,
    RoomView,
    ValueResult,
    WorldChangeSet,
)

logger = logging.getLogger(__name__)


class WorldGraph:
    """Navigation over rooms linked North/South/East/West."""

    def __init__(self, repository: WorldRepository) -> None:
        self.repository = repository

    def load_view(self, room_id: UUID) -> RoomView | None:
        """
        Load a room with its occupants and resolved neighbours.

        Returns:
            The RoomView, or None if the room does not exist
        """
        room = self.repository.get_room(room_id)
        if room is None:
            return None

        view = RoomView(
            room=room,
            players=self.repository.get_players_in_room(room_id),
            monsters=self.repository.get_monsters_in_room(room_id),
        )
        for direction in room.linked_directions():
            neighbor_id = room.neighbor_id(direction)
            neighbor = self.repository.get_room(neighbor_id)
            if neighbor is None:
                view.dangling.append(direction)
            else:
                view.neighbors[direction] = neighbor
        return view

    def move_to(
        self, player: Player, view: RoomView, direction: Direction | str
    ) -> ValueResult[RoomView]:
        """
        Move the player out of the current room in a direction.

        Args:
            player: The player to move
            view: The room the player currently occupies
            direction: Which way to go

        Returns:
            ValueResult carrying the destination RoomView on success
        """
        try:
            direction = Direction(direction)
            room_id = view.room.neighbor_id(direction)

            if room_id is None:
                return ValueResult[RoomView].fail(
                    f"Cannot go {direction.value}",
                    f"You cannot go {direction.value} from here - "
                    "there is no exit in that direction.",
                )

            destination = self.repository.get_room(room_id)
            if destination is None:
                logger.warning("Attempted to move to non-existent room %s", room_id)
                return ValueResult[RoomView].fail(
                    "Room not found",
                    f"Error: Room {room_id} does not exist.",
                )

            moved = player.model_copy(update={"room_id": destination.id})
            self.repository.commit(WorldChangeSet(players=[moved]))
            player.room_id = destination.id

            arrival = self.load_view(destination.id)
            if arrival is None:
                raise RuntimeError(f"Room {destination.id} disappeared during the move")

            logger.info(
                "Player %s moved %s to %s", player.name, direction.value, destination.name
            )
            return ValueResult[RoomView].ok_with(
                arrival,
                f"-> {direction.value}",
                f"You travel {direction.value} and arrive at {destination.name}.",
            )
        except Exception as e:
            logger.error(
                "Error moving player %s %s: %s", player.name, direction, e, exc_info=True
            )
            return ValueResult[RoomView].fail(
                "Movement failed",
                f"An error occurred while moving: {e}",
            )

    def legal_moves(self, view: RoomView) -> list[Direction]:
        """Directions the room has a link in."""
        return view.exits

    def audit_links(self) -> list[LinkViolation]:
        """
        Find every link that breaks bidirectional consistency.

        A link is dangling when its target room does not exist, and
        one-way when the target does not link back in the opposite direction.
        """
        rooms = {room.id: room for room in self.repository.get_rooms()}
        violations: list[LinkViolation] = []

        for room in rooms.values():
            for direction in room.linked_directions():
                target_id = room.neighbor_id(direction)
                target = rooms.get(target_id)
                if target is None:
                    kind = LinkKind.DANGLING
                elif target.neighbor_id(direction.opposite) != room.id:
                    kind = LinkKind.ONE_WAY
                else:
                    continue
                violations.append(
                    LinkViolation(
                        room_id=room.id,
                        room_name=room.name,
                        direction=direction,
                        target_id=target_id,
                        kind=kind,
                    )
                )

        if violations:
            logger.warning("Room graph has %d inconsistent links", len(violations))
        return violations
