"""
World reports for RoomQuest.

Read-only summaries of the stored world, offered from the admin menu:
characters, room details, occupancy, item lookup and link health.
"""

from __future__ import annotations

import logging
from uuid import UUID

from roomquest.db.interfaces import WorldRepository
from roomquest.models import ServiceResult
from roomquest.services.world_graph import WorldGraph

logger = logging.getLogger(__name__)


class WorldReportService:
    """Builds plain-text reports over the world repository."""

    def __init__(self, repository: WorldRepository, graph: WorldGraph | None = None) -> None:
        self.repository = repository
        self.graph = graph or WorldGraph(repository)

    def list_characters(self) -> ServiceResult:
        """List every player with health, experience and location."""
        try:
            players = self.repository.get_players()
            if not players:
                return ServiceResult.fail("No characters", "No characters found.")

            lines = []
            for player in players:
                room = self.repository.get_room(player.room_id) if player.room_id else None
                where = room.name if room else "nowhere"
                lines.append(
                    f"{player.name} - HP {player.health}, XP {player.experience}, in {where}"
                )
            return ServiceResult.ok(f"{len(players)} characters", "\n".join(lines))
        except Exception as e:
            logger.error("Error listing characters: %s", e, exc_info=True)
            return ServiceResult.fail("Error", f"Failed to list characters: {e}")

    def room_details(self, room_id: UUID) -> ServiceResult:
        """Describe one room: occupants and exits."""
        try:
            view = self.graph.load_view(room_id)
            if view is None:
                logger.warning("Room with ID %s not found", room_id)
                return ServiceResult.fail("Room not found", f"Room with ID {room_id} not found.")

            lines = [view.room.name, "", view.room.description, ""]
            if view.players:
                lines.append("Characters in this room:")
                for player in view.players:
                    lines.append(f"  {player.name} (HP {player.health}, XP {player.experience})")
            else:
                lines.append("No characters in this room.")

            if view.monsters:
                lines.append("Monsters in this room:")
                for monster in view.monsters:
                    lines.append(f"  {monster.descriptor}")
            else:
                lines.append("No monsters in this room.")

            for direction, neighbor in view.neighbors.items():
                lines.append(f"{direction.value}: {neighbor.name}")
            for direction in view.dangling:
                lines.append(f"{direction.value}: (missing room)")

            return ServiceResult.ok("Room details", "\n".join(lines))
        except Exception as e:
            logger.error("Error displaying room details: %s", e, exc_info=True)
            return ServiceResult.fail("Error", f"Error displaying room details: {e}")

    def rooms_with_characters(self) -> ServiceResult:
        """Summarise occupancy, then list each room's characters."""
        try:
            rooms = sorted(self.repository.get_rooms(), key=lambda r: r.name)
            if not rooms:
                return ServiceResult.fail("No rooms", "No rooms found.")

            occupants = {room.id: self.repository.get_players_in_room(room.id) for room in rooms}
            total_characters = sum(len(players) for players in occupants.values())
            occupied = sum(1 for players in occupants.values() if players)

            lines = [
                f"Total Rooms: {len(rooms)}",
                f"Rooms with Characters: {occupied}",
                f"Total Characters: {total_characters}",
                "",
            ]
            for room in rooms:
                players = occupants[room.id]
                names = ", ".join(p.name for p in players) if players else "(empty)"
                lines.append(f"{room.name}: {names}")

            logger.info(
                "Displayed %d rooms with %d total characters", len(rooms), total_characters
            )
            return ServiceResult.ok("Rooms with characters", "\n".join(lines))
        except Exception as e:
            logger.error("Error listing rooms with characters: %s", e, exc_info=True)
            return ServiceResult.fail("Error", f"Error: {e}")

    def find_item(self, item_name: str) -> ServiceResult:
        """Find which character carries an item, and where they are."""
        try:
            needle = item_name.strip().lower()
            found = []
            for player in self.repository.get_players():
                if player.equipment is None:
                    continue
                for item in player.equipment.items():
                    if needle and needle in item.name.lower():
                        room = self.repository.get_room(player.room_id) if player.room_id else None
                        where = room.name if room else "nowhere"
                        found.append(f"{item.name}: carried by {player.name} in {where}")

            if not found:
                logger.warning("Item search failed - '%s' not found", item_name)
                return ServiceResult.fail("Item not found", f"No item matching '{item_name}'.")
            return ServiceResult.ok(f"{len(found)} found", "\n".join(found))
        except Exception as e:
            logger.error("Error finding equipment location: %s", e, exc_info=True)
            return ServiceResult.fail("Error", f"Error finding equipment: {e}")

    def link_report(self) -> ServiceResult:
        """Report links that break bidirectional consistency."""
        try:
            violations = self.graph.audit_links()
            if not violations:
                return ServiceResult.ok("Links OK", "Every room link is mirrored.")
            return ServiceResult.fail(
                f"{len(violations)} broken links",
                "\n".join(v.describe() for v in violations),
            )
        except Exception as e:
            logger.error("Error auditing room links: %s", e, exc_info=True)
            return ServiceResult.fail("Error", f"Error auditing links: {e}")
