"""
Player read-only views for RoomQuest.
"""

from __future__ import annotations

import logging

from roomquest.models import Player, ServiceResult

logger = logging.getLogger(__name__)


class PlayerService:
    """Stats and inventory display. Never mutates the player."""

    def show_stats(self, player: Player) -> ServiceResult:
        """Show the player's name, health and experience."""
        try:
            output = (
                f"Character: {player.name}\n"
                f"Health: {player.health}\n"
                f"Experience: {player.experience}"
            )
            logger.info("Displaying stats for player %s", player.name)
            return ServiceResult.ok("Viewing stats", output)
        except Exception as e:
            logger.error("Error displaying stats for player %s: %s", player.name, e, exc_info=True)
            return ServiceResult.fail("Error", f"Failed to display stats: {e}")

    def show_inventory(self, player: Player) -> ServiceResult:
        """Show the player's equipment and abilities."""
        try:
            lines = []
            equipment = player.equipment
            if equipment is None or not equipment.items():
                lines.append("Equipment: None")
            else:
                lines.append("Equipment: Equipped")
                if equipment.weapon is not None:
                    lines.append(f"  Weapon: {equipment.weapon.name} (+{equipment.weapon.attack} attack)")
                if equipment.armor is not None:
                    lines.append(f"  Armor: {equipment.armor.name} (+{equipment.armor.defense} defense)")

            lines.append(f"Abilities: {len(player.abilities)}")
            for ability in player.abilities:
                lines.append(f"  - {ability.descriptor}")

            logger.info("Displaying inventory for player %s", player.name)
            return ServiceResult.ok("Viewing inventory", "\n".join(lines))
        except Exception as e:
            logger.error(
                "Error displaying inventory for player %s: %s", player.name, e, exc_info=True
            )
            return ServiceResult.fail("Error", f"Failed to display inventory: {e}")
