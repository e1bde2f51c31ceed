"""
Combat Resolver for RoomQuest.

Resolves basic attacks and ability use against the monsters in a room:
- Target selection (implicit for one monster, chosen for several)
- Flat damage model (base + weapon bonus, or fixed ability damage)
- Defeat handling (monster removed, experience granted)

Every resolution commits exactly one change set before returning.
"""

from __future__ import annotations

import logging
from typing import Protocol

from pydantic import BaseModel, Field

from roomquest.db.interfaces import WorldRepository
from roomquest.models import (
    Ability,
    Monster,
    Player,
    RoomView,
    ServiceResult,
    WorldChangeSet,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================


class CombatConfig(BaseModel):
    """Numbers behind the damage model."""

    base_attack_damage: int = Field(default=5, ge=0, description="Unarmed attack damage")
    ability_damage: int = Field(default=15, ge=0, description="Damage of any ability")
    defeat_experience: int = Field(default=50, ge=0, description="XP for a defeated monster")


class ChoiceProvider(Protocol):
    """Asks the player to pick one of several descriptors."""

    def choose(self, title: str, options: list[str]) -> str:
        """Return exactly one of `options`."""
        ...


# =============================================================================
# Resolver
# =============================================================================


class CombatResolver:
    """Applies player attacks and abilities to the monsters in a room."""

    def __init__(
        self,
        repository: WorldRepository,
        chooser: ChoiceProvider,
        config: CombatConfig | None = None,
    ) -> None:
        self.repository = repository
        self.chooser = chooser
        self.config = config or CombatConfig()

    def resolve_attack(self, player: Player, view: RoomView) -> ServiceResult:
        """Attack a monster in the room with the player's weapon (or fists)."""
        try:
            logger.info("Player %s is attempting to attack a monster", player.name)

            if not view.monsters:
                return ServiceResult.fail(
                    "No Targets",
                    "There are no monsters to attack in this room.",
                )

            target = self._select_target(view, "Select a monster to attack:")
            damage = self.config.base_attack_damage + player.weapon_attack

            defeated, remaining = self._apply_damage(player, view, target, damage)
            if defeated:
                return ServiceResult.ok(
                    "Monster Defeated!",
                    f"You defeated {target.name}! (+{self.config.defeat_experience} XP)",
                )
            return ServiceResult.ok(
                "Attack Successful",
                f"You attacked {target.name} for {damage} damage.\nMonster HP: {remaining}",
            )
        except Exception as e:
            logger.error("Error during attack by player %s: %s", player.name, e, exc_info=True)
            return ServiceResult.fail(
                "Attack failed",
                f"An error occurred during the attack: {e}",
            )

    def resolve_ability(self, player: Player, view: RoomView) -> ServiceResult:
        """Use one of the player's abilities on a monster in the room."""
        try:
            logger.info("Player %s is attempting to use an ability", player.name)

            if not player.abilities:
                return ServiceResult.fail(
                    "No Abilities",
                    "You don't have any abilities to use.",
                )

            if not view.monsters:
                return ServiceResult.fail(
                    "No Targets",
                    "There are no monsters to target in this room.",
                )

            ability = self._select_ability(player)
            target = self._select_target(view, "Select a monster to target:")
            damage = self.config.ability_damage

            defeated, remaining = self._apply_damage(player, view, target, damage)
            if defeated:
                return ServiceResult.ok(
                    "Monster Defeated!",
                    f"You used {ability.name} and defeated {target.name}! "
                    f"(+{self.config.defeat_experience} XP)",
                )
            return ServiceResult.ok(
                "Ability Used",
                f"You used {ability.name} on {target.name} for {damage} damage.\n"
                f"Monster HP: {remaining}",
            )
        except Exception as e:
            logger.error("Error using ability by player %s: %s", player.name, e, exc_info=True)
            return ServiceResult.fail(
                "Ability use failed",
                f"An error occurred while using the ability: {e}",
            )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _select_target(self, view: RoomView, title: str) -> Monster:
        """Pick the target monster; asks the chooser only when there are several."""
        if len(view.monsters) == 1:
            return view.monsters[0]

        selection = self.chooser.choose(title, [m.descriptor for m in view.monsters])
        monster_name = selection.split(" (HP:")[0]
        for monster in view.monsters:
            if monster.name == monster_name:
                return monster
        raise LookupError(f"No monster named '{monster_name}' in {view.room.name}")

    def _select_ability(self, player: Player) -> Ability:
        if len(player.abilities) == 1:
            return player.abilities[0]

        selection = self.chooser.choose(
            "Select an ability to use:", [a.descriptor for a in player.abilities]
        )
        ability_name = selection.split(" - ")[0]
        for ability in player.abilities:
            if ability.name == ability_name:
                return ability
        raise LookupError(f"{player.name} has no ability named '{ability_name}'")

    def _apply_damage(
        self, player: Player, view: RoomView, target: Monster, damage: int
    ) -> tuple[bool, int]:
        """
        Damage the target and commit the outcome.

        The player and view are only updated once the commit succeeds.

        Returns:
            (defeated, remaining health)
        """
        remaining = target.health - damage
        logger.info(
            "Player %s dealt %d damage to monster %s", player.name, damage, target.name
        )

        if remaining <= 0:
            rewarded = player.model_copy(
                update={"experience": player.experience + self.config.defeat_experience}
            )
            self.repository.commit(
                WorldChangeSet(players=[rewarded], removed_monster_ids=[target.id])
            )
            player.experience = rewarded.experience
            target.health = remaining
            view.monsters = [m for m in view.monsters if m.id != target.id]
            logger.info("Player %s defeated monster %s", player.name, target.name)
            return True, remaining

        wounded = target.model_copy(update={"health": remaining})
        self.repository.commit(WorldChangeSet(monsters=[wounded]))
        target.health = remaining
        return False, remaining
