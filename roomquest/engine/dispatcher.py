"""
Action Dispatcher for RoomQuest.

Maps an exploration action label onto the world graph, combat
resolver or player views, and wraps what comes back in an
ActionOutcome. Labels arrive from free-form input, so dispatch
never raises.
"""

from __future__ import annotations

import logging

from roomquest.engine.models import ActionOutcome, ExplorationAction, GameMode, Session
from roomquest.models import Player, RoomView, ServiceResult
from roomquest.services.combat import CombatResolver
from roomquest.services.player import PlayerService
from roomquest.services.world_graph import WorldGraph

logger = logging.getLogger(__name__)


class ActionDispatcher:
    """Single entry point from an action label to an engine call."""

    def __init__(
        self,
        graph: WorldGraph,
        combat: CombatResolver,
        player_service: PlayerService | None = None,
    ) -> None:
        self.graph = graph
        self.combat = combat
        self.player_service = player_service or PlayerService()

    def legal_actions(self, view: RoomView, player: Player) -> list[str]:
        """The labels worth offering in this room."""
        actions = [ExplorationAction.move(d).value for d in self.graph.legal_moves(view)]
        actions.extend(
            [
                ExplorationAction.VIEW_MAP.value,
                ExplorationAction.VIEW_INVENTORY.value,
                ExplorationAction.VIEW_STATS.value,
            ]
        )
        if view.has_monsters:
            actions.append(ExplorationAction.ATTACK.value)
            actions.append(ExplorationAction.USE_ABILITY.value)
        actions.append(ExplorationAction.MAIN_MENU.value)
        return actions

    def dispatch(self, action_label: str, session: Session) -> ActionOutcome:
        """
        Carry out one exploration action.

        Args:
            action_label: The label the UI returned
            session: Current session (read only here)

        Returns:
            ActionOutcome with the result and any room/mode change
        """
        try:
            try:
                action = ExplorationAction(action_label)
            except ValueError:
                return ActionOutcome(
                    result=ServiceResult.fail("Unknown action", f"Unknown action: {action_label}")
                )

            if action == ExplorationAction.MAIN_MENU:
                return ActionOutcome(
                    result=ServiceResult.ok(
                        "-> Admin Mode",
                        "Switching to Admin Mode for world management.",
                    ),
                    next_mode=GameMode.ADMIN,
                )

            if action == ExplorationAction.VIEW_MAP:
                return ActionOutcome(
                    result=ServiceResult.ok(
                        "Viewing map",
                        "The map is displayed above showing your current location "
                        "and surroundings.",
                    )
                )

            player = session.player
            if player is None:
                return ActionOutcome(
                    result=ServiceResult.fail("No character", "There is no active character.")
                )

            if action == ExplorationAction.VIEW_INVENTORY:
                return ActionOutcome(result=self.player_service.show_inventory(player))
            if action == ExplorationAction.VIEW_STATS:
                return ActionOutcome(result=self.player_service.show_stats(player))

            view = session.view
            if view is None:
                return ActionOutcome(
                    result=ServiceResult.fail("No room", "You are not in any room.")
                )

            if action.direction is not None:
                moved = self.graph.move_to(player, view, action.direction)
                result = ServiceResult(
                    success=moved.success,
                    message=moved.message,
                    detailed_output=moved.detailed_output,
                )
                return ActionOutcome(result=result, destination=moved.value)

            if action == ExplorationAction.ATTACK:
                return ActionOutcome(result=self.combat.resolve_attack(player, view))
            if action == ExplorationAction.USE_ABILITY:
                return ActionOutcome(result=self.combat.resolve_ability(player, view))

            return ActionOutcome(
                result=ServiceResult.fail("Unknown action", f"Unknown action: {action_label}")
            )
        except Exception as e:
            logger.error("Error dispatching action %r: %s", action_label, e, exc_info=True)
            return ActionOutcome(
                result=ServiceResult.fail("Action failed", f"An error occurred: {e}")
            )
