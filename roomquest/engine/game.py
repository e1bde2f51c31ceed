"""
Game Engine for RoomQuest.

The game-mode state machine. Holds the session, alternates between
Exploration and Admin, and drives one turn at a time through the
UI and admin collaborators.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from roomquest.db.interfaces import WorldRepository
from roomquest.engine.dispatcher import ActionDispatcher
from roomquest.engine.models import (
    ActionOutcome,
    AdminOption,
    EngineConfig,
    GameMode,
    Session,
)
from roomquest.engine.ui import AdminConsole, ExplorationUI
from roomquest.models import Player, RoomView, ServiceResult
from roomquest.services.combat import CombatResolver
from roomquest.services.player import PlayerService
from roomquest.services.world_graph import WorldGraph

logger = logging.getLogger(__name__)


@dataclass
class GameEngine:
    """
    Main game engine orchestrating the game loop.

    Transitions:
    - Exploration --Return to Main Menu--> Admin
    - Admin --Explore World--> Exploration

    Every other admin option loops back into Admin. The engine has no
    terminal state; `run` keeps going until the host calls `stop`.
    """

    repository: WorldRepository
    ui: ExplorationUI
    admin: AdminConsole
    config: EngineConfig = field(default_factory=EngineConfig)

    # Components (initialized in __post_init__)
    graph: WorldGraph = field(init=False)
    combat: CombatResolver = field(init=False)
    dispatcher: ActionDispatcher = field(init=False)

    session: Session = field(default_factory=Session)
    running: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        """Initialize engine components."""
        self.graph = WorldGraph(self.repository)
        self.combat = CombatResolver(
            repository=self.repository,
            chooser=self.ui,
            config=self.config.combat,
        )
        self.dispatcher = ActionDispatcher(
            graph=self.graph,
            combat=self.combat,
            player_service=PlayerService(),
        )

    # =========================================================================
    # Startup
    # =========================================================================

    def initialize(self) -> ServiceResult:
        """
        Establish the starting player and room.

        Without either the engine boots into Admin mode instead of failing.
        """
        logger.info("Game engine started")

        player = self._find_starting_player()
        if player is None:
            self.session.switch_mode(GameMode.ADMIN)
            return ServiceResult.fail(
                "No players", "No players found! Please create a character first."
            )

        view = self._find_starting_room(player)
        if view is None:
            self.session.set_player(player)
            self.session.switch_mode(GameMode.ADMIN)
            return ServiceResult.fail(
                "No rooms", "No rooms found! The world may not be properly seeded."
            )

        self.session.set_player(player)
        self.session.enter_room(view)
        self.session.switch_mode(GameMode.EXPLORATION)
        logger.info(
            "Game initialized with player %s in room %s", player.name, view.room.name
        )
        return ServiceResult.ok(
            "Entered world",
            f"Welcome, {player.name}! You find yourself in {view.room.name}.",
        )

    def _find_starting_player(self) -> Player | None:
        if self.config.starting_player_id is not None:
            return self.repository.get_player(self.config.starting_player_id)
        players = self.repository.get_players()
        return players[0] if players else None

    def _find_starting_room(self, player: Player) -> RoomView | None:
        if player.room_id is not None:
            view = self.graph.load_view(player.room_id)
            if view is not None:
                return view
            logger.warning("Player %s is in missing room %s", player.name, player.room_id)

        rooms = self.repository.get_rooms()
        return self.graph.load_view(rooms[0].id) if rooms else None

    # =========================================================================
    # Game Loop
    # =========================================================================

    def run(self) -> None:
        """Run turns until `stop` is called."""
        self.running = True
        self.ui.show_result(self.initialize())
        while self.running:
            self.step()

    def stop(self) -> None:
        """Ask the loop to finish after the current turn."""
        self.running = False

    def step(self) -> None:
        """Play one turn in the current mode."""
        if self.session.mode == GameMode.EXPLORATION:
            self.exploration_turn()
        else:
            self.admin_turn()

    def exploration_turn(self) -> ActionOutcome | None:
        """
        One exploration turn: refresh, ask for an action, dispatch, apply.

        Returns:
            The outcome of the dispatched action, or None if the turn
            could not start
        """
        if not self.session.is_ready:
            self.session.switch_mode(GameMode.ADMIN)
            self.ui.show_result(
                ServiceResult.fail("No character", "There is no character or room to explore with.")
            )
            return None

        # Reload to pick up changes made outside the engine since last turn
        try:
            player = self.repository.get_player(self.session.player.id)
            view = self.graph.load_view(self.session.room.id)
            rooms = self.repository.get_rooms()
        except Exception as e:
            logger.error("Error refreshing exploration turn: %s", e, exc_info=True)
            self.ui.show_result(ServiceResult.fail("Turn failed", f"An error occurred: {e}"))
            return None

        if player is None:
            logger.warning("Current player %s no longer exists", self.session.player.id)
            self.session.set_player(None)
            self.session.switch_mode(GameMode.ADMIN)
            self.ui.show_result(
                ServiceResult.fail(
                    "Character not found",
                    "Error: Your character no longer exists.",
                )
            )
            return None

        if view is None:
            logger.warning("Current room %s no longer exists", self.session.room.id)
            self.session.switch_mode(GameMode.ADMIN)
            self.ui.show_result(
                ServiceResult.fail(
                    "Room not found",
                    f"Error: Room {self.session.room.id} does not exist.",
                )
            )
            return None
        self.session.set_player(player)
        self.session.enter_room(view)

        actions = self.dispatcher.legal_actions(view, player)
        action = self.ui.select_action(player, view, rooms, actions)

        outcome = self.dispatcher.dispatch(action, self.session)
        self._apply(outcome)
        self.ui.show_result(outcome.result)
        return outcome

    def _apply(self, outcome: ActionOutcome) -> None:
        """Apply the session changes an outcome asks for."""
        if outcome.result.success and outcome.destination is not None:
            self.session.enter_room(outcome.destination)
        if outcome.next_mode is not None:
            logger.info("Switching to %s mode", outcome.next_mode.value)
            self.session.switch_mode(outcome.next_mode)

    def admin_turn(self) -> ServiceResult:
        """One admin turn: every option but Explore World and Quit loops back here."""
        option = self.admin.select_option()

        if option == AdminOption.EXPLORE_WORLD:
            result = self.explore_world()
        elif option == AdminOption.QUIT:
            self.stop()
            result = ServiceResult.ok("Goodbye", "Farewell, adventurer!")
        else:
            try:
                result = self.admin.perform(option)
            except Exception as e:
                logger.error("Error performing admin option %r: %s", option, e, exc_info=True)
                result = ServiceResult.fail("Turn failed", f"An error occurred: {e}")

        self.ui.show_result(result)
        return result

    def explore_world(self) -> ServiceResult:
        """Switch from Admin to Exploration, re-establishing the session if needed."""
        logger.info("User selected Explore World - switching to Exploration Mode")

        if not self.session.is_ready:
            result = self.initialize()
            if not result.success:
                return result
        else:
            self.session.switch_mode(GameMode.EXPLORATION)

        return ServiceResult.ok(
            "Entered world",
            "Welcome to the world! Use the menu below to explore, fight monsters, "
            "and manage your character.",
        )
