"""
Engine Data Models for RoomQuest.

Defines the core data structures for the game loop:
- GameMode: Which state the engine is in
- ExplorationAction / AdminOption: The closed sets of menu labels
- Session: Mode, current player and current room
- ActionOutcome: What a dispatched action produced
"""

from __future__ import annotations

import os
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field

from roomquest.models import Direction, Player, Room, RoomView, ServiceResult
from roomquest.services.combat import CombatConfig


class GameMode(str, Enum):
    """States of the game-mode state machine."""

    EXPLORATION = "exploration"
    ADMIN = "admin"


class ExplorationAction(str, Enum):
    """Action labels offered while exploring."""

    GO_NORTH = "Go North"
    GO_SOUTH = "Go South"
    GO_EAST = "Go East"
    GO_WEST = "Go West"
    VIEW_MAP = "View Map"
    VIEW_INVENTORY = "View Inventory"
    VIEW_STATS = "View Character Stats"
    ATTACK = "Attack Monster"
    USE_ABILITY = "Use Ability"
    MAIN_MENU = "Return to Main Menu"

    @property
    def direction(self) -> Direction | None:
        """The direction a movement action goes in, or None."""
        return _MOVES.get(self)

    @classmethod
    def move(cls, direction: Direction) -> ExplorationAction:
        for action, move_direction in _MOVES.items():
            if move_direction == direction:
                return action
        raise ValueError(f"Unknown direction: {direction}")


_MOVES = {
    ExplorationAction.GO_NORTH: Direction.NORTH,
    ExplorationAction.GO_SOUTH: Direction.SOUTH,
    ExplorationAction.GO_EAST: Direction.EAST,
    ExplorationAction.GO_WEST: Direction.WEST,
}


class AdminOption(str, Enum):
    """Admin menu labels."""

    EXPLORE_WORLD = "Explore World"
    LIST_CHARACTERS = "Display All Characters"
    ROOM_DETAILS = "Display Room Details"
    ROOMS_WITH_CHARACTERS = "List All Rooms with Characters"
    FIND_ITEM = "Find Equipment Location"
    CHECK_LINKS = "Check Room Connections"
    QUIT = "Quit"


class Session(BaseModel):
    """
    The state held across turns.

    Only `switch_mode`, `set_player` and `enter_room` change it.
    """

    mode: GameMode = GameMode.EXPLORATION
    player: Player | None = None
    view: RoomView | None = None

    @property
    def room(self) -> Room | None:
        """The current room, if one is established."""
        return self.view.room if self.view is not None else None

    @property
    def is_ready(self) -> bool:
        """Whether there is a player and a room to explore with."""
        return self.player is not None and self.view is not None

    def switch_mode(self, mode: GameMode) -> None:
        self.mode = mode

    def set_player(self, player: Player | None) -> None:
        """Make `player` the active character, or clear it."""
        self.player = player

    def enter_room(self, view: RoomView) -> None:
        """Make `view` the current room."""
        self.view = view


class ActionOutcome(BaseModel):
    """Result of one dispatched action plus the session changes it asks for."""

    result: ServiceResult
    destination: RoomView | None = Field(
        default=None, description="Room to enter after a successful move"
    )
    next_mode: GameMode | None = Field(default=None, description="Mode to switch to")


class EngineConfig(BaseModel):
    """
    Engine configuration.

    Configuration via environment variables (see `from_env`):
        ROOMQUEST_BASE_ATTACK_DAMAGE: Unarmed attack damage (default: 5)
        ROOMQUEST_ABILITY_DAMAGE: Damage of any ability (default: 15)
        ROOMQUEST_DEFEAT_EXPERIENCE: XP per defeated monster (default: 50)
        ROOMQUEST_PLAYER_ID: UUID of the player to start with (default: first player)
    """

    combat: CombatConfig = Field(default_factory=CombatConfig)
    starting_player_id: UUID | None = Field(
        default=None, description="Player to start with; the first stored player if unset"
    )

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Build a config, overriding defaults from the environment."""
        overrides = {}
        for name, env_var in [
            ("base_attack_damage", "ROOMQUEST_BASE_ATTACK_DAMAGE"),
            ("ability_damage", "ROOMQUEST_ABILITY_DAMAGE"),
            ("defeat_experience", "ROOMQUEST_DEFEAT_EXPERIENCE"),
        ]:
            value = os.getenv(env_var)
            if value:
                overrides[name] = int(value)

        player_id = os.getenv("ROOMQUEST_PLAYER_ID")
        return cls(
            combat=CombatConfig(**overrides),
            starting_player_id=UUID(player_id) if player_id else None,
        )
