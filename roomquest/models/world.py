"""
World Models for RoomQuest.

Defines the core data structures of the room graph:
Rooms, Players, Monsters and the content they carry.

Rooms reference their neighbours by ID only; the graph is resolved
at the point of use by the World Graph service.
"""

from __future__ import annotations

from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class Direction(str, Enum):
    """The four cardinal directions a room can link in."""

    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"

    @property
    def opposite(self) -> Direction:
        """The direction pointing back the way you came."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


class MonsterKind(str, Enum):
    """Discriminant for monster variants."""

    MONSTER = "monster"
    GOBLIN = "goblin"
    UNDEAD = "undead"
    BEAST = "beast"


class Item(BaseModel):
    """A piece of equipment. Content only; the engine reads the bonuses."""

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    attack: int = Field(default=0, description="Bonus damage when used as a weapon")
    defense: int = Field(default=0, description="Protection when worn as armor")
    value: int = Field(default=0, ge=0)
    weight: float = Field(default=0.0, ge=0)


class Equipment(BaseModel):
    """A player's equipment slot."""

    weapon: Item | None = None
    armor: Item | None = None

    def items(self) -> list[Item]:
        return [item for item in (self.weapon, self.armor) if item is not None]


class Ability(BaseModel):
    """A learned ability. All abilities deal the same flat damage."""

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(min_length=1, max_length=255)
    description: str = ""

    @property
    def descriptor(self) -> str:
        """Display text offered when choosing between abilities."""
        return f"{self.name} - {self.description}"


class Room(BaseModel):
    """
    A node in the room graph.

    Neighbours are stored as room IDs. A link from A to B is expected to
    be mirrored by the opposite link from B to A, but nothing enforces it.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    x: int = 0
    y: int = 0

    north_room_id: UUID | None = None
    south_room_id: UUID | None = None
    east_room_id: UUID | None = None
    west_room_id: UUID | None = None

    def neighbor_id(self, direction: Direction) -> UUID | None:
        """Get the ID of the room linked in a direction, if any."""
        return getattr(self, _NEIGHBOR_FIELDS[direction])

    def set_neighbor(self, direction: Direction, room_id: UUID | None) -> None:
        """Link (or unlink, with None) a neighbour in one direction only."""
        setattr(self, _NEIGHBOR_FIELDS[direction], room_id)

    def linked_directions(self) -> list[Direction]:
        return [d for d in Direction if self.neighbor_id(d) is not None]


_NEIGHBOR_FIELDS = {
    Direction.NORTH: "north_room_id",
    Direction.SOUTH: "south_room_id",
    Direction.EAST: "east_room_id",
    Direction.WEST: "west_room_id",
}


class Player(BaseModel):
    """The player character."""

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(min_length=1, max_length=255)
    health: int = Field(default=100, description="Not clamped; may go negative")
    experience: int = Field(default=0, ge=0)
    room_id: UUID | None = Field(default=None, description="Where the player is")
    equipment: Equipment | None = None
    abilities: list[Ability] = Field(default_factory=list)

    @property
    def weapon_attack(self) -> int:
        """Attack bonus of the equipped weapon, or 0 when unarmed."""
        if self.equipment is None or self.equipment.weapon is None:
            return 0
        return self.equipment.weapon.attack


class Monster(BaseModel):
    """
    A hostile occupant of a room.

    Variants share this record; `kind` discriminates and `traits` holds
    kind-specific extras. Combat only reads `name` and `health`.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(min_length=1, max_length=255)
    health: int
    aggression_level: int = Field(default=0, ge=0)
    room_id: UUID | None = None
    kind: MonsterKind = MonsterKind.MONSTER
    traits: dict[str, int | str] = Field(default_factory=dict)

    @property
    def descriptor(self) -> str:
        """Display text offered when choosing between targets."""
        return f"{self.name} (HP: {self.health})"


class RoomView(BaseModel):
    """
    A room loaded together with its occupants and resolved neighbours.

    Neighbour IDs that point at no room are listed in `dangling`.
    """

    room: Room
    players: list[Player] = Field(default_factory=list)
    monsters: list[Monster] = Field(default_factory=list)
    neighbors: dict[Direction, Room] = Field(default_factory=dict)
    dangling: list[Direction] = Field(default_factory=list)

    @property
    def has_monsters(self) -> bool:
        return bool(self.monsters)

    @property
    def exits(self) -> list[Direction]:
        """Directions with a neighbour reference, resolvable or not."""
        return self.room.linked_directions()


class LinkKind(str, Enum):
    """Ways a directional link can break bidirectional consistency."""

    DANGLING = "dangling"
    ONE_WAY = "one_way"


class LinkViolation(BaseModel):
    """A directional link that is not mirrored or points at no room."""

    room_id: UUID
    room_name: str
    direction: Direction
    target_id: UUID
    kind: LinkKind

    def describe(self) -> str:
        if self.kind == LinkKind.DANGLING:
            return f"{self.room_name} -> {self.direction.value}: room {self.target_id} does not exist"
        return (
            f"{self.room_name} -> {self.direction.value}: "
            f"no {self.direction.opposite.value} link back"
        )


class WorldChangeSet(BaseModel):
    """All mutations produced by one action, committed as a unit."""

    players: list[Player] = Field(default_factory=list)
    monsters: list[Monster] = Field(default_factory=list)
    removed_monster_ids: list[UUID] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.players or self.monsters or self.removed_monster_ids)


def connect_rooms(first: Room, second: Room, direction: Direction) -> None:
    """Link two rooms both ways: `second` lies `direction` of `first`."""
    first.set_neighbor(direction, second.id)
    second.set_neighbor(direction.opposite, first.id)
