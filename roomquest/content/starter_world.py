"""
Starter World for RoomQuest.

Provides a pre-built world with linked rooms, monsters, and a
starting character so players can immediately start exploring.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from roomquest.db.interfaces import WorldRepository
from roomquest.models import (
    Ability,
    Direction,
    Equipment,
    Item,
    Monster,
    MonsterKind,
    Player,
    Room,
    connect_rooms,
)


@dataclass
class StarterWorldResult:
    """Result of creating a starter world."""

    starting_room_id: UUID
    player_id: UUID
    rooms: dict[str, UUID]  # key -> id
    monsters: dict[str, UUID]  # key -> id


def create_starter_world(
    repository: WorldRepository,
    player_name: str = "Hero",
) -> StarterWorldResult:
    """
    Create a complete starter world for immediate gameplay.

    Returns a world with:
    - A town square as the starting room, at grid (0, 0)
    - Six rooms linked both ways on a grid
    - Goblins in the forest and a skeleton guarding the crypt
    - A player with a rusty sword and two abilities

    Args:
        repository: World repository to write into
        player_name: Name for the player character

    Returns:
        StarterWorldResult with all created IDs
    """
    rooms: dict[str, UUID] = {}
    monsters: dict[str, UUID] = {}

    # =========================================================================
    # Create Rooms
    # =========================================================================

    square = Room(
        name="Town Square",
        description=(
            "A cobbled square around a dry fountain. Shuttered shops line "
            "every side, and a notice board creaks in the wind."
        ),
        x=0,
        y=0,
    )
    tavern = Room(
        name="The Rusty Flagon",
        description=(
            "A low-beamed tavern that smells of smoke and spilled ale. "
            "The fire has burned down to embers."
        ),
        x=1,
        y=0,
    )
    market = Room(
        name="Old Market",
        description="Empty stalls and torn awnings. Something skitters beneath a cart.",
        x=-1,
        y=0,
    )
    forest = Room(
        name="Forest Path",
        description=(
            "A narrow trail winding between dark pines. Broken branches "
            "suggest something passed through in a hurry."
        ),
        x=0,
        y=1,
    )
    clearing = Room(
        name="Moonlit Clearing",
        description="A ring of standing stones, silver under the moon.",
        x=1,
        y=1,
    )
    crypt = Room(
        name="Crypt Entrance",
        description=(
            "Stone steps lead down into darkness. Cold air rises from below, "
            "carrying the smell of old dust."
        ),
        x=0,
        y=2,
    )

    connect_rooms(square, tavern, Direction.EAST)
    connect_rooms(square, market, Direction.WEST)
    connect_rooms(square, forest, Direction.NORTH)
    connect_rooms(forest, clearing, Direction.EAST)
    connect_rooms(tavern, clearing, Direction.NORTH)
    connect_rooms(forest, crypt, Direction.NORTH)

    for key, room in [
        ("square", square),
        ("tavern", tavern),
        ("market", market),
        ("forest", forest),
        ("clearing", clearing),
        ("crypt", crypt),
    ]:
        repository.save_room(room)
        rooms[key] = room.id

    # =========================================================================
    # Create Monsters
    # =========================================================================

    for index, health in enumerate([7, 10], start=1):
        goblin = Monster(
            name=f"Goblin Raider {index}",
            health=health,
            aggression_level=3,
            room_id=forest.id,
            kind=MonsterKind.GOBLIN,
            traits={"sneakiness": 4},
        )
        repository.save_monster(goblin)
        monsters[f"goblin_{index}"] = goblin.id

    rat = Monster(
        name="Giant Rat",
        health=4,
        aggression_level=1,
        room_id=market.id,
        kind=MonsterKind.BEAST,
    )
    repository.save_monster(rat)
    monsters["rat"] = rat.id

    skeleton = Monster(
        name="Crypt Skeleton",
        health=30,
        aggression_level=5,
        room_id=crypt.id,
        kind=MonsterKind.UNDEAD,
        traits={"resists": "piercing"},
    )
    repository.save_monster(skeleton)
    monsters["skeleton"] = skeleton.id

    # =========================================================================
    # Create Player
    # =========================================================================

    player = Player(
        name=player_name,
        health=100,
        room_id=square.id,
        equipment=Equipment(
            weapon=Item(name="Rusty Sword", description="Better than nothing.", attack=3),
            armor=Item(name="Leather Jerkin", description="Stiff and patched.", defense=2),
        ),
        abilities=[
            Ability(name="Power Strike", description="A heavy two-handed blow"),
            Ability(name="Fire Bolt", description="A dart of flame from your palm"),
        ],
    )
    repository.save_player(player)

    return StarterWorldResult(
        starting_room_id=square.id,
        player_id=player.id,
        rooms=rooms,
        monsters=monsters,
    )
