"""
Tests for RoomQuest data models.
"""

from __future__ import annotations

from uuid import uuid4

import pytest
from pydantic import ValidationError

from roomquest.models import (
    Ability,
    Direction,
    Equipment,
    Item,
    LinkKind,
    LinkViolation,
    Monster,
    MonsterKind,
    Player,
    Room,
    RoomView,
    ServiceResult,
    ValueResult,
    WorldChangeSet,
    connect_rooms,
)


class TestDirection:
    """Tests for cardinal directions."""

    def test_opposites(self):
        assert Direction.NORTH.opposite == Direction.SOUTH
        assert Direction.SOUTH.opposite == Direction.NORTH
        assert Direction.EAST.opposite == Direction.WEST
        assert Direction.WEST.opposite == Direction.EAST

    def test_from_label(self):
        assert Direction("North") == Direction.NORTH

    def test_invalid_label(self):
        with pytest.raises(ValueError):
            Direction("Up")


class TestRoom:
    """Tests for room links."""

    def test_new_room_has_no_links(self):
        room = Room(name="Cell")
        assert room.linked_directions() == []
        for direction in Direction:
            assert room.neighbor_id(direction) is None

    def test_set_neighbor_is_one_way(self):
        first = Room(name="First")
        second = Room(name="Second")

        first.set_neighbor(Direction.EAST, second.id)

        assert first.neighbor_id(Direction.EAST) == second.id
        assert second.neighbor_id(Direction.WEST) is None

    def test_connect_rooms_links_both_ways(self):
        hall = Room(name="Hall")
        vault = Room(name="Vault")

        connect_rooms(hall, vault, Direction.NORTH)

        assert hall.north_room_id == vault.id
        assert vault.south_room_id == hall.id

    def test_unlink(self):
        hall = Room(name="Hall")
        hall.set_neighbor(Direction.WEST, uuid4())
        hall.set_neighbor(Direction.WEST, None)
        assert hall.linked_directions() == []

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Room(name="")


class TestPlayer:
    """Tests for player records."""

    def test_unarmed_weapon_attack(self):
        assert Player(name="Hero").weapon_attack == 0

    def test_armor_only_weapon_attack(self):
        player = Player(name="Hero", equipment=Equipment(armor=Item(name="Mail", defense=4)))
        assert player.weapon_attack == 0

    def test_weapon_attack(self):
        player = Player(name="Hero", equipment=Equipment(weapon=Item(name="Axe", attack=4)))
        assert player.weapon_attack == 4

    def test_health_not_clamped(self):
        assert Player(name="Hero", health=-3).health == -3

    def test_experience_cannot_be_negative(self):
        with pytest.raises(ValidationError):
            Player(name="Hero", experience=-1)


class TestMonster:
    """Tests for monster records and variants."""

    def test_defaults(self):
        monster = Monster(name="Slime", health=3)
        assert monster.kind == MonsterKind.MONSTER
        assert monster.traits == {}

    def test_goblin_variant(self):
        goblin = Monster(
            name="Goblin", health=7, kind=MonsterKind.GOBLIN, traits={"sneakiness": 4}
        )
        assert goblin.kind == MonsterKind.GOBLIN
        assert goblin.traits["sneakiness"] == 4

    def test_descriptor(self):
        assert Monster(name="Goblin", health=7).descriptor == "Goblin (HP: 7)"

    def test_ability_descriptor(self):
        ability = Ability(name="Fire Bolt", description="A dart of flame")
        assert ability.descriptor == "Fire Bolt - A dart of flame"


class TestRoomView:
    """Tests for loaded room views."""

    def test_has_monsters(self):
        room = Room(name="Den")
        assert not RoomView(room=room).has_monsters
        assert RoomView(room=room, monsters=[Monster(name="Wolf", health=6)]).has_monsters

    def test_exits_include_dangling_links(self):
        room = Room(name="Den", north_room_id=uuid4())
        view = RoomView(room=room, dangling=[Direction.NORTH])
        assert view.exits == [Direction.NORTH]


class TestResults:
    """Tests for result envelopes."""

    def test_ok(self):
        result = ServiceResult.ok("Done", "All done.")
        assert result.success
        assert result.message == "Done"
        assert result.detailed_output == "All done."

    def test_fail(self):
        result = ServiceResult.fail("Nope")
        assert not result.success
        assert result.detailed_output == ""

    def test_value_result_carries_value(self):
        room = Room(name="Hall")
        result = ValueResult[Room].ok_with(room, "Arrived")
        assert result.success
        assert result.value.id == room.id

    def test_failed_value_result_has_no_value(self):
        result = ValueResult[Room].fail("Cannot go North")
        assert not result.success
        assert result.value is None

    def test_failed_value_result_rejects_value(self):
        with pytest.raises(ValidationError):
            ValueResult[Room](success=False, message="x", value=Room(name="Hall"))


class TestLinkViolation:
    """Tests for link violation descriptions."""

    def test_describe_dangling(self):
        target = uuid4()
        violation = LinkViolation(
            room_id=uuid4(),
            room_name="Hall",
            direction=Direction.NORTH,
            target_id=target,
            kind=LinkKind.DANGLING,
        )
        assert str(target) in violation.describe()

    def test_describe_one_way(self):
        violation = LinkViolation(
            room_id=uuid4(),
            room_name="Hall",
            direction=Direction.EAST,
            target_id=uuid4(),
            kind=LinkKind.ONE_WAY,
        )
        assert "no West link back" in violation.describe()


class TestWorldChangeSet:
    def test_empty(self):
        assert WorldChangeSet().is_empty()
        assert not WorldChangeSet(removed_monster_ids=[uuid4()]).is_empty()
