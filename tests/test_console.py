"""
Tests for the console front end and map rendering.
"""

from __future__ import annotations

import pytest

from roomquest.cli.console import AdminMenu, ConsoleUI, prompt_choice
from roomquest.cli.map import render_map
from roomquest.content import create_starter_world
from roomquest.db.memory import InMemoryWorldRepository
from roomquest.models import Direction, Room, ServiceResult, connect_rooms
from roomquest.services.world_graph import WorldGraph


def scripted_input(*answers: str):
    queue = list(answers)

    def read(prompt: str) -> str:
        return queue.pop(0)

    return read


class Output:
    """Collects written lines."""

    def __init__(self):
        self.lines: list[str] = []

    def __call__(self, text: str) -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


# --- prompt_choice ---


class TestPromptChoice:
    def test_by_number(self):
        out = Output()
        assert prompt_choice("Pick", ["a", "b"], scripted_input("2"), out) == "b"
        assert "  1. a" in out.lines

    def test_by_text(self):
        assert prompt_choice("Pick", ["a", "b"], scripted_input("a"), Output()) == "a"

    def test_reasks_until_valid(self):
        out = Output()
        choice = prompt_choice("Pick", ["a", "b"], scripted_input("9", "zzz", "1"), out)
        assert choice == "a"
        assert out.lines.count("Please enter a number from 1 to 2.") == 2

    def test_empty_options(self):
        with pytest.raises(ValueError):
            prompt_choice("Pick", [], scripted_input(), Output())


# --- render_map ---


class TestRenderMap:
    def test_no_rooms(self):
        assert render_map([]) == "(no rooms)"

    def test_marks_current_room(self):
        hall = Room(name="Hall", x=0, y=0)
        east = Room(name="East", x=1, y=0)
        connect_rooms(hall, east, Direction.EAST)

        assert render_map([hall, east], hall.id) == "[@]-[ ]"

    def test_vertical_link(self):
        hall = Room(name="Hall", x=0, y=0)
        tower = Room(name="Tower", x=0, y=1)
        connect_rooms(hall, tower, Direction.NORTH)

        assert render_map([hall, tower], tower.id).splitlines() == ["[@]", " |", "[ ]"]

    def test_unlinked_neighbours(self):
        west = Room(name="West", x=0, y=0)
        east = Room(name="East", x=1, y=0)
        assert render_map([west, east]) == "[ ] [ ]"


# --- ConsoleUI ---


class TestConsoleUI:
    def test_show_result_prefers_detail(self):
        out = Output()
        ui = ConsoleUI(read=scripted_input(), write=out)

        ui.show_result(ServiceResult.ok("Short", "The long version."))
        ui.show_result(ServiceResult.fail("Only short"))

        assert "The long version." in out.lines
        assert "Only short" in out.lines
        assert ui.messages == ["Short", "Only short"]

    def test_message_log_is_trimmed(self):
        ui = ConsoleUI(read=scripted_input(), write=Output(), max_messages=2)
        for n in range(4):
            ui.show_result(ServiceResult.ok(f"m{n}"))
        assert ui.messages == ["m2", "m3"]

    def test_select_action_renders_room(self):
        repository = InMemoryWorldRepository()
        starter = create_starter_world(repository)
        view = WorldGraph(repository).load_view(starter.rooms["forest"])
        player = repository.get_player(starter.player_id)
        out = Output()
        ui = ConsoleUI(read=scripted_input("1"), write=out)

        action = ui.select_action(player, view, repository.get_rooms(), ["Go South", "View Map"])

        assert action == "Go South"
        assert "Forest Path" in out.text
        assert "Goblin Raider 1 (HP: 7)" in out.text
        assert "[@]" in out.text


# --- AdminMenu ---


class TestAdminMenu:
    @pytest.fixture
    def repository(self):
        repository = InMemoryWorldRepository()
        create_starter_world(repository, player_name="Ada")
        return repository

    def test_select_option(self, repository):
        menu = AdminMenu(repository, read=scripted_input("7"), write=Output())
        assert menu.select_option() == "Quit"

    def test_list_characters(self, repository):
        menu = AdminMenu(repository, read=scripted_input(), write=Output())
        result = menu.perform("Display All Characters")
        assert "Ada" in result.detailed_output

    def test_room_details_prompts_for_room(self, repository):
        menu = AdminMenu(repository, read=scripted_input("Crypt Entrance"), write=Output())
        result = menu.perform("Display Room Details")
        assert result.success
        assert "Crypt Skeleton (HP: 30)" in result.detailed_output

    def test_find_item(self, repository):
        menu = AdminMenu(repository, read=scripted_input("sword"), write=Output())
        result = menu.perform("Find Equipment Location")
        assert "Rusty Sword: carried by Ada in Town Square" in result.detailed_output

    def test_check_links(self, repository):
        menu = AdminMenu(repository, read=scripted_input(), write=Output())
        assert menu.perform("Check Room Connections").message == "Links OK"

    def test_invalid_option(self, repository):
        menu = AdminMenu(repository, read=scripted_input(), write=Output())
        result = menu.perform("Teleport")
        assert not result.success
        assert result.message == "Invalid selection"
