"""
Interactive console for RoomQuest.

Provides a text-based interface for playing the game: the exploration
screen, numbered menus, and the admin menu of world reports.
"""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from uuid import UUID

from roomquest.cli.map import render_map
from roomquest.content import create_starter_world
from roomquest.db.interfaces import WorldRepository
from roomquest.db.memory import InMemoryWorldRepository
from roomquest.engine import AdminOption, EngineConfig, GameEngine
from roomquest.models import Player, Room, RoomView, ServiceResult
from roomquest.services.reports import WorldReportService

logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


def prompt_choice(
    title: str,
    options: list[str],
    read: InputFunc = input,
    write: OutputFunc = print,
) -> str:
    """
    Show a numbered menu and return exactly one of `options`.

    Accepts the option number or its exact text; asks again otherwise.
    """
    if not options:
        raise ValueError("Nothing to choose from")

    write(title)
    for index, option in enumerate(options, start=1):
        write(f"  {index}. {option}")

    while True:
        answer = read("> ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        if answer in options:
            return answer
        write(f"Please enter a number from 1 to {len(options)}.")


@dataclass
class ConsoleUI:
    """Exploration screen over stdin/stdout."""

    read: InputFunc = input
    write: OutputFunc = print
    max_messages: int = 5
    messages: list[str] = field(default_factory=list)

    def choose(self, title: str, options: list[str]) -> str:
        return prompt_choice(title, options, self.read, self.write)

    def select_action(
        self,
        player: Player,
        view: RoomView,
        rooms: list[Room],
        actions: list[str],
    ) -> str:
        """Render the current room and return the chosen action."""
        self.write("")
        self.write(render_map(rooms, view.room.id))
        self.write("")
        self.write(self._format_room(player, view))
        if self.messages:
            self.write("")
            self.write("Recent: " + " | ".join(self.messages))
        self.write("")
        return self.choose("What do you do?", actions)

    def show_result(self, result: ServiceResult) -> None:
        """Print the detailed output and remember the short message."""
        self.messages.append(result.message)
        del self.messages[: -self.max_messages]
        self.write("")
        self.write(result.detailed_output or result.message)

    def _format_room(self, player: Player, view: RoomView) -> str:
        room = view.room
        lines = [room.name, "=" * len(room.name)]
        if room.description:
            lines.append(room.description)
        lines.append("")
        lines.append(f"{player.name} - HP {player.health}, XP {player.experience}")

        others = [p.name for p in view.players if p.id != player.id]
        if others:
            lines.append("Also here: " + ", ".join(others))

        if view.monsters:
            lines.append("Monsters:")
            for monster in view.monsters:
                lines.append(f"  - {monster.descriptor}")

        exits = [f"{d.value} ({n.name})" for d, n in view.neighbors.items()]
        exits.extend(f"{d.value} (?)" for d in view.dangling)
        lines.append("Exits: " + (", ".join(exits) if exits else "none"))
        return "\n".join(lines)


@dataclass
class AdminMenu:
    """Admin menu of read-only world reports."""

    repository: WorldRepository
    read: InputFunc = input
    write: OutputFunc = print
    reports: WorldReportService = field(init=False)

    def __post_init__(self) -> None:
        self.reports = WorldReportService(self.repository)

    def select_option(self) -> str:
        self.write("")
        return prompt_choice(
            "=== Admin Menu ===", [o.value for o in AdminOption], self.read, self.write
        )

    def perform(self, option: str) -> ServiceResult:
        """Run the report behind an admin option."""
        if option == AdminOption.LIST_CHARACTERS:
            return self.reports.list_characters()
        if option == AdminOption.ROOM_DETAILS:
            return self._room_details()
        if option == AdminOption.ROOMS_WITH_CHARACTERS:
            return self.reports.rooms_with_characters()
        if option == AdminOption.FIND_ITEM:
            return self.reports.find_item(self.read("Item name: "))
        if option == AdminOption.CHECK_LINKS:
            return self.reports.link_report()
        return ServiceResult.fail("Invalid selection", f"Invalid selection: {option}")

    def _room_details(self) -> ServiceResult:
        rooms = self.repository.get_rooms()
        if not rooms:
            return ServiceResult.fail("No rooms", "No rooms found.")
        names = [room.name for room in rooms]
        chosen = prompt_choice("Which room?", names, self.read, self.write)
        room_id: UUID = rooms[names.index(chosen)].id
        return self.reports.room_details(room_id)


def _print_banner() -> None:
    """Print the game banner."""
    banner = r"""
  ____                       ___                  _
 |  _ \ ___   ___  _ __ ___ / _ \ _   _  ___  ___| |_
 | |_) / _ \ / _ \| '_ ` _ \ | | | | | |/ _ \/ __| __|
 |  _ < (_) | (_) | | | | | | |_| | |_| |  __/\__ \ |_
 |_| \_\___/ \___/|_| |_| |_|\__\_\\__,_|\___||___/\__|
"""
    print(banner)


def run_game(character_name: str = "Hero", log_level: str | None = None) -> None:
    """
    Run RoomQuest on a fresh starter world.

    Args:
        character_name: Name for the player character
        log_level: Logging level name (default: ROOMQUEST_LOG_LEVEL or WARNING)
    """
    logging.basicConfig(
        level=(log_level or os.getenv("ROOMQUEST_LOG_LEVEL", "WARNING")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    repository = InMemoryWorldRepository()
    create_starter_world(repository, player_name=character_name)

    engine = GameEngine(
        repository=repository,
        ui=ConsoleUI(),
        admin=AdminMenu(repository),
        config=EngineConfig.from_env(),
    )

    _print_banner()
    try:
        engine.run()
    except (KeyboardInterrupt, EOFError):
        print("\n")
        engine.stop()

    print("Thanks for playing!")


def main() -> None:
    parser = argparse.ArgumentParser(description="RoomQuest text adventure")
    parser.add_argument("--name", default="Hero", help="Character name")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (overrides ROOMQUEST_LOG_LEVEL)",
    )
    args = parser.parse_args()
    run_game(character_name=args.name, log_level=args.log_level)


if __name__ == "__main__":
    main()
