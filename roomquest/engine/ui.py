"""
Collaborator interfaces the engine drives.

The engine never renders or prompts itself; it hands state to these
and gets back one discrete choice per call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from roomquest.services.combat import ChoiceProvider

if TYPE_CHECKING:
    from roomquest.models import Player, Room, RoomView, ServiceResult


class ExplorationUI(ChoiceProvider, Protocol):
    """Renders exploration state and collects the player's choices."""

    def select_action(
        self,
        player: Player,
        view: RoomView,
        rooms: list[Room],
        actions: list[str],
    ) -> str:
        """Render the current room and return one of `actions`."""
        ...

    def show_result(self, result: ServiceResult) -> None:
        """Report the outcome of an action."""
        ...


class AdminConsole(Protocol):
    """The administrative menu the engine falls back to."""

    def select_option(self) -> str:
        """Show the admin menu and return one option label."""
        ...

    def perform(self, option: str) -> ServiceResult:
        """Carry out an admin option that does not change the game mode."""
        ...
