"""Base class for game scenes: input mapping and per-scene entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pillarsofself.command import Command
from pillarsofself.entity_manager import EntityManager

_STEP_SECONDS = 1.0 / 60.0


class Scene(ABC):
    """A screen of the game with its own entities and key-to-action map."""

    def __init__(self, game: Any) -> None:
        self.game = game
        self.entity_manager = EntityManager()
        self._commands: dict[int, str] = {}
        self.is_paused = False
        self.has_ended = False
        self.current_frame = 0

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the scene by dt seconds."""

    @abstractmethod
    def s_do_action(self, action: Command) -> None:
        """React to a command."""

    @abstractmethod
    def s_render(self) -> None:
        """Draw the scene."""

    @abstractmethod
    def on_end(self) -> None:
        """Called when the scene finishes."""

    def set_paused(self, paused: bool) -> None:
        self.is_paused = paused

    def simulate(self, steps: int) -> None:
        """Run the given number of fixed 1/60 s updates in one go."""
        for _ in range(steps):
            self.update(_STEP_SECONDS)

    def do_action(self, command: Command) -> None:
        self.s_do_action(command)

    def register_action(self, key: int, name: str) -> None:
        self._commands[key] = name

    @property
    def action_map(self) -> dict[int, str]:
        """A copy of the key-to-action-name map."""
        return dict(self._commands)