"""The title menu scene and the scene that hosts the pillars journey."""

from __future__ import annotations

from typing import Any

import pygame

from pillarsofself.assets import Assets, get_assets
from pillarsofself.command import Command
from pillarsofself.pillars import Key, PillarsJourney
from pillarsofself.pillars_view import PillarsView, key_from_pygame
from pillarsofself.scene import Scene

BACKGROUND = (84, 146, 163)
TEXT_COLOR = (0, 0, 0)
CHAR_SIZE = 84
TITLE_POSITION = (475, 10)

_JOURNEY_KEYS = (
    pygame.K_0,
    pygame.K_1,
    pygame.K_2,
    pygame.K_3,
    pygame.K_4,
    pygame.K_5,
    pygame.K_6,
    pygame.K_7,
    pygame.K_8,
    pygame.K_9,
    pygame.K_RETURN,
    pygame.K_ESCAPE,
    pygame.K_SPACE,
)


class _JourneyScene(Scene):
    """Plays the seven pillars journey inside the engine's window."""

    def __init__(self, game: Any, level_path: str) -> None:
        super().__init__(game)
        self.level_path = level_path
        self.journey = PillarsJourney()
        self._view: PillarsView | None = None
        for code in _JOURNEY_KEYS:
            key = key_from_pygame(code)
            if key is not None:
                self.register_action(code, key.name)

    def update(self, dt: float) -> None:
        self.entity_manager.update()
        self.journey.update(dt)

    def s_do_action(self, action: Command) -> None:
        if action.type == "START" and action.name in Key.__members__:
            self.journey.handle_key(Key[action.name])

    def s_render(self) -> None:
        if self._view is None:
            self._view = PillarsView(self.game.window.surface, self.journey)
        self._view.render()

    def on_end(self) -> None:
        self.game.back_level()


class SceneMenu(Scene):
    """Title screen: shows the menu and starts the journey on Enter."""

    def __init__(self, game: Any, assets: Assets | None = None) -> None:
        super().__init__(game)
        self._assets = assets if assets is not None else get_assets()
        self.menu_index = 0
        self.title = "7   Pillars   of   Self"
        self.menu_strings = ["Press  Enter  to  Begin"]
        self.level_paths = ["../level1.txt"]

        self.register_action(pygame.K_w, "UP")
        self.register_action(pygame.K_UP, "UP")
        self.register_action(pygame.K_s, "DOWN")
        self.register_action(pygame.K_DOWN, "DOWN")
        self.register_action(pygame.K_RETURN, "PLAY")
        self.register_action(pygame.K_ESCAPE, "QUIT")

        self._font = self._assets.get_font("Arcade")

    def update(self, dt: float) -> None:
        self.entity_manager.update()

    def s_render(self) -> list[tuple[str, tuple[int, int]]]:
        """Draw the menu and return each text drawn with its position."""
        window = self.game.window
        window.clear(BACKGROUND)
        font = self._font.at_size(CHAR_SIZE)
        drawn = [(self.title, TITLE_POSITION)]
        drawn += [
            (text, (32, 32 + (i + 1) * 96)) for i, text in enumerate(self.menu_strings)
        ]
        for text, position in drawn:
            window.surface.blit(font.render(text, True, TEXT_COLOR), position)
        return drawn

    def s_do_action(self, action: Command) -> None:
        if action.type != "START":
            return
        count = len(self.menu_strings)
        if action.name == "UP":
            self.menu_index = (self.menu_index + count - 1) % count
        elif action.name == "DOWN":
            self.menu_index = (self.menu_index + 1) % count
        elif action.name == "PLAY":
            scene = _JourneyScene(self.game, self.level_paths[self.menu_index])
            self.game.change_scene("PLAY", scene)
        elif action.name == "QUIT":
            self.on_end()

    def on_end(self) -> None:
        self.game.window.close()