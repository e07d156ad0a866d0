"""The game engine: window, scene switching and the fixed-step main loop."""

from __future__ import annotations

import re
import time
from collections import deque
from pathlib import Path
from typing import Any, Callable, Iterator

import pygame

from pillarsofself.assets import Assets, get_assets
from pillarsofself.command import Command
from pillarsofself.scene import Scene
from pillarsofself.scene_menu import SceneMenu
from pillarsofself.utilities import Vec2

ASSETS_CONFIG = "../config.txt"
WINDOW_TITLE = "Emotional Fitness Academy"
CLEAR_COLOR = (0, 255, 255)
SECONDS_PER_FRAME = 1.0 / 60.0

STATISTICS_POSITION = (15.0, 5.0)
STATISTICS_SIZE = 15

_WORD_PATTERN = re.compile(r"\S+")
_UNSIGNED = re.compile(r"\+?\d+")


def _config_words(text: str) -> Iterator[str]:
    """Words of a config text; a word starting with '#' ends its line."""
    for line in text.splitlines():
        for match in _WORD_PATTERN.finditer(line):
            word = match.group()
            if word.startswith("#"):
                print(line[match.end():])
                break
            yield word


def _dimension(words: deque[str]) -> int:
    if not words or not _UNSIGNED.fullmatch(words[0]):
        raise ValueError("expected an unsigned integer")
    return int(words.popleft())


def load_window_size(path: str | Path) -> tuple[int, int]:
    """Read the ``Window width height`` entry of a config file."""
    words = deque(_config_words(Path(path).read_text()))
    size: tuple[int, int] | None = None
    while words:
        if words.popleft() != "Window":
            continue
        try:
            width = _dimension(words)
            height = _dimension(words)
        except ValueError:
            print("*** Error reading config file")
            continue
        size = (width, height)
    if size is None:
        raise ValueError(f"no Window entry in {path}")
    return size


class _PygameWindow:
    """A pygame display window with an explicit open/closed state."""

    def __init__(self, width: int, height: int, title: str) -> None:
        pygame.init()
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self._open = True

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    def poll_events(self) -> list[Any]:
        return pygame.event.get() if self._open else []

    def clear(self, color: tuple[int, int, int]) -> None:
        self.surface.fill(color)

    def display(self) -> None:
        if self._open:
            pygame.display.flip()

    def close(self) -> None:
        if self._open:
            self._open = False
            pygame.display.quit()


class GameEngine:
    """Owns the window and the scenes, and runs the main loop."""

    def __init__(
        self,
        path: str | Path,
        assets: Assets | None = None,
        window_factory: Callable[[int, int, str], Any] | None = None,
        assets_path: str | Path | None = ASSETS_CONFIG,
    ) -> None:
        self.assets = assets if assets is not None else get_assets()
        if assets_path is not None:
            self.assets.load_from_file(assets_path)

        self.current_scene_name = ""
        self.scenes: dict[str, Scene] = {}
        self.simulation_speed = 1
        self.running = True
        self.statistics_update_time = 0.0
        self.statistics_num_frames = 0

        width, height = load_window_size(path)
        factory = window_factory or _PygameWindow
        self.window = factory(width, height, WINDOW_TITLE)

        self.statistics_font = self.assets.get_font("main")
        self.change_scene("MENU", SceneMenu(self, self.assets))

    def change_scene(self, name: str, scene: Scene | None, end_current: bool = False) -> None:
        """Switch to a scene, registering it under the name if it is new."""
        if end_current:
            self.scenes.pop(self.current_scene_name, None)
        if name not in self.scenes:
            if scene is None:
                raise ValueError(f"no scene named {name}")
            self.scenes[name] = scene
        self.current_scene_name = name

    def current_scene(self) -> Scene:
        return self.scenes[self.current_scene_name]

    def quit(self) -> None:
        self.window.close()

    def run(self) -> None:
        """Process input, step scenes at a fixed rate and render until closed."""
        accumulated = 0.0
        last = time.perf_counter()
        while self.is_running():
            self.s_user_input()
            if not self.is_running():
                break
            now = time.perf_counter()
            accumulated += now - last
            last = now
            while accumulated > SECONDS_PER_FRAME:
                self.current_scene().update(SECONDS_PER_FRAME)
                accumulated -= SECONDS_PER_FRAME
            self.window.clear(CLEAR_COLOR)
            self.current_scene().s_render()
            self.window.display()

    def quit_level(self) -> None:
        """End the current scene and go back to the menu."""
        self.change_scene("MENU", None, True)

    def back_level(self) -> None:
        """Go back to the menu, keeping the current scene."""
        self.change_scene("MENU", None, False)

    def window_size(self) -> Vec2:
        width, height = self.window.size
        return Vec2(float(width), float(height))

    def is_running(self) -> bool:
        return self.running and self.window.is_open

    def s_user_input(self) -> None:
        """Turn window events into scene commands."""
        for event in self.window.poll_events():
            if event.type == pygame.QUIT:
                self.quit()
            if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                scene = self.current_scene()
                action_map = scene.action_map
                if event.key in action_map:
                    phase = "START" if event.type == pygame.KEYDOWN else "END"
                    scene.do_action(Command(action_map[event.key], phase))

    def update(self) -> None:
        """One step: handle input, then advance the current scene by one frame."""
        self.s_user_input()
        if self.is_running():
            self.current_scene().update(SECONDS_PER_FRAME)