"""Drawing and the interactive window for the seven pillars journey."""

from __future__ import annotations

import argparse
import functools
import math
from typing import Any, Callable, Sequence

import pygame

from pillarsofself.pillars import (
    PILLAR_COLORS,
    PILLAR_COUNT,
    PILLAR_NAMES,
    GameState,
    Key,
    PillarsJourney,
)

WINDOW_SIZE = (1200, 800)
WINDOW_TITLE = "The 7 Pillars of Self"

BACKGROUND = (20, 30, 50)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
PILLAR_GREY = (100, 100, 100)
PILLAR_SIZE = (100, 150)
BREATH_COLOR = (100, 150, 255, 100)
BREATH_CENTER = (550, 350)
TRUNK_COLOR = (101, 67, 33)
LEAVES_COLOR = (34, 139, 34)
SILHOUETTE_COLOR = (50, 50, 50)

TITLE_SIZE = 48
INSTRUCTION_SIZE = 24
BUTTON_SIZE = 20
FOOTER_SIZE = 18

MENU_CENTER = (600.0, 400.0)
MENU_RADIUS = 200.0

_ESC_HINT = "Press ESC to return to main menu"

_KEYMAP: dict[int, Key] = {
    **{getattr(pygame, f"K_{digit}"): Key(Key.NUM0 + digit) for digit in range(10)},
    pygame.K_RETURN: Key.ENTER,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_SPACE: Key.SPACE,
}


def pillar_positions() -> list[tuple[float, float]]:
    """Top-left corners of the seven pillars, arranged on a circle."""
    cx, cy = MENU_CENTER
    positions = []
    for i in range(PILLAR_COUNT):
        angle = i * 2 * math.pi / PILLAR_COUNT - math.pi / 2
        x = cx + MENU_RADIUS * math.cos(angle) - PILLAR_SIZE[0] / 2
        y = cy + MENU_RADIUS * math.sin(angle) - PILLAR_SIZE[1] / 2
        positions.append((x, y))
    return positions


def key_from_pygame(key: int) -> Key | None:
    """The game key for a pygame key code, or None if the game ignores it."""
    return _KEYMAP.get(key)


@functools.lru_cache(maxsize=None)
def _default_font(size: int) -> Any:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _blend_circle(
    surface: Any, color: tuple[int, int, int, int], center: tuple[float, float], radius: float
) -> None:
    if radius <= 0:
        return
    r = math.ceil(radius)
    layer = pygame.Surface((2 * r, 2 * r), pygame.SRCALPHA)
    pygame.draw.circle(layer, color, (r, r), radius)
    surface.blit(layer, (round(center[0] - r), round(center[1] - r)))


class PillarsView:
    """Draws the current screen of a journey onto a surface."""

    def __init__(
        self,
        surface: Any,
        journey: PillarsJourney | None = None,
        font_factory: Callable[[int], Any] | None = None,
    ) -> None:
        self.surface = surface
        self.journey = journey if journey is not None else PillarsJourney()
        self._font_factory = font_factory or _default_font
        self._drawn: list[str] = []

    def render(self) -> list[str]:
        """Draw the current screen and return the texts drawn, in order."""
        self._drawn = []
        self.surface.fill(BACKGROUND)
        screens = {
            GameState.WELCOME: self._welcome,
            GameState.MAIN_MENU: self._main_menu,
            GameState.EMOTIONAL: self._emotional,
            GameState.PURPOSE: self._purpose,
            GameState.FINANCIAL: self._financial,
            GameState.PHYSICAL: self._physical,
            GameState.MENTAL: self._mental,
            GameState.ENVIRONMENTAL: self._environmental,
            GameState.SPIRITUAL: self._spiritual,
            GameState.COMPLETION: self._completion,
        }
        screens[self.journey.state]()
        return list(self._drawn)

    def _text(
        self,
        text: str,
        pos: tuple[float, float],
        size: int = INSTRUCTION_SIZE,
        color: tuple[int, int, int] = WHITE,
    ) -> None:
        rendered = self._font_factory(size).render(text, True, color)
        self.surface.blit(rendered, (round(pos[0]), round(pos[1])))
        self._drawn.append(text)

    def _title(self, text: str, pos: tuple[float, float] = (450, 100)) -> None:
        self._text(text, pos, TITLE_SIZE)

    def _welcome(self) -> None:
        self._title("The 7 Pillars of Self", (250, 200))
        self._text("A Journey of Self-Discovery and Growth", (350, 300))
        self._text("Based on Indigenous Wisdom and Emotional Fitness", (280, 350))
        self._text("Press ENTER to begin your journey", (400, 450))
        self._text("Emotional Fitness Academy", (500, 650), FOOTER_SIZE)

    def _main_menu(self) -> None:
        journey = self.journey
        self._title("Choose a Pillar to Explore", (300, 100))
        for i, (x, y) in enumerate(pillar_positions()):
            if journey.activated[i]:
                color = PILLAR_COLORS[i]
                glow = (*color, int(journey.glow_alpha))
                _blend_circle(self.surface, glow, (x - 10 + 60, y - 10 + 60), 60)
            else:
                color = PILLAR_GREY
            pygame.draw.rect(self.surface, color, pygame.Rect(round(x), round(y), *PILLAR_SIZE))
            self._text(f"{i + 1}. {PILLAR_NAMES[i]}", (x - 20, y + 160), BUTTON_SIZE)
        self._text("Press 1-7 to explore each pillar", (450, 650))
        self._text(
            f"Progress: {journey.completed_count}/{PILLAR_COUNT} pillars activated",
            (450, 700),
        )

    def _choices(
        self,
        name: str,
        prompt: str,
        prompt_pos: tuple[float, float],
        option_x: float,
        spacing: float,
    ) -> None:
        journey = self.journey
        self._title(f"{name} Pillar")
        self._text(prompt, prompt_pos)
        for i, option in enumerate(journey.options):
            color = YELLOW if journey.selected_option == i else WHITE
            self._text(f"{i + 1}. {option}", (option_x, 280 + i * spacing), BUTTON_SIZE, color)
        if journey.option_selected:
            self._text(f"Press ENTER to activate the {name} Pillar", (400, 600))
        self._text(_ESC_HINT, (450, 700))

    def _emotional(self) -> None:
        self._choices(
            "Emotional",
            "How do you feel today and what do you want to do with that emotion?",
            (200, 200),
            150,
            40,
        )

    def _purpose(self) -> None:
        self._choices("Purpose", "Which quote inspires you the most?", (400, 200), 100, 50)

    def _financial(self) -> None:
        self._choices("Financial", "Choose a wise financial action:", (400, 200), 350, 40)

    def _mental(self) -> None:
        self._choices("Mental", "Choose the most helpful thought:", (400, 200), 100, 50)

    def _physical(self) -> None:
        self._title("Physical Pillar")
        self._text("Follow the guided breathing exercise", (400, 200))
        self._text("Watch the circle expand and contract", (400, 250))
        self._text("Breathe in as it grows, breathe out as it shrinks", (350, 300))
        _blend_circle(self.surface, BREATH_COLOR, BREATH_CENTER, self.journey.breath_size)
        self._text("Press SPACE when you feel centered", (400, 600))
        self._text(_ESC_HINT, (450, 700))

    def _environmental(self) -> None:
        growth = self.journey.tree_growth
        self._title("Environmental Pillar")
        self._text("Plant a tree to connect with Mother Earth", (400, 200))
        trunk_height = 100 * growth
        if trunk_height > 0:
            pygame.draw.rect(
                self.surface,
                TRUNK_COLOR,
                pygame.Rect(590, round(500 - trunk_height), 20, round(trunk_height)),
            )
        if growth > 0.3:
            radius = 30 * growth
            top = 420 - 80 * growth
            _blend_circle(self.surface, (*LEAVES_COLOR, 255), (570 + radius, top + radius), radius)
        self._text("Click on the tree area or press SPACE to help it grow", (350, 550))
        if growth >= 1.0:
            self._text("Beautiful! The Environmental Pillar is activated!", (350, 600))
        self._text(_ESC_HINT, (450, 700))

    def _spiritual(self) -> None:
        self._title("Spiritual Pillar")
        self._text("Take a moment for quiet reflection", (400, 200))
        self._text("Listen to the silence within", (400, 250))
        pygame.draw.circle(self.surface, SILHOUETTE_COLOR, (600, 390), 40)
        pygame.draw.rect(self.surface, SILHOUETTE_COLOR, pygame.Rect(560, 430, 80, 100))
        aura = (255, 255, 255, int(self.journey.glow_alpha / 3))
        _blend_circle(self.surface, aura, (600, 440), 120)
        self._text("Press SPACE when you feel a sense of calm", (400, 600))
        self._text(_ESC_HINT, (450, 700))

    def _completion(self) -> None:
        self._title("Congratulations!", (400, 150))
        self._text("You have activated all 7 Pillars of Self!", (350, 250))
        self._text("Your foundation is now strong and balanced.", (350, 300))
        self._text("Remember: True transformation comes from within.", (320, 350))
        self._text("Your innate wisdom is your greatest tool.", (350, 400))
        self._text("Continue your journey with the Emotional Fitness Academy", (250, 500))
        self._text("Press ENTER to start a new journey", (400, 650))


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(description="A journey through the seven pillars of self.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        view = PillarsView(screen)
        journey = view.journey
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    key = key_from_pygame(event.key)
                    if key is not None:
                        journey.handle_key(key)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    journey.handle_click(*event.pos)
            if not running:
                break
            journey.update(clock.tick(60) / 1000.0)
            view.render()
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0