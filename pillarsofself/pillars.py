"""Game logic for the journey through the seven pillars of self."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

PILLAR_COUNT = 7

PILLAR_NAMES: tuple[str, ...] = (
    "Emotional",
    "Purpose",
    "Financial",
    "Physical",
    "Mental",
    "Environmental",
    "Spiritual",
)

PILLAR_COLORS: tuple[tuple[int, int, int], ...] = (
    (255, 100, 100),
    (255, 200, 100),
    (100, 255, 100),
    (100, 200, 255),
    (200, 100, 255),
    (150, 255, 150),
    (255, 255, 150),
)

EMOTIONAL_OPTIONS: tuple[str, ...] = (
    "I feel energized and want to share positivity",
    "I feel calm and want to reflect quietly",
    "I feel challenged and want to grow stronger",
    "I feel grateful and want to appreciate life",
)

PURPOSE_QUOTES: tuple[str, ...] = (
    "\"Your purpose is to make a difference in the world\" - Unknown",
    "\"Success is not final, failure is not fatal\" - Churchill",
    "\"The best way to find yourself is to lose yourself in service\" - Gandhi",
    "\"Life is what happens when you're busy making plans\" - Lennon",
)

FINANCIAL_OPTIONS: tuple[str, ...] = (
    "Save money for future goals",
    "Invest in personal development",
    "Share resources with others in need",
)

MENTAL_OPTIONS: tuple[str, ...] = (
    "\"I can learn from this challenge and grow stronger\"",
    "\"This difficult moment will pass, and I will adapt\"",
    "\"I have the inner wisdom to navigate this situation\"",
    "\"Every experience teaches me something valuable\"",
)

# Area of the screen that can be clicked to help the tree grow.
TREE_AREA = (500, 400, 700, 600)

BREATH_MIN, BREATH_MAX, BREATH_SPEED = 30.0, 80.0, 30.0
GLOW_MIN, GLOW_MAX, GLOW_SPEED = 50.0, 150.0, 50.0


class GameState(enum.IntEnum):
    """Screens of the journey; the pillar screens follow one another in order."""

    WELCOME = 0
    MAIN_MENU = 1
    EMOTIONAL = 2
    PURPOSE = 3
    FINANCIAL = 4
    PHYSICAL = 5
    MENTAL = 6
    ENVIRONMENTAL = 7
    SPIRITUAL = 8
    COMPLETION = 9

    @property
    def pillar_index(self) -> int | None:
        """Index of the pillar this screen belongs to, or None."""
        index = self - GameState.EMOTIONAL
        return index if 0 <= index < PILLAR_COUNT else None


class Key(enum.IntEnum):
    """Keys the game reacts to; digit keys are consecutive."""

    NUM0 = 0
    NUM1 = 1
    NUM2 = 2
    NUM3 = 3
    NUM4 = 4
    NUM5 = 5
    NUM6 = 6
    NUM7 = 7
    NUM8 = 8
    NUM9 = 9
    ENTER = 10
    ESCAPE = 11
    SPACE = 12

    def in_digits(self, first: int, last: int) -> bool:
        return Key.NUM0 + first <= self <= Key.NUM0 + last

    @property
    def digit(self) -> int:
        return self - Key.NUM0


_CHOICE_STATES = frozenset(
    {GameState.EMOTIONAL, GameState.PURPOSE, GameState.FINANCIAL, GameState.MENTAL}
)

_OPTIONS = {
    GameState.EMOTIONAL: EMOTIONAL_OPTIONS,
    GameState.PURPOSE: PURPOSE_QUOTES,
    GameState.FINANCIAL: FINANCIAL_OPTIONS,
    GameState.MENTAL: MENTAL_OPTIONS,
}


def _grow(value: float, step: float) -> float:
    # Rounding keeps repeated tenths from falling just short of a full tree.
    return min(round(value + step, 6), 1.0)


@dataclass
class PillarsJourney:
    """State of one play-through: current screen, activated pillars, animations."""

    state: GameState = GameState.WELCOME
    activated: list[bool] = field(default_factory=lambda: [False] * PILLAR_COUNT)
    breath_size: float = 50.0
    breath_direction: float = 1.0
    glow_alpha: float = 100.0
    glow_direction: float = 1.0
    selected_option: int = -1
    option_selected: bool = False
    tree_growth: float = 0.0

    @property
    def options(self) -> tuple[str, ...]:
        """Choices shown on the current screen, empty where there are none."""
        return _OPTIONS.get(self.state, ())

    @property
    def completed_count(self) -> int:
        return sum(self.activated)

    @property
    def all_completed(self) -> bool:
        return all(self.activated)

    def handle_key(self, key: Key) -> None:
        """React to a key press on the current screen."""
        state = self.state
        if state is GameState.WELCOME:
            if key is Key.ENTER:
                self.state = GameState.MAIN_MENU
        elif state is GameState.MAIN_MENU:
            if key.in_digits(1, PILLAR_COUNT):
                self.state = GameState(GameState.EMOTIONAL + key.digit - 1)
                self.selected_option = -1
                self.option_selected = False
        elif state in _CHOICE_STATES:
            if key.in_digits(1, 4):
                self.selected_option = key.digit - 1
                self.option_selected = True
            if key is Key.ENTER and self.option_selected:
                self.complete_pillar()
        elif state in (GameState.PHYSICAL, GameState.SPIRITUAL):
            if key is Key.SPACE:
                self.complete_pillar()
        elif state is GameState.ENVIRONMENTAL:
            if key is Key.SPACE:
                self._grow_tree(0.1)
        elif state is GameState.COMPLETION:
            if key is Key.ENTER:
                self.reset()

        if key is Key.ESCAPE and self.state is not GameState.WELCOME:
            self.state = GameState.MAIN_MENU

    def handle_click(self, x: float, y: float) -> None:
        """A click inside the tree area helps the tree grow."""
        if self.state is not GameState.ENVIRONMENTAL:
            return
        left, top, right, bottom = TREE_AREA
        if left <= x <= right and top <= y <= bottom:
            self._grow_tree(0.2)

    def _grow_tree(self, step: float) -> None:
        self.tree_growth = _grow(self.tree_growth, step)
        if self.tree_growth >= 1.0:
            self.complete_pillar()

    def update(self, dt: float) -> None:
        """Advance animations by dt seconds and detect a finished journey."""
        self.update_breath(dt)
        self.update_glow(dt)
        if self.all_completed and self.state is not GameState.COMPLETION:
            self.state = GameState.COMPLETION

    def update_breath(self, dt: float) -> None:
        """Grow or shrink the breathing circle, turning at its limits."""
        self.breath_size += self.breath_direction * BREATH_SPEED * dt
        if self.breath_size > BREATH_MAX:
            self.breath_size = BREATH_MAX
            self.breath_direction = -1.0
        elif self.breath_size < BREATH_MIN:
            self.breath_size = BREATH_MIN
            self.breath_direction = 1.0

    def update_glow(self, dt: float) -> None:
        """Pulse the glow alpha between its limits."""
        self.glow_alpha += self.glow_direction * GLOW_SPEED * dt
        if self.glow_alpha > GLOW_MAX:
            self.glow_alpha = GLOW_MAX
            self.glow_direction = -1.0
        elif self.glow_alpha < GLOW_MIN:
            self.glow_alpha = GLOW_MIN
            self.glow_direction = 1.0

    def complete_pillar(self) -> None:
        """Activate the pillar of the current screen and return to the menu."""
        index = self.state.pillar_index
        if index is not None:
            self.activated[index] = True
        self.state = GameState.MAIN_MENU

    def reset(self) -> None:
        """Start a new journey from the main menu."""
        self.activated = [False] * PILLAR_COUNT
        self.state = GameState.MAIN_MENU
        self.selected_option = -1
        self.option_selected = False
        self.tree_growth = 0.0