"""Data components that can be attached to entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pillarsofself.utilities import Vec2, center_origin


@dataclass
class Component:
    """Base for all components; ``has`` marks whether an entity carries it."""

    has: bool = field(default=False, kw_only=True)


@dataclass
class CSprite(Component):
    """A textured sprite, centred on its origin when a texture is given."""

    texture: Any = None
    rect: tuple[int, int, int, int] | None = None
    origin: Vec2 = field(default_factory=Vec2, init=False)

    def __post_init__(self) -> None:
        if self.texture is None:
            return
        if self.rect is not None:
            width, height = self.rect[2], self.rect[3]
        elif hasattr(self.texture, "get_size"):
            width, height = self.texture.get_size()
        else:
            return
        self.origin = center_origin(0, 0, width, height)


@dataclass
class CTransform(Component):
    """Position, motion, scale and rotation of an entity."""

    pos: Vec2 = field(default_factory=Vec2)
    vel: Vec2 | None = None
    prev_pos: Vec2 | None = None
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    ang_vel: float = 0.0
    angle: float = 0.0

    def __post_init__(self) -> None:
        if self.prev_pos is None:
            # Giving a velocity also seeds the previous position.
            self.prev_pos = self.pos if self.vel is not None else Vec2()
        if self.vel is None:
            self.vel = Vec2()


@dataclass
class CCollision(Component):
    """Circular collision area."""

    radius: float = 0.0


@dataclass
class CAnimation(Component):
    """Frame-based animation state; times are in seconds."""

    frame_size: Vec2 = field(default_factory=Vec2)
    numb_frames: int = 1
    current_frame: int = 0
    time_per_frame: float = 0.0
    count_down: float = 0.0
    is_repeat: bool = True

    def is_finished(self) -> bool:
        """True once a non-repeating animation has shown all its frames."""
        return not self.is_repeat and self.current_frame >= self.numb_frames


@dataclass
class CBoundingBox(Component):
    """Axis-aligned bounding box; accepts a Vec2 or a (width, height) pair."""

    size: Vec2 = field(default_factory=Vec2)
    half_size: Vec2 = field(default_factory=Vec2, init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.size, Vec2):
            width, height = self.size
            self.size = Vec2(width, height)
        self.half_size = self.size * 0.5


@dataclass
class CInput(Component):
    """Current directional and spin input flags."""

    up: bool = False
    left: bool = False
    right: bool = False
    down: bool = False
    spinr: bool = False
    spinl: bool = False


@dataclass
class CScore(Component):
    """Score counter."""

    score: int = 0


@dataclass
class CState(Component):
    """Free-form state label."""

    state: str = "none"


@dataclass
class CPlayerState(Component):
    """Player life state; respawn time is in seconds."""

    is_dead: bool = False
    respawn_time: float = 0.0