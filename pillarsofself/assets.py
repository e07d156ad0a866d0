"""Shared game resources and the text config format that lists them."""

from __future__ import annotations

import functools
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterator, TypeVar

from pillarsofself.utilities import Vec2

T = TypeVar("T")

_WORD_PATTERN = re.compile(r"\S+")
_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class SpriteRec:
    """Where a sprite lives: a texture name and a (left, top, width, height) rect."""

    tex_name: str = ""
    tex_rect: tuple[int, int, int, int] = (0, 0, 0, 0)


@dataclass(frozen=True)
class AnimationRec:
    """A strip animation inside a texture; duration is in seconds."""

    tex_name: str = ""
    frame_size: Vec2 = field(default_factory=Vec2)
    numb_frames: int = 0
    duration: float = 0.0
    repeat: bool = False


@dataclass(frozen=True)
class FontFace:
    """A font file; concrete fonts are made on demand for a character size."""

    path: str

    def at_size(self, size: int) -> Any:
        """A pygame font for this face at the given character size."""
        return _pygame_font(self.path, size)


@dataclass
class Texture:
    """A loaded image surface and whether it should be smoothed when scaled."""

    surface: Any
    smooth: bool = True


@functools.lru_cache(maxsize=None)
def _pygame_font(path: str, size: int) -> Any:
    import pygame

    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


def _load_font(path: str) -> FontFace:
    face = FontFace(path)
    face.at_size(12)
    return face


def _load_sound(path: str) -> Any:
    import pygame

    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return pygame.mixer.Sound(path)


def _load_texture(path: str) -> Any:
    import pygame

    return pygame.image.load(path)


class _StreamFailure(Exception):
    """A field could not be read; parsing stops like a failed stream."""


class _WordReader:
    """Whitespace-separated words, with the option to drop the rest of a line."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def next(self) -> str | None:
        match = _WORD_PATTERN.search(self._text, self._pos)
        if match is None:
            self._pos = len(self._text)
            return None
        self._pos = match.end()
        return match.group()

    def skip_line(self) -> None:
        newline = self._text.find("\n", self._pos)
        self._pos = len(self._text) if newline < 0 else newline + 1

    def word(self) -> str:
        item = self.next()
        if item is None:
            raise _StreamFailure
        return item

    def integer(self) -> int:
        item = self.word()
        if not _INT.fullmatch(item):
            raise _StreamFailure
        return int(item)

    def real(self) -> float:
        item = self.word()
        if not _FLOAT.fullmatch(item):
            raise _StreamFailure
        return float(item)

    def flag(self) -> bool:
        value = self.integer()
        if value not in (0, 1):
            raise _StreamFailure
        return bool(value)


def _records(
    text: str, keyword: str, read: Callable[[_WordReader], T]
) -> Iterator[T]:
    reader = _WordReader(text)
    while (item := reader.next()) is not None:
        if item == keyword:
            try:
                yield read(reader)
            except _StreamFailure:
                return
        else:
            reader.skip_line()


def parse_named_paths(text: str, keyword: str) -> list[tuple[str, str]]:
    """(name, path) pairs from lines such as ``Font main fonts/a.ttf``."""
    return list(_records(text, keyword, lambda r: (r.word(), r.word())))


def _read_sprite(reader: _WordReader) -> tuple[str, SpriteRec]:
    name = reader.word()
    tex_name = reader.word()
    rect = (reader.integer(), reader.integer(), reader.integer(), reader.integer())
    return name, SpriteRec(tex_name, rect)


def parse_sprite_recs(text: str) -> list[tuple[str, SpriteRec]]:
    """Records from lines ``Sprite name texture left top width height``."""
    return list(_records(text, "Sprite", _read_sprite))


def _read_animation(reader: _WordReader) -> tuple[str, AnimationRec]:
    name = reader.word()
    tex_name = reader.word()
    frame_size = Vec2(reader.integer(), reader.integer())
    frames = reader.integer()
    duration = reader.real()
    repeat = reader.flag()
    return name, AnimationRec(tex_name, frame_size, frames, duration, repeat)


def parse_animation_recs(text: str) -> list[tuple[str, AnimationRec]]:
    """Records from lines ``Animation name texture w h frames seconds repeat``."""
    return list(_records(text, "Animation", _read_animation))


class Assets:
    """Registry of fonts, sounds, textures and sprite/animation records."""

    def __init__(
        self,
        font_loader: Callable[[str], Any] | None = None,
        sound_loader: Callable[[str], Any] | None = None,
        texture_loader: Callable[[str], Any] | None = None,
    ) -> None:
        self._font_loader = font_loader or _load_font
        self._sound_loader = sound_loader or _load_sound
        self._texture_loader = texture_loader or _load_texture
        self._fonts: dict[str, Any] = {}
        self._sounds: dict[str, Any] = {}
        self._textures: dict[str, Texture] = {}
        self._sprite_recs: dict[str, SpriteRec] = {}
        self._animation_recs: dict[str, AnimationRec] = {}

    def add_font(self, name: str, path: str) -> None:
        """Load a font; raises RuntimeError if it cannot be loaded."""
        if name in self._fonts:
            raise ValueError(f"font already registered: {name}")
        try:
            font = self._font_loader(path)
        except Exception as exc:
            raise RuntimeError(f"Load failed - {path}") from exc
        self._fonts[name] = font
        print(f"Loaded font: {path}")

    def add_sound(self, name: str, path: str) -> None:
        """Load a sound effect; raises RuntimeError if it cannot be loaded."""
        if name in self._sounds:
            raise ValueError(f"sound already registered: {name}")
        try:
            sound = self._sound_loader(path)
        except Exception as exc:
            raise RuntimeError(f"Load failed - {path}") from exc
        self._sounds[name] = sound
        print(f"Loaded sound effect: {path}")

    def add_texture(self, name: str, path: str, smooth: bool = True) -> None:
        """Load a texture; a failure is reported and leaves the name unset."""
        try:
            surface = self._texture_loader(path)
        except Exception:
            self._textures.pop(name, None)
            print(f"Could not load texture file: {path}", file=sys.stderr)
            return
        self._textures[name] = Texture(surface, smooth)
        print(f"Loaded texture: {path}")

    def add_sprite_rec(self, name: str, rec: SpriteRec) -> None:
        self._sprite_recs[name] = rec

    def add_animation_rec(self, name: str, rec: AnimationRec) -> None:
        self._animation_recs[name] = rec

    def get_font(self, name: str) -> Any:
        try:
            return self._fonts[name]
        except KeyError:
            raise KeyError(f"Font not found {name}") from None

    def get_sound(self, name: str) -> Any:
        try:
            return self._sounds[name]
        except KeyError:
            raise KeyError(f"Sound not found {name}") from None

    def get_texture(self, name: str) -> Texture:
        try:
            return self._textures[name]
        except KeyError:
            print(f"Texture not found {name}", file=sys.stderr)
            raise KeyError(f"Texture not found {name}") from None

    def get_sprite_rec(self, name: str) -> SpriteRec:
        return self._sprite_recs[name]

    def get_animation_rec(self, name: str) -> AnimationRec:
        return self._animation_recs[name]

    def load_from_file(self, path: str | Path) -> None:
        """Load fonts, textures, sprite and animation records from a config file."""
        text = Path(path).read_text()
        for name, file_path in parse_named_paths(text, "Font"):
            self.add_font(name, file_path)
        for name, file_path in parse_named_paths(text, "Texture"):
            self.add_texture(name, file_path)
        for name, sprite in parse_sprite_recs(text):
            self.add_sprite_rec(name, sprite)
        for name, animation in parse_animation_recs(text):
            self.add_animation_rec(name, animation)


@functools.lru_cache(maxsize=None)
def get_assets() -> Assets:
    """The application-wide asset registry."""
    return Assets()