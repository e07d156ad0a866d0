"""Background music playback with named themes."""

from __future__ import annotations

import enum
import functools
from typing import Any


class _Status(enum.Enum):
    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


def _default_backend() -> Any:
    import pygame

    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return pygame.mixer.music


class MusicPlayer:
    """Plays one looping theme at a time; volume ranges from 0 to 100."""

    def __init__(self, backend: Any = None) -> None:
        self._backend = backend
        self._filenames: dict[str, str] = {
            "menuTheme": "../assets/Music/dp_frogger.flac",
            "gameTheme": "../assets/Music/dp_frogger_tweener.flac",
        }
        self._volume = 25.0
        self._status = _Status.STOPPED
        self._loaded = False

    @property
    def _music(self) -> Any:
        if self._backend is None:
            self._backend = _default_backend()
        return self._backend

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def songs(self) -> dict[str, str]:
        """A copy of the theme-to-file table."""
        return dict(self._filenames)

    def add_song(self, name: str, path: str) -> None:
        self._filenames[name] = path

    def play(self, theme: str) -> None:
        """Start a theme from the beginning, looping forever."""
        path = self._filenames.get(theme, "")
        if not path:
            raise RuntimeError("Music could not open file")
        try:
            self._music.load(path)
        except Exception as exc:
            raise RuntimeError("Music could not open file") from exc
        self._loaded = True
        self._music.set_volume(self._volume / 100.0)
        self._music.play(loops=-1)
        self._status = _Status.PLAYING

    def stop(self) -> None:
        self._music.stop()
        self._status = _Status.STOPPED

    def set_paused(self, paused: bool) -> None:
        """Pause, or resume; resuming a stopped or playing theme restarts it."""
        if paused:
            if self._status is _Status.PLAYING:
                self._music.pause()
                self._status = _Status.PAUSED
            return
        if self._status is _Status.PAUSED:
            self._music.unpause()
        elif self._loaded:
            self._music.play(loops=-1)
        else:
            return
        self._status = _Status.PLAYING

    def set_volume(self, volume: float) -> None:
        self._volume = volume
        self._music.set_volume(volume / 100.0)


@functools.lru_cache(maxsize=None)
def get_music_player() -> MusicPlayer:
    """The application-wide music player."""
    return MusicPlayer()