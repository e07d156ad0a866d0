"""Named input actions passed to scenes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """An action name paired with its phase, such as ``START`` or ``END``."""

    name: str = "NONE"
    type: str = "NONE"

    def __str__(self) -> str:
        return f"{self.name}:{self.type}"