"""Game entities holding one slot for each component type."""

from __future__ import annotations

from typing import TypeVar

from pillarsofself.components import (
    CAnimation,
    CBoundingBox,
    CCollision,
    CInput,
    Component,
    CPlayerState,
    CScore,
    CSprite,
    CState,
    CTransform,
)

COMPONENT_TYPES: tuple[type[Component], ...] = (
    CAnimation,
    CSprite,
    CState,
    CTransform,
    CBoundingBox,
    CInput,
    CScore,
    CCollision,
    CPlayerState,
)

C = TypeVar("C", bound=Component)


class Entity:
    """An identified, tagged object with a fixed set of component slots."""

    def __init__(self, id: int, tag: str = "Default") -> None:
        self._id = id
        self._tag = tag
        self._active = True
        self._components: dict[type[Component], Component] = {
            kind: kind() for kind in COMPONENT_TYPES
        }

    def __repr__(self) -> str:
        return f"Entity(id={self._id}, tag={self._tag!r}, active={self._active})"

    @property
    def id(self) -> int:
        return self._id

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def is_active(self) -> bool:
        return self._active

    def destroy(self) -> None:
        """Mark the entity for removal on the next manager update."""
        self._active = False

    def _slot(self, kind: type[Component]) -> type[Component]:
        if kind not in self._components:
            raise TypeError(f"unknown component type: {kind!r}")
        return kind

    def has_component(self, kind: type[Component]) -> bool:
        return self._components[self._slot(kind)].has

    def add_component(self, component: C) -> C:
        """Store the component in its slot, mark it present and return it."""
        kind = self._slot(type(component))
        component.has = True
        self._components[kind] = component
        return component

    def remove_component(self, kind: type[Component]) -> bool:
        """Mark the component absent; always returns False."""
        self._components[self._slot(kind)].has = False
        return False

    def get_component(self, kind: type[C]) -> C:
        return self._components[self._slot(kind)]  # type: ignore[return-value]