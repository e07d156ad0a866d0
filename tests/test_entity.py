import pytest

from pillarsofself.components import CCollision, CScore, CState, Component
from pillarsofself.entity import Entity


def test_identity_and_tag():
    e = Entity(7, "player")
    assert e.id == 7
    assert e.tag == "player"
    assert e.is_active is True


def test_default_tag():
    assert Entity(0).tag == "Default"


def test_destroy_marks_inactive():
    e = Entity(1, "x")
    e.destroy()
    assert e.is_active is False


def test_components_absent_by_default():
    e = Entity(1, "x")
    assert e.has_component(CScore) is False
    assert e.get_component(CScore).score == 0


def test_add_component_stores_and_marks_present():
    e = Entity(1, "x")
    added = e.add_component(CCollision(3.0))
    assert added.has is True
    assert e.has_component(CCollision) is True
    assert e.get_component(CCollision) is added
    assert e.get_component(CCollision).radius == 3.0


def test_add_replaces_previous_component():
    e = Entity(1, "x")
    e.add_component(CState("first"))
    e.add_component(CState("second"))
    assert e.get_component(CState).state == "second"


def test_remove_component_returns_false_and_clears():
    e = Entity(1, "x")
    e.add_component(CScore(10))
    assert e.remove_component(CScore) is False
    assert e.has_component(CScore) is False
    assert e.get_component(CScore).score == 10


def test_unknown_component_type_rejected():
    class Foreign(Component):
        pass

    e = Entity(1, "x")
    with pytest.raises(TypeError):
        e.get_component(Foreign)
    with pytest.raises(TypeError):
        e.add_component(Foreign())