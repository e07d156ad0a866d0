import pytest

from pillarsofself.command import Command
from pillarsofself.entity_manager import EntityManager
from pillarsofself.scene import Scene


class RecordingScene(Scene):
    def __init__(self, game=None):
        super().__init__(game)
        self.actions = []
        self.ended = False

    def update(self, dt):
        self.entity_manager.update()

    def s_do_action(self, action):
        self.actions.append(action)

    def s_render(self):
        pass

    def on_end(self):
        self.ended = True


def test_scene_is_abstract():
    with pytest.raises(TypeError):
        Scene(None)


def test_keeps_game_reference():
    game = object()
    scene = RecordingScene(game)
    command = Command("QUIT", "START")
    Scene.do_action(scene, command)
    assert scene.game is game
    assert scene.actions == [command]


def test_do_action_dispatches():
    scene = RecordingScene()
    command = Command("UP", "START")
    scene.do_action(command)
    assert scene.actions == [command]


def test_register_action_and_overwrite():
    scene = RecordingScene()
    Scene.register_action(scene, 22, "UP")
    Scene.register_action(scene, 18, "DOWN")
    Scene.register_action(scene, 22, "PLAY")
    assert scene.action_map == {22: "PLAY", 18: "DOWN"}


def test_action_map_is_a_copy():
    scene = RecordingScene()
    Scene.register_action(scene, 1, "QUIT")
    mapping = scene.action_map
    mapping[2] = "OTHER"
    assert scene.action_map == {1: "QUIT"}


def test_set_paused():
    scene = RecordingScene()
    assert scene.is_paused is False
    Scene.set_paused(scene, True)
    assert scene.is_paused is True
    Scene.set_paused(scene, False)
    assert scene.is_paused is False


def test_simulate_leaves_state_alone():
    scene = RecordingScene()
    Scene.simulate(scene, 5)
    assert scene.current_frame == 0
    assert scene.actions == []


def test_each_scene_has_its_own_entities():
    first, second = RecordingScene(), RecordingScene()
    EntityManager.add_entity(first.entity_manager, "pillar")
    EntityManager.update(first.entity_manager)
    EntityManager.update(second.entity_manager)
    assert len(EntityManager.get_entities(first.entity_manager, "pillar")) == 1
    assert EntityManager.get_entities(second.entity_manager, "pillar") == []