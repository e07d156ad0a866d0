from types import SimpleNamespace

import pygame
import pytest

from pillarsofself.assets import Assets
from pillarsofself.game_engine import (
    CLEAR_COLOR,
    WINDOW_TITLE,
    GameEngine,
    load_window_size,
)
from pillarsofself.scene_menu import SceneMenu
from pillarsofself.utilities import Vec2


class FakeFont:
    def render(self, text, antialias, color):
        return pygame.Surface((4, 4))


class FakeFace:
    def at_size(self, size):
        return FakeFont()


class FakeWindow:
    def __init__(self, width, height, title, close_after=None):
        self.title = title
        self.surface = pygame.Surface((width, height))
        self.open = True
        self.events = []
        self.cleared = []
        self.displays = 0
        self.close_after = close_after

    @property
    def is_open(self):
        return self.open

    @property
    def size(self):
        return self.surface.get_size()

    def poll_events(self):
        events, self.events = self.events, []
        return events

    def clear(self, color):
        self.cleared.append(color)
        self.surface.fill(color)

    def display(self):
        self.displays += 1
        if self.close_after is not None and self.displays >= self.close_after:
            self.open = False

    def close(self):
        self.open = False


def make_assets():
    assets = Assets(font_loader=lambda path: FakeFace())
    assets.add_font("main", "main.ttf")
    assets.add_font("Arcade", "arcade.ttf")
    return assets


@pytest.fixture
def config(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text("# window settings\nWindow 640 480\n")
    return path


def make_engine(config, close_after=None):
    windows = []

    def factory(width, height, title):
        window = FakeWindow(width, height, title, close_after)
        windows.append(window)
        return window

    engine = GameEngine(config, assets=make_assets(), window_factory=factory, assets_path=None)
    return engine, windows[0]


def test_load_window_size_reads_entry(tmp_path):
    path = tmp_path / "c.txt"
    path.write_text("Window 1280 720\n")
    assert load_window_size(path) == (1280, 720)


def test_load_window_size_prints_comments(tmp_path, capsys):
    path = tmp_path / "c.txt"
    path.write_text("# hello there\nWindow 300 200\n")
    assert load_window_size(path) == (300, 200)
    assert "hello there" in capsys.readouterr().out


def test_load_window_size_reports_bad_values(tmp_path, capsys):
    path = tmp_path / "c.txt"
    path.write_text("Window abc 5\nWindow 800 600\n")
    assert load_window_size(path) == (800, 600)
    assert "*** Error reading config file" in capsys.readouterr().out


def test_load_window_size_without_entry(tmp_path):
    path = tmp_path / "c.txt"
    path.write_text("Font main a.ttf\n")
    with pytest.raises(ValueError):
        load_window_size(path)


def test_load_window_size_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_window_size(tmp_path / "missing.txt")


def test_engine_starts_on_menu(config):
    engine, window = make_engine(config)
    assert engine.current_scene_name == "MENU"
    assert isinstance(engine.current_scene(), SceneMenu)
    assert window.title == WINDOW_TITLE
    assert engine.window_size() == Vec2(640.0, 480.0)


def test_change_scene_keeps_existing(config):
    engine, _ = make_engine(config)
    menu = engine.current_scene()
    other = SceneMenu(engine, engine.assets)
    engine.change_scene("MENU", other)
    assert engine.current_scene() is menu


def test_back_level_keeps_scene(config):
    engine, _ = make_engine(config)
    play = SceneMenu(engine, engine.assets)
    engine.change_scene("PLAY", play)
    assert engine.current_scene() is play
    engine.back_level()
    assert engine.current_scene_name == "MENU"
    assert engine.scenes["PLAY"] is play


def test_quit_level_drops_scene(config):
    engine, _ = make_engine(config)
    engine.change_scene("PLAY", SceneMenu(engine, engine.assets))
    engine.quit_level()
    assert engine.current_scene_name == "MENU"
    assert "PLAY" not in engine.scenes


def test_quit_level_from_menu_has_no_scene(config):
    engine, _ = make_engine(config)
    with pytest.raises(ValueError):
        engine.quit_level()


def test_current_scene_unknown(config):
    engine, _ = make_engine(config)
    engine.current_scene_name = "NOWHERE"
    with pytest.raises(KeyError):
        engine.current_scene()


def test_quit_stops_running(config):
    engine, window = make_engine(config)
    assert engine.is_running() is True
    engine.quit()
    assert window.open is False
    assert engine.is_running() is False


def test_running_flag(config):
    engine, _ = make_engine(config)
    engine.running = False
    assert engine.is_running() is False


def test_user_input_quit_event(config):
    engine, window = make_engine(config)
    window.events = [SimpleNamespace(type=pygame.QUIT)]
    engine.s_user_input()
    assert engine.is_running() is False


def test_user_input_escape_key_quits_menu(config):
    engine, window = make_engine(config)
    window.events = [SimpleNamespace(type=pygame.KEYDOWN, key=pygame.K_ESCAPE)]
    engine.s_user_input()
    assert window.open is False


def test_user_input_key_release_ignored(config):
    engine, window = make_engine(config)
    window.events = [
        SimpleNamespace(type=pygame.KEYUP, key=pygame.K_ESCAPE),
        SimpleNamespace(type=pygame.KEYDOWN, key=pygame.K_F1),
    ]
    engine.s_user_input()
    assert window.open is True


def test_run_renders_until_closed(config):
    engine, window = make_engine(config, close_after=1)
    engine.run()
    assert window.displays == 1
    assert window.cleared[0] == CLEAR_COLOR
    assert engine.is_running() is False


def test_update_leaves_scene(config):
    engine, _ = make_engine(config)
    scene = engine.current_scene()
    engine.update()
    assert engine.current_scene() is scene