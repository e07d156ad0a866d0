import pytest

from pillarsofself.music_player import MusicPlayer, get_music_player


class FakeMusic:
    def __init__(self):
        self.calls = []
        self.loaded = None
        self.volume = None

    def load(self, path):
        if path.endswith("broken.ogg"):
            raise OSError(path)
        self.loaded = path
        self.calls.append("load")

    def set_volume(self, value):
        self.volume = value
        self.calls.append("set_volume")

    def play(self, loops=0):
        self.calls.append(("play", loops))

    def stop(self):
        self.calls.append("stop")

    def pause(self):
        self.calls.append("pause")

    def unpause(self):
        self.calls.append("unpause")


@pytest.fixture
def music():
    return FakeMusic()


@pytest.fixture
def player(music):
    return MusicPlayer(backend=music)


def test_default_themes(player, music):
    player.play("menuTheme")
    assert music.loaded == "../assets/Music/dp_frogger.flac"
    assert player.songs["gameTheme"] == "../assets/Music/dp_frogger_tweener.flac"


def test_play_loops_forever(player, music):
    player.play("gameTheme")
    assert music.calls[-1] == ("play", -1)
    assert player.volume == 25


def test_unknown_theme_raises(player, music):
    with pytest.raises(RuntimeError, match="Music could not open file"):
        player.play("nothing")
    assert music.calls == []


def test_unreadable_file_raises(player):
    player.add_song("bad", "broken.ogg")
    with pytest.raises(RuntimeError):
        player.play("bad")


def test_add_song_then_play(player, music):
    player.add_song("calm", "calm.ogg")
    player.play("calm")
    assert player.songs["calm"] == "calm.ogg"
    assert music.loaded == player.songs["calm"]


def test_set_volume_scales_for_backend(player, music):
    player.set_volume(50)
    assert player.volume == 50
    assert music.volume == 0.5


def test_pause_and_resume(player, music):
    player.set_volume(40)
    player.play("menuTheme")
    player.set_paused(True)
    player.set_paused(False)
    assert music.calls[-2:] == ["pause", "unpause"]
    assert player.volume == 40
    assert music.volume == 0.4


def test_resume_after_stop_restarts(player, music):
    player.play("menuTheme")
    player.stop()
    player.set_paused(False)
    assert music.calls[-2:] == ["stop", ("play", -1)]
    assert music.loaded == player.songs["menuTheme"]


def test_resume_without_song_does_nothing(player, music):
    player.set_paused(False)
    player.set_paused(True)
    assert (music.calls, music.loaded, player.volume) == ([], None, 25)


def test_get_music_player_is_shared():
    get_music_player().add_song("shared", "shared.ogg")
    assert get_music_player().songs["shared"] == "shared.ogg"