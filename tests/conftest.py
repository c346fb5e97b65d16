import os
import sys
import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

# Ensure the repo root (containing the `molegame` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from molegame.core.timers import TimerQueue
from molegame.core import AudioSink, Display, GameController, RandomSource, StartButton, make_locations


class RecordingDisplay(Display):
    def __init__(self):
        self.scores = []
        self.times = []

    def show_score(self, score):
        self.scores.append(score)

    def show_time(self, seconds):
        self.times.append(seconds)

    @property
    def score_text(self):
        return str(self.scores[-1]) if self.scores else None


class FakeAudio(AudioSink):
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def _record(self, name):
        self.calls.append(name)
        if self.fail:
            raise RuntimeError(f"{name} not allowed")

    def play(self):
        self._record("play")

    def pause(self):
        self._record("pause")

    def rewind(self):
        self._record("rewind")


@pytest.fixture()
def timers():
    return TimerQueue()


@pytest.fixture()
def display():
    return RecordingDisplay()


@pytest.fixture()
def locations():
    return make_locations(9)


@pytest.fixture()
def start_button():
    return StartButton()


@pytest.fixture()
def hit_sound():
    return FakeAudio()


@pytest.fixture()
def music():
    return FakeAudio()


@pytest.fixture()
def make_controller(locations, timers, display, start_button, hit_sound, music):
    def _make(**kwargs):
        params = dict(
            display=display,
            start_button=start_button,
            hit_sound=hit_sound,
            background_music=music,
            rng=RandomSource(1234),
        )
        params.update(kwargs)
        return GameController(locations, timers, **params)
    return _make


@pytest.fixture()
def controller(make_controller):
    return make_controller()
