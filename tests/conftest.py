from types import SimpleNamespace

import pytest

from scanline_platformer.tiles import TileKind

# rolls that reject every feature in one sweep step:
# cloud, pyramid, mushroom, bush, gap, jump block
PLAIN_COLUMN = [10, 10, 20, 10, 10, 15]


class ScriptedStream:
    """Answers draws from a script, then rejects everything.

    Once the script runs out, roll(n) returns n (never 1 for n > 1) and
    between(a, b) returns a.
    """

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.calls = []

    def roll(self, n):
        self.calls.append(("roll", n))
        return self.answers.pop(0) if self.answers else n

    def between(self, a, b):
        self.calls.append(("between", a, b))
        return self.answers.pop(0) if self.answers else a


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def draw(self, texture, quad, x, y):
        self.calls.append((texture, quad, x, y))


class RecordingAudio:
    def __init__(self):
        self.calls = []

    def set_looping(self, looping):
        self.calls.append(("set_looping", looping))

    def play(self):
        self.calls.append(("play",))


class StubPlayer:
    def __init__(self, level=None, x=0.0):
        self.map = level
        self.x = x
        self.ticks = []
        self.rendered = 0

    def update(self, dt):
        self.ticks.append(dt)

    def render(self, renderer):
        self.rendered += 1
        renderer.draw("player", None, self.x, 0)


def plain_columns(n):
    return PLAIN_COLUMN * n


@pytest.fixture
def atlas():
    return SimpleNamespace(texture="sheet", quads={k: ("quad", k) for k in TileKind if k != TileKind.EMPTY})


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def audio():
    return RecordingAudio()
