"""Pytest configuration and fixtures for maze game tests."""

import random

import pytest

from game.maze.audio import Audio
from game.maze.simulation import MazeGame


class FakeClock:
    """Manually advanced clock (seconds)."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class RecordingAudio(Audio):
    """Audio that remembers every effect it was asked to play."""

    def __init__(self, muted=False):
        super().__init__(muted)
        self.played = []

    def _emit(self, effect):
        self.played.append(effect)


class BrokenAudio(Audio):
    """Audio whose backend fails on every effect."""

    def __init__(self):
        super().__init__()
        self.attempts = []

    def _emit(self, effect):
        self.attempts.append(effect)
        raise OSError("no audio device")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def game(audio, clock):
    """A game that has just entered the playing state."""
    g = MazeGame(audio=audio, rng=random.Random(42), clock=clock)
    g.start()
    return g


@pytest.fixture
def broken_game(clock):
    """A playing game whose sounds all fail."""
    g = MazeGame(audio=BrokenAudio(), rng=random.Random(42), clock=clock)
    g.start()
    return g
