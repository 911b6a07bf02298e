from unittest.mock import MagicMock

import pytest


class ScriptedRng:
    """Deterministic stand-in for random.Random: first choice, fixed jitter."""

    def __init__(self, jitter_ms: int = 1000):
        self.jitter_ms = jitter_ms
        self.choices = []
        self.bounds = []

    def choice(self, seq):
        self.choices.append(seq[0])
        return seq[0]

    def randint(self, a, b):
        self.bounds.append((a, b))
        return self.jitter_ms


@pytest.fixture
def rng():
    return ScriptedRng()


@pytest.fixture
def sleeps():
    """Records every pause (in seconds) instead of sleeping."""
    return []


@pytest.fixture
def make_response():
    def _make(status_code=200, text="{}", reason="OK"):
        response = MagicMock()
        response.status_code = status_code
        response.reason = reason
        response.text = text
        return response

    return _make
