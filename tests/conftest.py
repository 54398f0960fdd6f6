import pytest

from code_theme_generator.palette import make_rng


class FakeClock:
    """Manually advanced clock for debounce tests."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return make_rng(1234)
