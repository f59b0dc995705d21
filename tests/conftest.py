import pytest

from fallingwords.session import Session


class FakeTime:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, secs):
        self.now += secs


class StubRng:
    """uniform() lands at a fixed fraction of its range, choice() takes the first item"""
    def __init__(self, fraction=0.0):
        self.fraction = fraction

    def uniform(self, a, b):
        return a + (b - a) * self.fraction

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def rng():
    return StubRng()


@pytest.fixture
def quiet_session(fake_time, rng):
    """Session whose theme has no words, so only hand-placed words fall"""
    return Session(catalog={"all": []}, time_fn=fake_time, rng=rng)


@pytest.fixture
def cat_session(fake_time, rng):
    return Session(catalog={"all": ["cat"], "animals": ["cat"]}, time_fn=fake_time, rng=rng)
