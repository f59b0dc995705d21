import pytest

from conftest import StubRng
from fallingwords.difficulty import DIFFICULTY_PROFILES
from fallingwords.models import DifficultyProfile
from fallingwords.spawner import SpawnScheduler, level_for, roll_speed, spawn_delay_ms

EASY = DIFFICULTY_PROFILES["easy"]
HARD = DIFFICULTY_PROFILES["hard"]


@pytest.mark.parametrize("elapsed, level", [(0, 0), (14.99, 0), (15, 1), (44, 2), (150, 10), (10_000, 10)])
def test_level_ratchets_every_15_seconds(elapsed, level):
    assert level_for(elapsed) == level


def test_spawn_delay_shrinks_with_time_and_level():
    assert spawn_delay_ms(EASY, 0) == 2000
    assert spawn_delay_ms(EASY, 2) == 1984
    # 100s -> level 6: 2000 - 800 - 120
    assert spawn_delay_ms(EASY, 100) == 1080


def test_spawn_delay_floored():
    assert spawn_delay_ms(HARD, 200) == 350


def test_roll_speed_range():
    assert roll_speed(EASY, 0, StubRng(0.0)) == 57
    # (60 + 40) * (1 + 0.8 + 0.15)
    assert roll_speed(EASY, 10, StubRng(1.0)) == 195


def test_roll_speed_floor():
    still = DifficultyProfile("still", spawn_ms=1000, base_speed=0)
    assert roll_speed(still, 0, StubRng(0.0)) == 20


def test_first_spawn_is_immediate(rng):
    spawner = SpawnScheduler(rng)
    live = []
    spawner.start(0.0)
    word = spawner.update(0.0, EASY, ["cat", "dog"], live)

    assert live == [word]
    assert word.text == "cat"
    assert word.y == 0
    assert word.x == 5
    assert word.speed == 57
    assert spawner.next_due == 2.0


def test_reschedules_with_recomputed_delay(rng):
    spawner = SpawnScheduler(rng)
    live = []
    spawner.start(0.0)
    spawner.update(0.0, EASY, ["cat"], live)

    assert spawner.update(1.0, EASY, ["cat"], live) is None
    assert len(live) == 1

    spawner.update(2.0, EASY, ["cat"], live)
    assert len(live) == 2
    assert spawner.last_delay_ms == 1984
    assert spawner.next_due == pytest.approx(2.0 + 1.984)


def test_one_spawn_per_update_even_when_late(rng):
    spawner = SpawnScheduler(rng)
    live = []
    spawner.start(0.0)
    spawner.update(30.0, EASY, ["cat"], live)
    assert len(live) == 1


def test_empty_word_list_skips_but_keeps_timer(rng):
    spawner = SpawnScheduler(rng)
    live = []
    spawner.start(0.0)

    assert spawner.update(0.0, EASY, [], live) is None
    assert live == []
    assert spawner.active
    assert spawner.next_due == 2.0


def test_cancelled_timer_never_fires(rng):
    spawner = SpawnScheduler(rng)
    live = []
    spawner.start(0.0)
    spawner.cancel()
    assert spawner.update(5.0, EASY, ["cat"], live) is None
    assert live == []


def test_ids_are_unique(rng):
    spawner = SpawnScheduler(rng)
    live = []
    spawner.start(0.0)
    for t in range(0, 40, 2):
        spawner.update(float(t), EASY, ["cat"], live)
    ids = [w.id for w in live]
    assert len(ids) == len(set(ids)) == 20
