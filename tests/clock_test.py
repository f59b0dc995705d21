from fallingwords.clock import PlayClock


def test_elapsed_zero_before_start(fake_time):
    clock = PlayClock(fake_time)
    fake_time.advance(5)
    assert clock.elapsed() == 0.0
    assert not clock.running


def test_elapsed_counts_playing_time(fake_time):
    clock = PlayClock(fake_time)
    clock.start()
    fake_time.advance(2.5)
    assert clock.elapsed() == 2.5


def test_paused_time_not_counted(fake_time):
    clock = PlayClock(fake_time)
    clock.start()
    fake_time.advance(3)
    clock.pause()
    fake_time.advance(60)
    assert clock.elapsed() == 3
    clock.resume()
    assert clock.elapsed() == 3
    fake_time.advance(1)
    assert clock.elapsed() == 4
    assert clock.paused_total == 60


def test_double_pause_keeps_first_pause_instant(fake_time):
    clock = PlayClock(fake_time)
    clock.start()
    fake_time.advance(1)
    clock.pause()
    fake_time.advance(5)
    clock.pause()
    fake_time.advance(5)
    clock.resume()
    assert clock.elapsed() == 1


def test_resume_without_pause_is_noop(fake_time):
    clock = PlayClock(fake_time)
    clock.start()
    fake_time.advance(2)
    clock.resume()
    assert clock.elapsed() == 2
    assert clock.paused_total == 0


def test_stop_resets(fake_time):
    clock = PlayClock(fake_time)
    clock.start()
    fake_time.advance(2)
    clock.pause()
    clock.stop()
    assert clock.elapsed() == 0.0
    assert not clock.paused
