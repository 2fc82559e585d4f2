import time

from philo.timing import now_ms, sleep_ms


def test_now_ms_tracks_wall_clock():
    before = int(time.time() * 1000)
    value = now_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= value <= after + 1


def test_now_ms_never_goes_backwards():
    first = now_ms()
    second = now_ms()
    assert second >= first


def test_sleep_ms_waits_at_least_requested_time():
    start = now_ms()
    sleep_ms(20)
    assert now_ms() - start >= 20


def test_sleep_ms_zero_returns_quickly():
    start = now_ms()
    sleep_ms(0)
    elapsed = now_ms() - start
    assert 0 <= elapsed < 50