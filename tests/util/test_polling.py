"""Tests for the waiting helpers."""

import pytest

from dmautomation.config import configure
from dmautomation.exceptions import InvalidArgumentError
from dmautomation.util import retry_until_success, wait_until


class FakeClock:
    """Virtual clock advanced by the fake sleep."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


class TestWaitUntil:
    """Test wait_until function."""

    def test_immediate_success(self, clock):
        assert wait_until(lambda: True, 5, 0.1, clock=clock, sleep=clock.sleep)
        assert clock.sleeps == []

    def test_success_after_polls(self, clock):
        answers = iter([False, False, True])

        assert wait_until(lambda: next(answers), 5, 0.1, clock=clock, sleep=clock.sleep)
        assert clock.sleeps == [0.1, 0.1]

    def test_timeout(self, clock):
        calls = []

        def never():
            calls.append(clock.now)
            return False

        assert not wait_until(never, 1.0, 0.375, clock=clock, sleep=clock.sleep)
        assert clock.now == 1.0
        # last sleep is shortened to the deadline
        assert clock.sleeps == [0.375, 0.375, 0.25]
        assert calls == [0.0, 0.375, 0.75, 1.0]

    def test_zero_timeout_checks_once(self, clock):
        calls = []

        assert not wait_until(lambda: calls.append(1), 0, 0.1, clock=clock, sleep=clock.sleep)
        assert calls == [1]
        assert clock.sleeps == []

    def test_negative_timeout(self):
        with pytest.raises(InvalidArgumentError):
            wait_until(lambda: True, -1)

    def test_default_poll_interval_from_settings(self, clock):
        configure(poll_interval=0.25)
        answers = iter([False, True])

        assert wait_until(lambda: next(answers), 5, clock=clock, sleep=clock.sleep)
        assert clock.sleeps == [0.25]

    def test_real_clock(self):
        assert wait_until(lambda: True, 0.01)


class TestRetryUntilSuccess:
    """Test retry_until_success function."""

    def test_success_on_third_attempt(self, clock):
        answers = iter([False, False, True])

        assert retry_until_success(lambda: next(answers), 5, 0.05, sleep=clock.sleep)
        assert clock.sleeps == [0.05, 0.05]

    def test_gives_up(self, clock):
        calls = []

        def failing():
            calls.append(1)
            return False

        assert not retry_until_success(failing, 3, 0.05, sleep=clock.sleep)
        assert len(calls) == 3
        assert len(clock.sleeps) == 2

    def test_defaults_from_settings(self, clock):
        configure(retry_count=2, poll_interval=0.5)
        calls = []

        assert not retry_until_success(lambda: calls.append(1), sleep=clock.sleep)
        assert len(calls) == 2
        assert clock.sleeps == [0.5]
