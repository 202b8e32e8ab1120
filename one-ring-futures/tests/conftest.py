"""Shared test fixtures for one-ring-futures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import pytest

from one_ring_futures.poll import PENDING, Pending, Ready
from one_ring_futures.waker import Waker

if TYPE_CHECKING:
    from collections.abc import Callable

    from one_ring_futures.poll import Poll
    from one_ring_futures.typedefs import Future


@dataclass
class CountingWaker:
    """Records how often it has been woken."""

    wakes: int = field(default=0, init=False)

    def _wake(self) -> None:
        self.wakes += 1

    @property
    def waker(self) -> Waker:
        return Waker(callback=self._wake)


@dataclass
class Countdown:
    """Future that completes with a value on its n-th poll, waking before that."""

    polls_until_ready: int
    value: Any
    polls: int = field(default=0, init=False)

    def poll(self, waker: Waker, /) -> Poll[Any]:
        self.polls += 1
        if self.polls < self.polls_until_ready:
            waker.wake()
            return PENDING
        return Ready(self.value)


@dataclass
class Exploding:
    """Future whose poll raises."""

    error: Exception

    def poll(self, waker: Waker, /) -> Poll[Any]:
        raise self.error


@pytest.fixture
def counting_waker() -> CountingWaker:
    """Provide a waker that counts its wakes."""
    return CountingWaker()


@pytest.fixture
def waker(counting_waker: CountingWaker) -> Waker:
    """Provide the Waker of the counting waker."""
    return counting_waker.waker


@pytest.fixture
def countdown() -> Callable[[int, Any], Countdown]:
    """Build futures that are ready after a given number of polls."""

    def _countdown(polls_until_ready: int, value: Any) -> Countdown:
        return Countdown(polls_until_ready=polls_until_ready, value=value)

    return _countdown


@pytest.fixture
def block_on() -> Callable[[Future[Any]], Any]:
    """Drive a future to completion, polling again only after it was woken."""

    def _block_on(future: Future[Any], max_polls: int = 1000) -> Any:
        woken = True

        def wake() -> None:
            nonlocal woken
            woken = True

        waker = Waker(callback=wake)
        for _ in range(max_polls):
            if not woken:
                raise RuntimeError("Deadlock: future is pending and was never woken")
            woken = False
            result = future.poll(waker)
            if not isinstance(result, Pending):
                return result.value

        raise RuntimeError(f"Future did not complete within {max_polls} polls")

    return _block_on


@pytest.fixture
def exploding() -> Callable[[Exception], Exploding]:
    """Build futures whose poll raises the given error."""

    def _exploding(error: Exception) -> Exploding:
        return Exploding(error=error)

    return _exploding
