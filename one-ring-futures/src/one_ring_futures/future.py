from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from one_ring_futures.exceptions import PolledAfterCompletion
from one_ring_futures.poll import PENDING, Ready

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

    from one_ring_futures.poll import Poll
    from one_ring_futures.typedefs import Future
    from one_ring_futures.waker import Waker


class AwaitableFuture[T](ABC):
    """Lets a future be awaited from coroutines driven by CoroFuture."""

    __slots__ = ()

    @abstractmethod
    def poll(self, waker: Waker, /) -> Poll[T]:
        """Attempts to make progress."""

    def __await__(self) -> Generator[Future[T], T, T]:
        """Hands the future to the driving CoroFuture, which sends back the output."""
        return (yield self)


class _Unset:
    __slots__ = ()


_unset = _Unset()


@dataclass(slots=True, eq=False)
class ReadyFuture[T](AwaitableFuture[T]):
    """Future that is immediately ready with a value."""

    """The value to complete with. Unset once the future completed."""
    _value: T | _Unset

    def poll(self, waker: Waker, /) -> Poll[T]:
        """Completes with the value on the first poll."""
        if isinstance(self._value, _Unset):
            raise PolledAfterCompletion("Ready polled after completion")

        value, self._value = self._value, _unset
        return Ready(value)


@dataclass(slots=True, eq=False)
class PendingFuture[T](AwaitableFuture[T]):
    """Future that never completes."""

    def poll(self, waker: Waker, /) -> Poll[T]:
        """Always pending, never wakes."""
        return PENDING


@dataclass(slots=True, eq=False)
class PollFn[T](AwaitableFuture[T]):
    """Future backed by a plain polling function."""

    """Called with the waker on every poll."""
    fn: Callable[[Waker], Poll[T]] = field(repr=False)

    def poll(self, waker: Waker, /) -> Poll[T]:
        """Delegates to the wrapped function."""
        return self.fn(waker)


@dataclass(slots=True, eq=False)
class YieldNow(AwaitableFuture[None]):
    """Returns control to the driver once."""

    _yielded: bool = field(default=False, init=False)

    def poll(self, waker: Waker, /) -> Poll[None]:
        """Pending on the first poll, ready on the second."""
        if self._yielded:
            return Ready(None)

        self._yielded = True
        waker.wake()
        return PENDING


def ready[T](value: T) -> ReadyFuture[T]:
    """Creates a future that is immediately ready with a value."""
    return ReadyFuture(_value=value)


def pending[T]() -> PendingFuture[T]:
    """Creates a future that never completes."""
    return PendingFuture()


def poll_fn[T](fn: Callable[[Waker], Poll[T]]) -> PollFn[T]:
    """Creates a future from a function returning Poll.

    Args:
        fn: receives the waker of every poll
    """
    return PollFn(fn=fn)


def yield_now() -> YieldNow:
    """Creates a future that is pending exactly once."""
    return YieldNow()

