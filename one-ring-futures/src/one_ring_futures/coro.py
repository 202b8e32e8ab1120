from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from one_ring_futures.exceptions import Fault, PolledAfterCompletion
from one_ring_futures.future import AwaitableFuture
from one_ring_futures.log import get_logger
from one_ring_futures.poll import PENDING, Pending, Ready
from one_ring_futures.typedefs import Future

if TYPE_CHECKING:
    from collections.abc import Coroutine, Generator

    from one_ring_futures.poll import Poll
    from one_ring_futures.typedefs import Coro
    from one_ring_futures.waker import Waker

logger = get_logger(__name__)


@dataclass(slots=True, eq=False)
class CoroFuture[T](AwaitableFuture[T]):
    """Drives a coroutine forwards as a future.

    The coroutine yields the futures it waits on and is sent their outputs back.
    A bare yield hands control back to the driver once.
    """

    """The generator or native coroutine wrapped by the future."""
    coro: Generator[Any, Any, T] | Coroutine[Any, Any, T] = field(repr=False)

    """The future the coroutine is currently waiting on."""
    _awaiting: Future[Any] | None = field(default=None, init=False)

    """If the coroutine has returned or raised."""
    _finished: bool = field(default=False, init=False)

    def poll(self, waker: Waker, /) -> Poll[T]:
        """Runs the coroutine until it waits on a pending future or finishes."""
        if self._finished:
            raise PolledAfterCompletion("Coroutine future polled after completion")

        value: Any = None
        error: BaseException | None = None
        while True:
            if self._awaiting is not None:
                try:
                    result = self._awaiting.poll(waker)
                except Fault:
                    raise
                except Exception as e:  # noqa: BLE001
                    error = e
                else:
                    if isinstance(result, Pending):
                        return PENDING
                    value = result.value
                self._awaiting = None

            try:
                if error is None:
                    yielded = self.coro.send(value)
                else:
                    yielded = self.coro.throw(error)
            except StopIteration as e:
                self._finished = True
                return Ready(e.value)
            except BaseException:
                self._finished = True
                raise

            value, error = None, None
            if yielded is None:
                # Checkpoint
                waker.wake()
                return PENDING
            if isinstance(yielded, Future):
                self._awaiting = yielded
            else:
                logger.warning("Coroutine yielded a non-future", yielded=yielded)
                error = TypeError(f"Coroutine yielded {yielded!r}, expected a future")

    def close(self) -> None:
        """Closes the wrapped coroutine, raising GeneratorExit at its yield point."""
        self._finished = True
        self._awaiting = None
        self.coro.close()


def from_coro[T](coro: Coro[T] | Coroutine[Any, Any, T]) -> CoroFuture[T]:
    """Adapts a generator coroutine, or an async def coroutine, into a future."""
    return CoroFuture(coro=coro)


def wait[T](future: Future[T]) -> Coro[T]:
    """Waits on a future from within a generator coroutine."""
    return (yield future)
