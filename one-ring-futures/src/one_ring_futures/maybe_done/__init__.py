from __future__ import annotations

from collections.abc import Coroutine, Generator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, overload

from one_ring_futures.coro import from_coro
from one_ring_futures.exceptions import OutputTaken, PolledAfterTaken
from one_ring_futures.future import AwaitableFuture
from one_ring_futures.log import get_logger
from one_ring_futures.maybe_done.state import Done, Gone, MaybeDoneState, Polling
from one_ring_futures.poll import PENDING, Pending, Ready

if TYPE_CHECKING:
    from one_ring_futures.poll import Poll
    from one_ring_futures.typedefs import Future
    from one_ring_futures.waker import Waker

logger = get_logger(__name__)


@dataclass(slots=True)
class OutputRef[T]:
    """Live view of the output cached in a MaybeDone.

    Only usable until the output is taken, after which it raises OutputTaken.
    """

    """The wrapper whose output is viewed."""
    _owner: MaybeDone[T] = field(repr=False)

    """The state the reference was handed out for."""
    _done: Done[T] = field(repr=False)

    def _live(self) -> Done[T]:
        if self._owner._state is not self._done:  # noqa: SLF001
            raise OutputTaken("Output reference used after the output was taken")
        return self._done

    @property
    def value(self) -> T:
        """The cached output."""
        return self._live().output

    @value.setter
    def value(self, value: T) -> None:
        self._live().output = value


@dataclass(slots=True, init=False, eq=False)
class MaybeDone[T](AwaitableFuture[None]):
    """A future that may have completed.

    Polling drives the wrapped future and caches its output in place. Polling only
    ever produces None; the output is retrieved with take_output. This lets
    combinators drive many differently typed futures through one interface and
    collect the outputs afterwards.

    The wrapped future is never handed back out, so once driven it is only ever
    polled in place through this wrapper.
    """

    """Union encompassing the current state of the wrapper."""
    _state: MaybeDoneState[T]

    def __init__(self, future: Future[T]) -> None:
        self._state = Polling(future=future)

    def poll(self, waker: Waker, /) -> Poll[None]:
        """Drives the wrapped future towards completion.

        Polling after completion is allowed and does nothing. Polling after the
        output was taken raises PolledAfterTaken.
        """
        if isinstance(self._state, Polling):
            result = self._state.future.poll(waker)
            if isinstance(result, Pending):
                return PENDING
            self._state = Done(output=result.value)
        elif isinstance(self._state, Gone):
            logger.critical("MaybeDone polled after value taken", state=self._state)
            raise PolledAfterTaken("MaybeDone polled after value taken")

        return Ready(None)

    def is_terminated(self) -> bool:
        """True once the wrapped future completed, whether or not it was taken."""
        return not isinstance(self._state, Polling)

    def output_mut(self) -> OutputRef[T] | None:
        """Returns a live reference to the output if it's ready and not yet taken."""
        if not isinstance(self._state, Done):
            return None

        return OutputRef(self, self._state)

    @overload
    def take_output(self) -> T | None: ...

    @overload
    def take_output[D](self, default: D) -> T | D: ...

    def take_output(self, default: Any = None) -> Any:
        """Takes the output without driving the wrapped future.

        Args:
            default: returned when there is no output to take

        Returns:
            The output the first time it's called after completion, else default.
        """
        if not isinstance(self._state, Done):
            return default

        state, self._state = self._state, Gone()
        return state.output


def maybe_done[T](
    future: Future[T] | Generator[Any, Any, T] | Coroutine[Any, Any, T],
) -> MaybeDone[T]:
    """Wraps a future, or a coroutine, into a MaybeDone."""
    if isinstance(future, Generator | Coroutine):
        return MaybeDone(from_coro(future))

    return MaybeDone(future)


__all__ = [
    "MaybeDone",
    "OutputRef",
    "maybe_done",
]
