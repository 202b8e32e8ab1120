from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, cast, overload

from one_ring_futures.exceptions import PolledAfterCompletion
from one_ring_futures.future import AwaitableFuture
from one_ring_futures.log import get_logger
from one_ring_futures.maybe_done import MaybeDone, maybe_done
from one_ring_futures.poll import PENDING, Pending, Ready

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from one_ring_futures.poll import Poll
    from one_ring_futures.typedefs import Future
    from one_ring_futures.waker import Waker

logger = get_logger(__name__)

_missing = object()


def _poll_all(elems: Sequence[MaybeDone[Any]], waker: Waker) -> bool:
    """Polls every element that can still make progress.

    Returns:
        True if every element has completed
    """
    all_done = True
    for elem in elems:
        if elem.is_terminated():
            continue
        if isinstance(elem.poll(waker), Pending):
            all_done = False

    return all_done


def _take_all(elems: Sequence[MaybeDone[Any]]) -> list[Any]:
    """Harvests the outputs of completed elements, in order."""
    outputs = []
    for elem in elems:
        output = elem.take_output(_missing)
        if output is _missing:
            raise RuntimeError("Join element finished without an output")
        outputs.append(output)

    return outputs


@dataclass(slots=True, init=False, eq=False)
class Join[TOut: tuple[Any, ...]](AwaitableFuture[TOut]):
    """Waits for a fixed set of futures and produces a tuple of their outputs."""

    """The wrapped futures, in argument order."""
    _elems: tuple[MaybeDone[Any], ...] = field(repr=False)

    """If the outputs have been handed out."""
    _finished: bool

    def __init__(self, *futures: Any) -> None:
        self._elems = tuple(maybe_done(future) for future in futures)
        self._finished = False

    def poll(self, waker: Waker, /) -> Poll[TOut]:
        """Polls all unfinished futures, completing once all of them did."""
        if self._finished:
            raise PolledAfterCompletion("Join polled after completion")
        if not _poll_all(self._elems, waker):
            return PENDING

        self._finished = True
        logger.debug("Join completed", futures=len(self._elems))
        return Ready(cast("TOut", tuple(_take_all(self._elems))))

    def is_terminated(self) -> bool:
        """True once the outputs have been produced."""
        return self._finished


@dataclass(slots=True, init=False, eq=False)
class JoinAll[T](AwaitableFuture[list[T]]):
    """Waits for any number of futures and produces a list of their outputs."""

    """The wrapped futures, in iteration order."""
    _elems: list[MaybeDone[T]] = field(repr=False)

    """If the outputs have been handed out."""
    _finished: bool

    def __init__(self, futures: Iterable[Any]) -> None:
        self._elems = [maybe_done(future) for future in futures]
        self._finished = False

    def poll(self, waker: Waker, /) -> Poll[list[T]]:
        """Polls all unfinished futures, completing once all of them did."""
        if self._finished:
            raise PolledAfterCompletion("JoinAll polled after completion")
        if not _poll_all(self._elems, waker):
            return PENDING

        self._finished = True
        logger.debug("Join completed", futures=len(self._elems))
        return Ready(_take_all(self._elems))

    def is_terminated(self) -> bool:
        """True once the outputs have been produced."""
        return self._finished


# Yes, this is stupid. But Python doesn't have "Map" for TypeVarTuple yet.


@overload
def join[T1](future1: Future[T1], /) -> Join[tuple[T1]]: ...


@overload
def join[T1, T2](
    future1: Future[T1], future2: Future[T2], /
) -> Join[tuple[T1, T2]]: ...


@overload
def join[T1, T2, T3](
    future1: Future[T1], future2: Future[T2], future3: Future[T3], /
) -> Join[tuple[T1, T2, T3]]: ...


@overload
def join[T1, T2, T3, T4](
    future1: Future[T1],
    future2: Future[T2],
    future3: Future[T3],
    future4: Future[T4],
    /,
) -> Join[tuple[T1, T2, T3, T4]]: ...


@overload
def join[T1, T2, T3, T4, T5](
    future1: Future[T1],
    future2: Future[T2],
    future3: Future[T3],
    future4: Future[T4],
    future5: Future[T5],
    /,
) -> Join[tuple[T1, T2, T3, T4, T5]]: ...


@overload
def join[T1, T2, T3, T4, T5, T6](
    future1: Future[T1],
    future2: Future[T2],
    future3: Future[T3],
    future4: Future[T4],
    future5: Future[T5],
    future6: Future[T6],
    /,
) -> Join[tuple[T1, T2, T3, T4, T5, T6]]: ...


@overload
def join(*futures: Any) -> Join[tuple[Any, ...]]: ...


def join(*futures: Any) -> Join[tuple[Any, ...]]:
    """Joins futures (or coroutines) into one future.

    Args:
        futures: the futures to wait for

    Returns:
        A future whose output is the tuple of outputs, in argument order
    """
    return Join(*futures)


def join_all[T](futures: Iterable[Future[T]]) -> JoinAll[T]:
    """Joins an iterable of futures (or coroutines) into one future.

    Args:
        futures: the futures to wait for

    Returns:
        A future whose output is the list of outputs, in iteration order
    """
    return JoinAll(futures)
