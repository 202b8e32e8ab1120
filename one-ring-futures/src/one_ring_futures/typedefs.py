from __future__ import annotations

from collections.abc import Generator
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from one_ring_futures.poll import Poll
    from one_ring_futures.waker import Waker


@runtime_checkable
class Future[T](Protocol):
    """An asynchronous computation that is driven by polling."""

    def poll(self, waker: Waker, /) -> Poll[T]:
        """Attempts to make progress.

        Returns PENDING after arranging for the waker to be invoked, or Ready with
        the output once complete. Must not be called again after completion.
        """
        ...


@runtime_checkable
class FusedFuture[T](Future[T], Protocol):
    """A future that knows when polling it can no longer produce a new outcome."""

    def is_terminated(self) -> bool:
        """True once the future has completed."""
        ...


type Coro[T] = Generator[Future[Any] | None, Any, T]
