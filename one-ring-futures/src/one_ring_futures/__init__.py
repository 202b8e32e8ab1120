"""One Ring Futures package."""

__version__ = "0.1.0"

from one_ring_futures.coro import CoroFuture, from_coro, wait
from one_ring_futures.exceptions import (
    Fault,
    OutputTaken,
    PolledAfterCompletion,
    PolledAfterTaken,
)
from one_ring_futures.future import pending, poll_fn, ready, yield_now
from one_ring_futures.join import join, join_all
from one_ring_futures.maybe_done import MaybeDone, OutputRef, maybe_done
from one_ring_futures.poll import PENDING, Pending, Poll, Ready
from one_ring_futures.typedefs import Coro, FusedFuture, Future
from one_ring_futures.waker import Waker, noop_waker

__all__ = [
    "PENDING",
    "Coro",
    "CoroFuture",
    "Fault",
    "FusedFuture",
    "Future",
    "MaybeDone",
    "OutputRef",
    "OutputTaken",
    "Pending",
    "Poll",
    "PolledAfterCompletion",
    "PolledAfterTaken",
    "Ready",
    "Waker",
    "from_coro",
    "join",
    "join_all",
    "maybe_done",
    "noop_waker",
    "pending",
    "poll_fn",
    "ready",
    "wait",
    "yield_now",
]
