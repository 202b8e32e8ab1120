"""This example drives a join of several coroutines with a hand-rolled loop.

one-ring-futures doesn't ship an executor. The loop below only polls the root future
again once something woke it, which is all a single-task driver needs to do.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any

from one_ring_futures import Pending, Waker, join, maybe_done, yield_now
from one_ring_futures.log import configure_logging

if TYPE_CHECKING:
    from one_ring_futures import Future


def run(future: Future[Any]) -> Any:
    """Polls the future until it completes."""
    wakeups: deque[None] = deque([None])
    waker = Waker(callback=lambda: wakeups.append(None))
    while wakeups:
        wakeups.clear()
        result = future.poll(waker)
        if not isinstance(result, Pending):
            return result.value

    raise RuntimeError("Future is pending but nothing will wake it")


async def count_to(name: str, n: int) -> str:
    """Counts to n, handing control back to the driver between steps."""
    for i in range(n):
        print(f"{name}: {i}")
        await yield_now()
    return f"{name} counted to {n}"


async def entry() -> None:
    """Entry point for example."""
    slow = maybe_done(count_to("slow", 3))
    fast = maybe_done(count_to("fast", 1))

    # Both wrappers are driven through the same None-producing interface ...
    await join(slow, fast)

    # ... and the differently typed outputs are collected afterwards.
    print(slow.take_output())
    print(fast.take_output())


if __name__ == "__main__":
    configure_logging()
    run(maybe_done(entry()))
