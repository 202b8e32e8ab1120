from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from one_ring_futures.coro import from_coro, wait
from one_ring_futures.exceptions import PolledAfterCompletion
from one_ring_futures.future import AwaitableFuture, pending, poll_fn, ready, yield_now
from one_ring_futures.poll import PENDING, Ready

if TYPE_CHECKING:
    from one_ring_futures.typedefs import Coro


class TestCoroFuture:
    def test_returns_coroutine_value(self, block_on) -> None:
        def entry() -> Coro[int]:
            a = yield from wait(ready(1))
            b = yield from wait(ready(2))
            return a + b

        assert block_on(from_coro(entry())) == 3

    def test_pending_while_awaited_future_pending(self, waker, countdown) -> None:
        def entry() -> Coro[str]:
            return (yield countdown(3, "done"))

        future = from_coro(entry())
        assert future.poll(waker) is PENDING
        assert future.poll(waker) is PENDING
        assert future.poll(waker) == Ready("done")

    def test_bare_yield_is_checkpoint(self, counting_waker) -> None:
        def entry() -> Coro[str]:
            yield
            yield
            return "after two checkpoints"

        future = from_coro(entry())
        assert future.poll(counting_waker.waker) is PENDING
        assert future.poll(counting_waker.waker) is PENDING
        assert counting_waker.wakes == 2
        assert future.poll(counting_waker.waker) == Ready("after two checkpoints")

    def test_native_coroutine(self, block_on) -> None:
        async def double(value: int) -> int:
            await yield_now()
            return value * 2

        async def entry() -> int:
            return await from_coro(double(4)) + await ready(1)

        assert block_on(from_coro(entry())) == 9

    def test_awaited_error_is_thrown_into_coroutine(
        self, block_on, exploding
    ) -> None:
        def entry() -> Coro[str]:
            try:
                yield exploding(ValueError("Oopsie!"))
            except ValueError as e:
                return f"caught {e}"
            return "not caught"

        assert block_on(from_coro(entry())) == "caught Oopsie!"

    def test_uncaught_error_propagates(self, waker, exploding) -> None:
        def entry() -> Coro[None]:
            yield exploding(RuntimeError("Oopsie!"))

        future = from_coro(entry())
        with pytest.raises(RuntimeError, match="Oopsie!"):
            future.poll(waker)

        with pytest.raises(PolledAfterCompletion):
            future.poll(waker)

    def test_bad_yield_raises_type_error_in_coroutine(self, block_on) -> None:
        def entry() -> Coro[str]:
            try:
                yield 42  # pyrefly: ignore
            except TypeError:
                return "rejected"
            return "accepted"

        assert block_on(from_coro(entry())) == "rejected"

    def test_poll_after_completion_is_fault(self, waker) -> None:
        def entry() -> Coro[int]:
            return 1
            yield  # pyrefly: ignore

        future = from_coro(entry())
        assert future.poll(waker) == Ready(1)
        with pytest.raises(PolledAfterCompletion):
            future.poll(waker)

    def test_close_finalizes_coroutine(self, waker) -> None:
        cleaned_up = False

        def entry() -> Coro[None]:
            nonlocal cleaned_up
            try:
                yield
            finally:
                cleaned_up = True

        future = from_coro(entry())
        assert future.poll(waker) is PENDING

        future.close()
        assert cleaned_up
        with pytest.raises(PolledAfterCompletion):
            future.poll(waker)


class TestLeafFutures:
    def test_poll_is_abstract(self) -> None:
        class NoPoll(AwaitableFuture[None]):
            pass

        with pytest.raises(TypeError, match="abstract"):
            NoPoll()  # pyrefly: ignore

    def test_ready_polled_twice(self, waker) -> None:
        future = ready("x")
        assert future.poll(waker) == Ready("x")
        with pytest.raises(PolledAfterCompletion):
            future.poll(waker)

    def test_yield_now(self, counting_waker) -> None:
        future = yield_now()
        assert future.poll(counting_waker.waker) is PENDING
        assert counting_waker.wakes == 1
        assert future.poll(counting_waker.waker) == Ready(None)

    def test_poll_fn_receives_waker(self, counting_waker) -> None:
        polls = []

        def poll(waker):
            polls.append(waker)
            if len(polls) < 2:
                waker.wake()
                return PENDING
            return Ready(len(polls))

        future = poll_fn(poll)
        assert future.poll(counting_waker.waker) is PENDING
        assert future.poll(counting_waker.waker) == Ready(2)
        assert counting_waker.wakes == 1
        assert polls == [counting_waker.waker, counting_waker.waker]

    def test_pending_never_wakes(self, counting_waker) -> None:
        future = pending()
        for _ in range(3):
            assert future.poll(counting_waker.waker) is PENDING
        assert counting_waker.wakes == 0
