from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(slots=True, frozen=True)
class Waker:
    """Handle a future uses to tell its driver that it should be polled again."""

    """Invoked on every wake."""
    callback: Callable[[], object] = field(repr=False)

    def wake(self) -> None:
        """Schedules the owning task to be polled again."""
        self.callback()


def _noop() -> None:
    pass


def noop_waker() -> Waker:
    """Waker that does nothing, for driving futures by hand."""
    return Waker(callback=_noop)
