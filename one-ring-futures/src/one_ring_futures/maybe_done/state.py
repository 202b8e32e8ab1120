from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from one_ring_futures.typedefs import Future


@dataclass(slots=True, kw_only=True)
class Polling[T]:
    """The wrapped future has not completed yet."""

    future: Future[T]


@dataclass(slots=True, kw_only=True)
class Done[T]:
    """The wrapped future completed and its output has not been taken."""

    output: T


@dataclass(slots=True, kw_only=True)
class Gone:
    """The output has been taken."""


type MaybeDoneState[T] = Polling[T] | Done[T] | Gone
