from dataclasses import dataclass
from typing import override


class Pending:
    """Sentinel for a future that has not completed yet."""

    __slots__ = ()

    @override
    def __repr__(self) -> str:
        """Pretty printing."""
        return "Pending"


PENDING = Pending()


@dataclass(slots=True, frozen=True)
class Ready[T]:
    """A future has completed with a value."""

    value: T


type Poll[T] = Pending | Ready[T]
