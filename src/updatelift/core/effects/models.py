"""Effect batch models: the Batchable protocol and the default Effects batch.

An effect batch is an opaque, order-preserving collection of pending
side-effect descriptions. The combinators only ever batch two of them
together or re-tag their contents; running them belongs to the host.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Protocol, Self, runtime_checkable


@runtime_checkable
class Batchable(Protocol):
    """Composable effect batch supplied by a host effect system.

    Implementations must keep `batch` associative, with an empty batch as
    left and right identity, and must never drop or duplicate effects.
    """

    def batch(self, other: Self) -> Self: ...

    def map(self, f: Callable[[Any], Any]) -> Self: ...


@dataclass(frozen=True, slots=True)
class Effects:
    """Immutable batch of effect descriptions in batch order.

    Usage:
        none = Effects.none()
        fetch = Effects.of(FetchUser(42))
        both = fetch.batch(Effects.of(LogLine("fetching")))
        tagged = both.map(ParentMsg.wrap)
    """

    items: tuple[Any, ...] = ()

    @classmethod
    def none(cls) -> Effects:
        """Empty batch, identity for `batch`."""
        return cls()

    @classmethod
    def of(cls, *items: Any) -> Effects:
        """Batch holding the given effect descriptions in order."""
        return cls(tuple(items))

    def batch(self, other: Effects) -> Effects:
        """Append other's effects after this batch's effects.

        Args:
            other: Batch whose effects come second.

        Returns:
            New batch; neither input is modified.

        Raises:
            TypeError: If other is not an Effects batch.
        """
        if not isinstance(other, Effects):
            raise TypeError(f"Cannot batch Effects with {type(other).__name__}")
        if not other.items:
            return self
        if not self.items:
            return other
        return Effects(self.items + other.items)

    def map(self, f: Callable[[Any], Any]) -> Effects:
        """Re-tag every effect through f, keeping batch order."""
        return Effects(tuple(f(item) for item in self.items))

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)
