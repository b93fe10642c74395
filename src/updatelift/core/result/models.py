"""Update result records and outcome types.

Usage:
    # Child updates may return records or positional tuples:
    return Update(model, Effects.of(Save(model)))          # Explicit
    return (model, [Save(model)])                          # Pair shorthand
    return UpdateWithOut(model, Effects.none(), Closed())  # Explicit triple
    return (model, [], Closed())                           # Triple shorthand
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Generic, TypeVar

from updatelift.core.effects import Batchable, Effects

M = TypeVar("M")
Out = TypeVar("Out")
T = TypeVar("T")
E = TypeVar("E")


class Ordering(Enum):
    """Slot order of a positional (model, ..., ...) triple."""

    EFFECTS_FIRST = auto()  # (model, effects, out_message)
    OUT_MESSAGE_FIRST = auto()  # (model, out_message, effects)


@dataclass(frozen=True, slots=True)
class Update(Generic[M]):
    """Model plus the effects to run after this update.

    Attributes:
        model: Updated state.
        effects: Effect batch for the host runtime.
    """

    model: M
    effects: Batchable = field(default_factory=Effects)

    def as_tuple(self) -> tuple[M, Batchable]:
        """Positional (model, effects) form for host runtimes."""
        return (self.model, self.effects)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.as_tuple())


@dataclass(frozen=True, slots=True)
class UpdateWithOut(Generic[M, Out]):
    """Model, effects, and an out-message addressed to the parent.

    One record covers both positional orderings; the out-message is
    never routed automatically, the parent resolves it.

    Attributes:
        model: Updated state.
        effects: Effect batch for the host runtime.
        out_message: Notification for the parent, None if there is none.
    """

    model: M
    effects: Batchable = field(default_factory=Effects)
    out_message: Out | None = None

    def as_tuple(self, ordering: Ordering = Ordering.EFFECTS_FIRST) -> tuple[Any, Any, Any]:
        """Positional form in the requested slot order.

        Args:
            ordering: EFFECTS_FIRST gives (model, effects, out_message),
                OUT_MESSAGE_FIRST gives (model, out_message, effects).

        Returns:
            Three-slot tuple.
        """
        if ordering is Ordering.OUT_MESSAGE_FIRST:
            return (self.model, self.out_message, self.effects)
        return (self.model, self.effects, self.out_message)

    def without_out_message(self) -> Update[M]:
        """Drop the out-message, keeping model and effects."""
        return Update(model=self.model, effects=self.effects)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.as_tuple())


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carried in the out-message slot."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carried in the out-message slot."""

    error: E


type Outcome[T, E] = Ok[T] | Err[E]
"""Success or failure value consumed by `resolve_fallible`."""


PairReturn = Update[Any] | tuple[Any, Any]
"""Anything accepted as a (model, effects) result."""

TripleReturn = UpdateWithOut[Any, Any] | tuple[Any, Any, Any]
"""Anything accepted as a (model, effects, out_message) result, in either ordering."""


class UpdateShapeError(TypeError):
    """Raised when an update function returns something that is not a result shape."""

    pass
