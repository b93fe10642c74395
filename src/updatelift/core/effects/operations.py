"""Pure functions over effect batches.

These go through the Batchable protocol so host effect types can be used
anywhere an Effects batch is accepted.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce
from typing import Any

from updatelift.core.effects.models import Batchable, Effects


def coerce_effects(value: Any) -> Batchable:
    """Accept a Batchable as-is, or wrap a list/tuple of effects in Effects.

    Args:
        value: Effect batch, or plain sequence of effect descriptions.

    Returns:
        Batchable effect batch.

    Raises:
        TypeError: If value is neither Batchable nor a list/tuple.
    """
    if isinstance(value, Batchable):
        return value
    if isinstance(value, (list, tuple)):
        return Effects(tuple(value))
    raise TypeError(f"Expected an effect batch, got {type(value).__name__}")


def none() -> Effects:
    """Empty effect batch."""
    return Effects.none()


def batch(first: Any, second: Any) -> Batchable:
    """Append second's effects after first's.

    Args:
        first: Batch whose effects come first.
        second: Batch whose effects come second.

    Returns:
        Combined batch. Associative, with `none()` as identity.

    An empty Effects batch is the identity for host batches too, so
    `pure` results and list shorthands can be chained with any Batchable.
    Non-empty batches of different types are not combined.
    """
    first, second = coerce_effects(first), coerce_effects(second)
    if isinstance(first, Effects) and not first:
        return second
    if isinstance(second, Effects) and not second:
        return first
    return first.batch(second)


def batch_all(*batches: Any) -> Batchable:
    """Fold any number of batches left to right. No batches gives `none()`."""
    if not batches:
        return none()
    return reduce(batch, batches[1:], coerce_effects(batches[0]))


def map_effects(f: Callable[[Any], Any], effects: Any) -> Batchable:
    """Re-tag every effect in the batch through f.

    Args:
        f: Tagger moving each effect into the caller's message space.
        effects: Batch to re-tag.

    Returns:
        New batch of the same length and order.
    """
    return coerce_effects(effects).map(f)
