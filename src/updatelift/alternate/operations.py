"""Triple-composer for (model, out_message, effects) positional results.

Same contracts as `updatelift.triple`; only the reading of positional
3-tuples differs. Both produce the same UpdateWithOut/Update records, so
results from either side can be mixed freely. Use
`result.as_tuple(Ordering.OUT_MESSAGE_FIRST)` for the positional form.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from updatelift.core.lens import Lens
from updatelift.core.result import (
    Ordering,
    PairReturn,
    TripleReturn,
    Update,
    UpdateWithOut,
    normalize_update_with_out,
)
from updatelift.core.types import Getter, OutHandler, Setter, Tagger, UpdateWithOutFn
from updatelift.triple import operations as primary

P = TypeVar("P")
C = TypeVar("C")
M = TypeVar("M")
N = TypeVar("N")
Msg = TypeVar("Msg")
Out = TypeVar("Out")

_ALTERNATE = Ordering.OUT_MESSAGE_FIRST


def lift(
    get_sub: Getter[P, C],
    set_sub: Setter[P, C],
    tag_child_effect: Tagger,
    child_update: UpdateWithOutFn[Msg, C],
    child_message: Msg,
    parent_model: P,
) -> UpdateWithOut[P, Any]:
    """Lift a child update returning (model, out_message, effects)."""
    return primary.lift(
        get_sub,
        set_sub,
        tag_child_effect,
        child_update,
        child_message,
        parent_model,
        ordering=_ALTERNATE,
    )


def lift_with(
    lens: Lens[P, C],
    tag_child_effect: Tagger,
    child_update: UpdateWithOutFn[Msg, C],
    child_message: Msg,
    parent_model: P,
) -> UpdateWithOut[P, Any]:
    """`lift` using a Lens for the getter/setter pair."""
    return primary.lift_with(
        lens,
        tag_child_effect,
        child_update,
        child_message,
        parent_model,
        ordering=_ALTERNATE,
    )


def resolve(handler: OutHandler[Any, Any], triple: TripleReturn) -> Update[Any]:
    """Consume the out-message of a (model, out_message, effects) triple."""
    return primary.resolve(handler, triple, ordering=_ALTERNATE)


def resolve_optional(
    handler: OutHandler[Any, Any],
    default_effects: Any,
    triple: TripleReturn,
) -> Update[Any]:
    """`resolve` when the out-message is not None, otherwise run default_effects."""
    return primary.resolve_optional(handler, default_effects, triple, ordering=_ALTERNATE)


def resolve_fallible(
    handler: OutHandler[Any, Any],
    on_error: Callable[[Any], Any],
    triple: TripleReturn,
) -> Update[Any]:
    """Resolve an Ok/Err out-message; Err only adds on_error effects."""
    return primary.resolve_fallible(handler, on_error, triple, ordering=_ALTERNATE)


def resolve_effect_stream(tag_out: Tagger, triple: TripleReturn) -> Update[Any]:
    """Batch the out slot's effects, tagged with tag_out, after the own effects."""
    return primary.resolve_effect_stream(tag_out, triple, ordering=_ALTERNATE)


def map_model(f: Callable[[M], N], triple: TripleReturn) -> UpdateWithOut[N, Any]:
    """Apply f to the model slot only."""
    return primary.map_model(f, triple, ordering=_ALTERNATE)


def map_effects(f: Callable[[Any], Any], triple: TripleReturn) -> UpdateWithOut[Any, Any]:
    """Re-tag every effect through f; model and out-message unchanged."""
    return primary.map_effects(f, triple, ordering=_ALTERNATE)


def map_out_message(f: Callable[[Any], Any], triple: TripleReturn) -> UpdateWithOut[Any, Any]:
    """Apply f to the out-message slot only."""
    return primary.map_out_message(f, triple, ordering=_ALTERNATE)


def attach_out_message(out_message: Out, update: PairReturn) -> UpdateWithOut[Any, Out]:
    """Turn a pair result into a triple by supplying its out-message."""
    return primary.attach_out_message(out_message, update)


def detach_out_message(triple: TripleReturn) -> tuple[Update[Any], Any]:
    """Split a (model, out_message, effects) triple into pair and out-message."""
    return primary.detach_out_message(triple, ordering=_ALTERNATE)


def and_map(f: UpdateWithOutFn[Any, Any], triple: TripleReturn) -> UpdateWithOut[Any, Any]:
    """Chain a step returning (model, out_message, effects); see `triple.and_map`."""
    return primary.and_map(f, triple, ordering=_ALTERNATE)


def and_then(f: UpdateWithOutFn[Any, M], triple: TripleReturn) -> UpdateWithOut[M, Any]:
    """Chain a step on the same model type; see `and_map`."""
    return primary.and_then(f, triple, ordering=_ALTERNATE)


def pure(model: M, out_message: Any = None) -> UpdateWithOut[M, Any]:
    """Triple result with no effects."""
    return primary.pure(model, out_message)


def convert_ordering(
    f: UpdateWithOutFn[Msg, M],
) -> Callable[[Msg, M], UpdateWithOut[M, Any]]:
    """Wrap an update returning (model, out_message, effects).

    The wrapped function returns an UpdateWithOut, which unpacks as
    (model, effects, out_message). Nothing but the slot order changes.

    Args:
        f: Update function in (model, out_message, effects) order.

    Returns:
        Update function with the same arguments.
    """

    @functools.wraps(f)
    def converted(message: Msg, model: M) -> UpdateWithOut[M, Any]:
        return normalize_update_with_out(f(message, model), _ALTERNATE)

    return converted
