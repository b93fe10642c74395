"""Triple-composer: update results carrying an out-message for the parent.

Positional 3-tuples are read as (model, effects, out_message) unless an
`ordering` is given. Results are always UpdateWithOut or Update records.

Usage:
    # Child signals the parent without knowing about it
    def dialog_update(msg, dialog):
        if isinstance(msg, ConfirmClicked):
            return (dialog, [], Confirmed(dialog.choice))
        return (dialog, [], None)

    # Parent lifts the child and resolves the out-message
    result = lift(get_dialog, set_dialog, DialogMsg, dialog_update, msg, page)
    return resolve_optional(on_dialog_out, Effects.none(), result)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from updatelift.core.effects import Effects, batch
from updatelift.core.effects import map_effects as map_batch
from updatelift.core.lens import Lens
from updatelift.core.result import (
    Err,
    Ok,
    Ordering,
    PairReturn,
    TripleReturn,
    Update,
    UpdateWithOut,
    normalize_update,
    normalize_update_with_out,
)
from updatelift.core.types import Getter, OutHandler, Setter, Tagger, UpdateWithOutFn

P = TypeVar("P")  # parent model
C = TypeVar("C")  # child model
M = TypeVar("M")
N = TypeVar("N")
Msg = TypeVar("Msg")
Out = TypeVar("Out")

_PRIMARY = Ordering.EFFECTS_FIRST


def lift(
    get_sub: Getter[P, C],
    set_sub: Setter[P, C],
    tag_child_effect: Tagger,
    child_update: UpdateWithOutFn[Msg, C],
    child_message: Msg,
    parent_model: P,
    *,
    ordering: Ordering = _PRIMARY,
) -> UpdateWithOut[P, Any]:
    """Run a child update inside a parent model, keeping its out-message.

    Same as the pair `lift`, except the child's out-message is passed
    through untouched. It is never tagged; map it explicitly if needed.

    Args:
        get_sub: Reads the child model from the parent.
        set_sub: Returns a new parent holding the given child model.
        tag_child_effect: Re-addresses one child effect to the parent.
        child_update: Child update function, (message, child) -> triple.
        child_message: Message for the child.
        parent_model: Current parent model.
        ordering: Slot order of positional tuples returned by child_update.

    Returns:
        Parent-shaped UpdateWithOut carrying the child's out-message.
    """
    child = normalize_update_with_out(
        child_update(child_message, get_sub(parent_model)),
        ordering,
    )
    return UpdateWithOut(
        model=set_sub(child.model, parent_model),
        effects=map_batch(tag_child_effect, child.effects),
        out_message=child.out_message,
    )


def lift_with(
    lens: Lens[P, C],
    tag_child_effect: Tagger,
    child_update: UpdateWithOutFn[Msg, C],
    child_message: Msg,
    parent_model: P,
    *,
    ordering: Ordering = _PRIMARY,
) -> UpdateWithOut[P, Any]:
    """`lift` using a Lens for the getter/setter pair."""
    return lift(
        lens.get,
        lens.set,
        tag_child_effect,
        child_update,
        child_message,
        parent_model,
        ordering=ordering,
    )


def resolve(
    handler: OutHandler[Any, Any],
    triple: TripleReturn,
    *,
    ordering: Ordering = _PRIMARY,
) -> Update[Any]:
    """Consume the out-message, folding the triple back into a pair.

    Args:
        handler: (out_message, model) -> pair.
        triple: Result carrying the out-message.
        ordering: Slot order if triple is a positional tuple.

    Returns:
        handler's model, with handler's effects batched after the existing ones.
    """
    current = normalize_update_with_out(triple, ordering)
    handled = normalize_update(handler(current.out_message, current.model))
    return Update(model=handled.model, effects=batch(current.effects, handled.effects))


def resolve_optional(
    handler: OutHandler[Any, Any],
    default_effects: Any,
    triple: TripleReturn,
    *,
    ordering: Ordering = _PRIMARY,
) -> Update[Any]:
    """`resolve` when there is an out-message, otherwise run default_effects.

    An out-message of None counts as absent. default_effects only runs in
    that case; when the handler runs, its own effects are used instead.
    """
    current = normalize_update_with_out(triple, ordering)
    if current.out_message is None:
        return Update(model=current.model, effects=batch(current.effects, default_effects))
    return resolve(handler, current)


def resolve_fallible(
    handler: OutHandler[Any, Any],
    on_error: Callable[[Any], Any],
    triple: TripleReturn,
    *,
    ordering: Ordering = _PRIMARY,
) -> Update[Any]:
    """Resolve an Ok/Err out-message.

    Ok(value) is resolved with handler(value, model). Err(error) only adds
    the effects returned by on_error(error); the model is left as it was.

    Raises:
        TypeError: If the out-message is neither Ok nor Err.
    """
    current = normalize_update_with_out(triple, ordering)
    outcome = current.out_message
    if isinstance(outcome, Ok):
        handled = normalize_update(handler(outcome.value, current.model))
        return Update(model=handled.model, effects=batch(current.effects, handled.effects))
    if isinstance(outcome, Err):
        return Update(model=current.model, effects=batch(current.effects, on_error(outcome.error)))
    raise TypeError(f"Expected Ok or Err out-message, got {type(outcome).__name__}")


def resolve_effect_stream(
    tag_out: Tagger,
    triple: TripleReturn,
    *,
    ordering: Ordering = _PRIMARY,
) -> Update[Any]:
    """Run an out-message that is itself an effect batch.

    The out batch is re-tagged with tag_out and batched after the existing
    effects. The model is returned as-is and never inspected.
    """
    current = normalize_update_with_out(triple, ordering)
    return Update(
        model=current.model,
        effects=batch(current.effects, map_batch(tag_out, current.out_message)),
    )


def map_model(
    f: Callable[[M], N],
    triple: TripleReturn,
    *,
    ordering: Ordering = _PRIMARY,
) -> UpdateWithOut[N, Any]:
    """Apply f to the model slot only."""
    current = normalize_update_with_out(triple, ordering)
    return UpdateWithOut(
        model=f(current.model),
        effects=current.effects,
        out_message=current.out_message,
    )


def map_effects(
    f: Callable[[Any], Any],
    triple: TripleReturn,
    *,
    ordering: Ordering = _PRIMARY,
) -> UpdateWithOut[Any, Any]:
    """Re-tag every effect through f; model and out-message unchanged."""
    current = normalize_update_with_out(triple, ordering)
    return UpdateWithOut(
        model=current.model,
        effects=map_batch(f, current.effects),
        out_message=current.out_message,
    )


def map_out_message(
    f: Callable[[Any], Any],
    triple: TripleReturn,
    *,
    ordering: Ordering = _PRIMARY,
) -> UpdateWithOut[Any, Any]:
    """Apply f to the out-message slot only."""
    current = normalize_update_with_out(triple, ordering)
    return UpdateWithOut(
        model=current.model,
        effects=current.effects,
        out_message=f(current.out_message),
    )


def attach_out_message(out_message: Out, update: PairReturn) -> UpdateWithOut[Any, Out]:
    """Turn a pair result into a triple by supplying its out-message."""
    current = normalize_update(update)
    return UpdateWithOut(model=current.model, effects=current.effects, out_message=out_message)


def detach_out_message(
    triple: TripleReturn,
    *,
    ordering: Ordering = _PRIMARY,
) -> tuple[Update[Any], Any]:
    """Split a triple into its pair result and its out-message."""
    current = normalize_update_with_out(triple, ordering)
    return current.without_out_message(), current.out_message


def and_map(
    f: UpdateWithOutFn[Any, Any],
    triple: TripleReturn,
    *,
    ordering: Ordering = _PRIMARY,
) -> UpdateWithOut[Any, Any]:
    """Chain a step whose model and out-message types may differ from the input's.

    Args:
        f: (out_message, model) -> triple.
        triple: Result so far.
        ordering: Slot order for triple and for positional tuples from f.

    Returns:
        f's model and out-message, with f's effects batched after the
        existing ones. The previous out-message is replaced, not merged.
    """
    current = normalize_update_with_out(triple, ordering)
    step = normalize_update_with_out(f(current.out_message, current.model), ordering)
    return UpdateWithOut(
        model=step.model,
        effects=batch(current.effects, step.effects),
        out_message=step.out_message,
    )


def and_then(
    f: UpdateWithOutFn[Any, M],
    triple: TripleReturn,
    *,
    ordering: Ordering = _PRIMARY,
) -> UpdateWithOut[M, Any]:
    """Chain a step on the same model type; see `and_map`."""
    return and_map(f, triple, ordering=ordering)


def pure(model: M, out_message: Any = None) -> UpdateWithOut[M, Any]:
    """Triple result with no effects."""
    return UpdateWithOut(model=model, effects=Effects.none(), out_message=out_message)
