"""Pair-composer: lifting and chaining (model, effects) update results.

Usage:
    def update(msg: Msg, model: Page) -> Update[Page]:
        match msg:
            case CounterMsg(inner):
                return lift(
                    lambda page: page.counter,
                    lambda counter, page: replace(page, counter=counter),
                    CounterMsg,
                    counter_update,
                    inner,
                    model,
                )
            case Save():
                return sequence(mark_dirty, with_effects(model, SaveDraft()))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import reduce
from typing import Any, TypeVar

from updatelift.core.effects import Effects, batch, map_effects
from updatelift.core.lens import Lens
from updatelift.core.result import PairReturn, Update, normalize_update
from updatelift.core.types import Getter, Setter, Tagger, UpdateFn

P = TypeVar("P")  # parent model
C = TypeVar("C")  # child model
M = TypeVar("M")
Msg = TypeVar("Msg")


def lift(
    get_sub: Getter[P, C],
    set_sub: Setter[P, C],
    tag_child_effect: Tagger,
    child_update: UpdateFn[Msg, C],
    child_message: Msg,
    parent_model: P,
) -> Update[P]:
    """Run a child update inside a parent model.

    The child model is read with get_sub, updated by child_update, and
    written back with set_sub. Every child effect is re-tagged with
    tag_child_effect so the host dispatches its result as a parent message.

    Args:
        get_sub: Reads the child model from the parent.
        set_sub: Returns a new parent holding the given child model.
        tag_child_effect: Re-addresses one child effect to the parent.
        child_update: Child update function, (message, child) -> pair.
        child_message: Message for the child.
        parent_model: Current parent model.

    Returns:
        Parent-shaped Update with all child effects tagged, in order.
    """
    child = normalize_update(child_update(child_message, get_sub(parent_model)))
    return Update(
        model=set_sub(child.model, parent_model),
        effects=map_effects(tag_child_effect, child.effects),
    )


def lift_with(
    lens: Lens[P, C],
    tag_child_effect: Tagger,
    child_update: UpdateFn[Msg, C],
    child_message: Msg,
    parent_model: P,
) -> Update[P]:
    """`lift` using a Lens for the getter/setter pair."""
    return lift(lens.get, lens.set, tag_child_effect, child_update, child_message, parent_model)


def sequence(f: Callable[[M], PairReturn], update: PairReturn) -> Update[Any]:
    """Chain another update-like step onto a pair result.

    Args:
        f: Step taking the current model and returning a pair.
        update: Result so far.

    Returns:
        f's model, with f's effects batched after the existing ones.
    """
    current = normalize_update(update)
    step = normalize_update(f(current.model))
    return Update(model=step.model, effects=batch(current.effects, step.effects))


map_chained = sequence
"""Synonym for `sequence`."""


def sequence_all(steps: Iterable[Callable[[Any], PairReturn]], update: PairReturn) -> Update[Any]:
    """Apply `sequence` for each step in order."""
    return reduce(lambda acc, step: sequence(step, acc), steps, normalize_update(update))


def pure(model: M) -> Update[M]:
    """Pair result with no effects."""
    return Update(model=model, effects=Effects.none())


def with_effects(model: M, *effects: Any) -> Update[M]:
    """Pair result running the given effect descriptions in order."""
    return Update(model=model, effects=Effects.of(*effects))


def add_effects(effects: Any, update: PairReturn) -> Update[Any]:
    """Batch extra effects after the effects already in update."""
    current = normalize_update(update)
    return Update(model=current.model, effects=batch(current.effects, effects))
