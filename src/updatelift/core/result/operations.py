"""Normalization of update return values into result records."""

from __future__ import annotations

from typing import Any

from updatelift.core.effects import coerce_effects
from updatelift.core.result.models import (
    Ordering,
    PairReturn,
    TripleReturn,
    Update,
    UpdateShapeError,
    UpdateWithOut,
)


def normalize_update(raw: PairReturn) -> Update[Any]:
    """Convert a pair-shaped return value to an Update.

    Supports:
    - Update: Direct passthrough
    - tuple (model, effects): effects may be a Batchable or list/tuple

    Args:
        raw: Value returned by a pair-shaped update function.

    Returns:
        Normalized Update.

    Raises:
        UpdateShapeError: If raw is not a recognized pair shape. An
            UpdateWithOut is rejected too; its out-message has to be
            resolved or detached first.
    """
    if isinstance(raw, Update):
        return raw

    if isinstance(raw, UpdateWithOut):
        raise UpdateShapeError(
            "Expected (model, effects) pair, got UpdateWithOut; resolve its out-message first"
        )

    if isinstance(raw, tuple) and len(raw) == 2:
        model, effects = raw
        return Update(model=model, effects=_effects_slot(effects, raw))

    raise UpdateShapeError(f"Expected (model, effects) pair, got {raw!r}")


def normalize_update_with_out(
    raw: TripleReturn,
    ordering: Ordering = Ordering.EFFECTS_FIRST,
) -> UpdateWithOut[Any, Any]:
    """Convert a triple-shaped return value to an UpdateWithOut.

    Supports:
    - UpdateWithOut: Direct passthrough (ordering is irrelevant)
    - tuple (model, effects, out) under Ordering.EFFECTS_FIRST
    - tuple (model, out, effects) under Ordering.OUT_MESSAGE_FIRST

    Args:
        raw: Value returned by a triple-shaped update function.
        ordering: How to read positional 3-tuples.

    Returns:
        Normalized UpdateWithOut.

    Raises:
        UpdateShapeError: If raw is not a recognized triple shape.
    """
    if isinstance(raw, UpdateWithOut):
        return raw

    if isinstance(raw, tuple) and len(raw) == 3:
        if ordering is Ordering.OUT_MESSAGE_FIRST:
            model, out_message, effects = raw
        else:
            model, effects, out_message = raw
        return UpdateWithOut(
            model=model,
            effects=_effects_slot(effects, raw),
            out_message=out_message,
        )

    raise UpdateShapeError(f"Expected (model, effects, out_message) triple, got {raw!r}")


def _effects_slot(effects: Any, raw: tuple[Any, ...]) -> Any:
    try:
        return coerce_effects(effects)
    except TypeError as e:
        raise UpdateShapeError(f"Effects slot of {raw!r} is not an effect batch") from e
