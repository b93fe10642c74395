"""Opt-in tracing of update functions.

Usage:
    @traced
    def update(msg, model):
        ...

    # Or with a label and explicit settings
    page_update = traced(page_update, name="page", settings=ComposerSettings(trace_updates=True))

Nothing is logged unless `trace_updates` is enabled. The wrapped function's
return value is passed through untouched. Lines go to the `updatelift` logger;
no handler is attached here, call `setup_logger()` or configure logging in the host.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Sized
from typing import Any, TypeVar, overload

from updatelift.config import ComposerSettings, get_settings
from updatelift.core.result import Update, UpdateWithOut
from updatelift.tracing.logger import logger

Msg = TypeVar("Msg")
M = TypeVar("M")
R = TypeVar("R")


@overload
def traced(
    update: Callable[[Msg, M], R],
    *,
    name: str | None = None,
    settings: ComposerSettings | None = None,
) -> Callable[[Msg, M], R]: ...


@overload
def traced(
    update: None = None,
    *,
    name: str | None = None,
    settings: ComposerSettings | None = None,
) -> Callable[[Callable[[Msg, M], R]], Callable[[Msg, M], R]]: ...


def traced(
    update: Callable[[Msg, M], R] | None = None,
    *,
    name: str | None = None,
    settings: ComposerSettings | None = None,
) -> Any:
    """Log each call of an update function at DEBUG level.

    Usable as `@traced`, `@traced(name=...)`, or `traced(fn, ...)`.

    Args:
        update: Update function, (message, model) -> result.
        name: Label for log lines. Defaults to the function's __name__.
        settings: Settings to consult. Defaults to `get_settings()` per call.

    Returns:
        Wrapped update function, or a decorator when update is omitted.
    """
    if update is None:
        return functools.partial(traced, name=name, settings=settings)

    label = name or getattr(update, "__name__", repr(update))

    @functools.wraps(update)
    def wrapper(message: Msg, model: M) -> R:
        result = update(message, model)
        active = settings or get_settings()
        if active.trace_updates:
            logger.debug(
                "%s <- %s: %s",
                label,
                type(message).__name__,
                describe_result(result, include_items=active.log_effect_items),
            )
        return result

    return wrapper


def describe_result(result: Any, include_items: bool = False) -> str:
    """One-line summary of an update result for log output.

    Args:
        result: Update, UpdateWithOut, or positional tuple.
        include_items: Append the effect reprs to the count.

    Returns:
        Summary such as "effects=2 out=Closed".
    """
    if isinstance(result, UpdateWithOut):
        out = "none" if result.out_message is None else type(result.out_message).__name__
        return f"{_describe_effects(result.effects, include_items)} out={out}"
    if isinstance(result, Update):
        return _describe_effects(result.effects, include_items)
    if isinstance(result, tuple):
        return f"positional result with {len(result)} slots"
    return f"unrecognized result {type(result).__name__}"


def _describe_effects(effects: Any, include_items: bool) -> str:
    # Host batches need not be sized
    if not isinstance(effects, Sized):
        return f"effects={effects!r}" if include_items else "effects=?"
    if include_items:
        return f"effects={len(effects)} {list(effects)!r}"
    return f"effects={len(effects)}"
