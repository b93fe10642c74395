"""Core type definitions for updatelift."""

from collections.abc import Callable
from typing import Any

from updatelift.core.result.models import PairReturn, TripleReturn

type Tagger = Callable[[Any], Any]
"""Re-addresses one child effect (or out effect) into the parent's message space."""

type Getter[P, C] = Callable[[P], C]
"""Reads the child model out of the parent model."""

type Setter[P, C] = Callable[[C, P], P]
"""Writes a child model back into the parent, returning a new parent."""

type UpdateFn[Msg, M] = Callable[[Msg, M], PairReturn]
"""(message, model) -> (model, effects)."""

type UpdateWithOutFn[Msg, M] = Callable[[Msg, M], TripleReturn]
"""(message, model) -> (model, effects, out_message) in either ordering."""

type OutHandler[O, M] = Callable[[O, M], PairReturn]
"""(out_message, model) -> (model, effects), used to resolve an out-message."""
