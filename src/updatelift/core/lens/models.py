"""Getter/setter pairs focusing a parent model on one child model.

Usage:
    counter = field_lens("counter")          # dataclass attribute
    sidebar = key_lens("sidebar")            # mapping key

    child = counter.get(parent)
    parent = counter.set(new_child, parent)
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

P = TypeVar("P")  # parent model
C = TypeVar("C")  # focused child model


@dataclass(frozen=True, slots=True)
class Lens(Generic[P, C]):
    """Focused access to a child model inside a parent model.

    `set` takes the new child first, matching the `set_sub` argument of
    the lift combinators. It must return a new parent and leave every
    other field as it was.
    """

    get: Callable[[P], C]
    set: Callable[[C, P], P]

    def modify(self, f: Callable[[C], C], parent: P) -> P:
        """Apply f to the focused child and write it back."""
        return self.set(f(self.get(parent)), parent)

    def compose(self, inner: Lens[C, Any]) -> Lens[P, Any]:
        """Focus further through inner, e.g. parent -> child -> grandchild."""
        return Lens(
            get=lambda parent: inner.get(self.get(parent)),
            set=lambda value, parent: self.set(inner.set(value, self.get(parent)), parent),
        )


def field_lens(name: str) -> Lens[Any, Any]:
    """Lens on a dataclass attribute, written back with dataclasses.replace.

    Args:
        name: Attribute name on the parent dataclass.

    Returns:
        Lens reading and replacing that attribute.
    """
    return Lens(
        get=lambda parent: getattr(parent, name),
        set=lambda child, parent: dataclasses.replace(parent, **{name: child}),
    )


def key_lens(key: Any) -> Lens[Mapping[Any, Any], Any]:
    """Lens on a mapping key; the setter returns a new dict."""
    return Lens(
        get=lambda parent: parent[key],
        set=lambda child, parent: {**parent, key: child},
    )
