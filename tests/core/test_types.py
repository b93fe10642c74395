"""Combinator signatures are written in terms of the shared callable aliases."""

from typing import get_origin, get_type_hints

import pytest

from updatelift import alternate, pair, triple
from updatelift.core.types import Getter, OutHandler, Setter, Tagger, UpdateFn, UpdateWithOutFn


def _alias(hint):
    return get_origin(hint) or hint


@pytest.mark.parametrize(
    ("fn", "child_fn"),
    [(pair.lift, UpdateFn), (triple.lift, UpdateWithOutFn), (alternate.lift, UpdateWithOutFn)],
)
def test_lift_parameters_use_aliases(fn, child_fn):
    hints = get_type_hints(fn)

    assert _alias(hints["get_sub"]) is Getter
    assert _alias(hints["set_sub"]) is Setter
    assert _alias(hints["tag_child_effect"]) is Tagger
    assert _alias(hints["child_update"]) is child_fn


@pytest.mark.parametrize(
    "fn",
    [triple.resolve, triple.resolve_optional, alternate.resolve, alternate.resolve_fallible],
)
def test_resolvers_take_out_handlers(fn):
    assert _alias(get_type_hints(fn)["handler"]) is OutHandler


@pytest.mark.parametrize("fn", [triple.and_map, triple.and_then, alternate.and_map, alternate.and_then])
def test_chaining_steps_are_update_with_out_fns(fn):
    assert _alias(get_type_hints(fn)["f"]) is UpdateWithOutFn
