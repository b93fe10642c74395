"""Tests for the (model, out_message, effects) triple-composer."""

from dataclasses import replace

import pytest
from conftest import Counter, LogEffect, Tagged
from hypothesis import given
from hypothesis import strategies as st

from updatelift import Effects, Err, Ok, Ordering, Update, UpdateWithOut, alternate, field_lens, triple


def alternate_counter_update(msg, counter):
    counter = replace(counter, count=counter.count + 1)
    return counter, f"now {counter.count}", [LogEffect(msg)]


def primary_counter_update(msg, counter):
    model, out, effects = alternate_counter_update(msg, counter)
    return model, effects, out


def test_lift_reads_out_message_from_middle_slot(page, get_counter, set_counter):
    result = alternate.lift(
        get_counter,
        set_counter,
        lambda e: Tagged("counter", e),
        alternate_counter_update,
        "inc",
        page,
    )

    assert result == UpdateWithOut(
        replace(page, counter=Counter(4)),
        Effects.of(Tagged("counter", LogEffect("inc"))),
        "now 4",
    )


def test_lift_matches_primary_on_reordered_child(page, get_counter, set_counter):
    alt = alternate.lift(get_counter, set_counter, str, alternate_counter_update, "inc", page)
    prim = triple.lift(get_counter, set_counter, str, primary_counter_update, "inc", page)

    assert alt == prim


def test_lift_with_lens(page):
    result = alternate.lift_with(field_lens("counter"), lambda e: e, alternate_counter_update, "x", page)

    assert result.out_message == "now 4"


def test_resolve_family():
    handler = lambda out, m: (m + out, ["h"])  # noqa: E731

    assert alternate.resolve(handler, (1, 2, ["a"])) == Update(3, Effects.of("a", "h"))
    assert alternate.resolve_optional(handler, ["d"], (1, None, ["a"])) == Update(
        1, Effects.of("a", "d")
    )
    assert alternate.resolve_fallible(handler, lambda e: [e], (1, Err("bad"), ["a"])) == Update(
        1, Effects.of("a", "bad")
    )
    assert alternate.resolve_fallible(handler, lambda e: [e], (1, Ok(2), ["a"])) == Update(
        3, Effects.of("a", "h")
    )


def test_resolve_effect_stream():
    result = alternate.resolve_effect_stream(str.upper, ("m", ["x"], ["own"]))

    assert result == Update("m", Effects.of("own", "X"))


def test_structural_maps():
    start = ("m", "out", ["e"])

    assert alternate.map_model(str.upper, start) == UpdateWithOut("M", Effects.of("e"), "out")
    assert alternate.map_effects(str.upper, start) == UpdateWithOut("m", Effects.of("E"), "out")
    assert alternate.map_out_message(len, start) == UpdateWithOut("m", Effects.of("e"), 3)


def test_attach_detach_and_pure():
    attached = alternate.attach_out_message("out", ("m", ["e"]))

    assert attached.as_tuple(Ordering.OUT_MESSAGE_FIRST) == ("m", "out", Effects.of("e"))
    assert alternate.detach_out_message(("m", "out", ["e"])) == (Update("m", Effects.of("e")), "out")
    assert alternate.pure("m") == triple.pure("m")


def test_and_then_reads_step_results_in_alternate_order():
    result = alternate.and_then(lambda out, model: ({"x": 2}, "b", ["e2"]), ({"x": 1}, "a", []))

    assert result.as_tuple(Ordering.OUT_MESSAGE_FIRST) == ({"x": 2}, "b", Effects.of("e2"))


def test_and_map():
    result = alternate.and_map(lambda out, model: (str(model), len(out), []), (7, "abc", ["e"]))

    assert result == UpdateWithOut("7", Effects.of("e"), 3)


def test_convert_ordering_swaps_last_two_slots():
    converted = alternate.convert_ordering(alternate_counter_update)

    model, effects, out = converted("inc", Counter(0))

    assert (model, effects, out) == (Counter(1), Effects.of(LogEffect("inc")), "now 1")


def test_convert_ordering_keeps_function_name():
    assert alternate.convert_ordering(alternate_counter_update).__name__ == "alternate_counter_update"


@given(messages=st.lists(st.text(max_size=5), max_size=5), start=st.integers(-50, 50))
def test_convert_ordering_agrees_with_manual_reordering(messages, start):
    converted = alternate.convert_ordering(alternate_counter_update)

    for msg in messages:
        model, out, effects = alternate_counter_update(msg, Counter(start))

        assert tuple(converted(msg, Counter(start))) == (model, Effects(tuple(effects)), out)


def test_convert_ordering_rejects_pair_results():
    converted = alternate.convert_ordering(lambda msg, model: (model, []))

    with pytest.raises(TypeError):
        converted("msg", 0)


@pytest.mark.parametrize("name", alternate.__all__)
def test_public_operations_are_documented(name):
    assert getattr(alternate, name).__doc__
