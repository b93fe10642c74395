"""Pair-composer for (model, effects) update results.

Usage:
    from updatelift import pair

    result = pair.lift(get_counter, set_counter, CounterMsg, counter_update, msg, page)
    result = pair.sequence(validate, result)
"""

from updatelift.pair.operations import (
    add_effects,
    lift,
    lift_with,
    map_chained,
    pure,
    sequence,
    sequence_all,
    with_effects,
)

__all__ = [
    "lift",
    "lift_with",
    "sequence",
    "map_chained",
    "sequence_all",
    "pure",
    "with_effects",
    "add_effects",
]
