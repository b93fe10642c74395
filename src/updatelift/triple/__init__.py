"""Triple-composer for (model, effects, out_message) update results."""

from updatelift.triple.operations import (
    and_map,
    and_then,
    attach_out_message,
    detach_out_message,
    lift,
    lift_with,
    map_effects,
    map_model,
    map_out_message,
    pure,
    resolve,
    resolve_effect_stream,
    resolve_fallible,
    resolve_optional,
)

__all__ = [
    # Lifting
    "lift",
    "lift_with",
    # Resolving
    "resolve",
    "resolve_optional",
    "resolve_fallible",
    "resolve_effect_stream",
    # Structural maps
    "map_model",
    "map_effects",
    "map_out_message",
    "attach_out_message",
    "detach_out_message",
    # Chaining
    "and_then",
    "and_map",
    "pure",
]
