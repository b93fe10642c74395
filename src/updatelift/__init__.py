"""updatelift: combinators for nesting message-driven update functions.

Usage:
    from updatelift import Effects, pair, triple

    def page_update(msg, page):
        if isinstance(msg, CounterMsg):
            return pair.lift(
                get_counter, set_counter, CounterMsg, counter_update, msg.inner, page
            )
        if isinstance(msg, DialogMsg):
            result = triple.lift(
                get_dialog, set_dialog, DialogMsg, dialog_update, msg.inner, page
            )
            return triple.resolve_optional(on_dialog_out, Effects.none(), result)
        return pair.pure(page)
"""

__version__ = "0.1.0"

from updatelift import alternate, pair, triple

# Core primitives
from updatelift.core import (
    Batchable,
    Effects,
    Err,
    Lens,
    Ok,
    Ordering,
    Outcome,
    Update,
    UpdateShapeError,
    UpdateWithOut,
    batch,
    batch_all,
    field_lens,
    key_lens,
    map_effects,
    none,
    normalize_update,
    normalize_update_with_out,
)

# Configuration and tracing
from updatelift.config import ComposerSettings, get_settings
from updatelift.tracing import traced

__all__ = [
    # Version
    "__version__",
    # Composers
    "pair",
    "triple",
    "alternate",
    # Effects
    "Batchable",
    "Effects",
    "none",
    "batch",
    "batch_all",
    "map_effects",
    # Results
    "Update",
    "UpdateWithOut",
    "Ordering",
    "Ok",
    "Err",
    "Outcome",
    "UpdateShapeError",
    "normalize_update",
    "normalize_update_with_out",
    # Lens
    "Lens",
    "field_lens",
    "key_lens",
    # Config / tracing
    "ComposerSettings",
    "get_settings",
    "traced",
]
