"""Core functionalities: effect batches, result records, lenses.

Architecture Note:
    core/ holds the pure data shared by every composer. The composers in
    pair/, triple/ and alternate/ are independent of one another and
    depend only on core/.
"""

from updatelift.core.effects import (
    Batchable,
    Effects,
    batch,
    batch_all,
    coerce_effects,
    map_effects,
    none,
)
from updatelift.core.lens import Lens, field_lens, key_lens
from updatelift.core.result import (
    Err,
    Ok,
    Ordering,
    Outcome,
    Update,
    UpdateShapeError,
    UpdateWithOut,
    normalize_update,
    normalize_update_with_out,
)
from updatelift.core.types import Getter, OutHandler, Setter, Tagger, UpdateFn, UpdateWithOutFn

__all__ = [
    # Types
    "Tagger",
    "Getter",
    "Setter",
    "UpdateFn",
    "UpdateWithOutFn",
    "OutHandler",
    # Effects
    "Batchable",
    "Effects",
    "none",
    "batch",
    "batch_all",
    "map_effects",
    "coerce_effects",
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
]
