"""Result functionality: update records, outcomes, and normalization."""

from updatelift.core.result.models import (
    Err,
    Ok,
    Ordering,
    Outcome,
    PairReturn,
    TripleReturn,
    Update,
    UpdateShapeError,
    UpdateWithOut,
)
from updatelift.core.result.operations import normalize_update, normalize_update_with_out

__all__ = [
    # Models
    "Update",
    "UpdateWithOut",
    "Ordering",
    "Ok",
    "Err",
    "Outcome",
    "PairReturn",
    "TripleReturn",
    "UpdateShapeError",
    # Operations
    "normalize_update",
    "normalize_update_with_out",
]
