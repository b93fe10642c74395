"""Effect batches: model, protocol, and batch/map operations."""

from updatelift.core.effects.models import Batchable, Effects
from updatelift.core.effects.operations import (
    batch,
    batch_all,
    coerce_effects,
    map_effects,
    none,
)

__all__ = [
    # Models
    "Batchable",
    "Effects",
    # Operations
    "none",
    "batch",
    "batch_all",
    "map_effects",
    "coerce_effects",
]
