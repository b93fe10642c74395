"""Lens functionality: getter/setter pairs for lifting child updates."""

from updatelift.core.lens.models import Lens, field_lens, key_lens

__all__ = [
    "Lens",
    "field_lens",
    "key_lens",
]
