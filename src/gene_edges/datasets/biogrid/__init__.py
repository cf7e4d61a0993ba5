"""BioGRID overlay module for curated gene-gene interactions."""

from .overlay import (
    INTERACTION_TYPES,
    BioGRIDOverlay,
    InteractionCategory,
    apply_biogrid,
    interaction_category,
)

__all__ = [
    "BioGRIDOverlay",
    "InteractionCategory",
    "INTERACTION_TYPES",
    "apply_biogrid",
    "interaction_category",
]
