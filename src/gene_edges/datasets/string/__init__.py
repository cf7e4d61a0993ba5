"""STRING overlay module for gene-gene associations."""

from .overlay import STRINGOverlay, apply_string

__all__ = ["STRINGOverlay", "apply_string"]
