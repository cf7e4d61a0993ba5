"""PPaxe overlay module for text-mined interactions."""

from .overlay import PPaxeOverlay, apply_ppaxe

__all__ = ["PPaxeOverlay", "apply_ppaxe"]
