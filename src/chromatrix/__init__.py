"""Chromatrix: per-key lighting effect generator for Razer keyboards."""

__version__ = "0.1.0"

from .devices import Keyboard, detect_all, detect_one, get_registry
from .models import Color, Effect, EffectDocument, EffectMatrix

__all__ = [
    "Color",
    "Effect",
    "EffectDocument",
    "EffectMatrix",
    "Keyboard",
    "detect_all",
    "detect_one",
    "get_registry",
]
