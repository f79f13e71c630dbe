"""Data models for keyboard lighting effects."""

from .color import Color
from .config import AppConfig
from .document import EffectDocument
from .effect import FPS_RANGE, Effect
from .matrix import EffectMatrix

__all__ = [
    "AppConfig",
    # Models
    "Color",
    "Effect",
    "EffectDocument",
    "EffectMatrix",
    "FPS_RANGE",
]
