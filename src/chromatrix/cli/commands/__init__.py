"""CLI commands for chromatrix."""

from .config import config
from .devices import devices_group
from .generate import generate_group
from .inspect import inspect_effect
from .keyboards import keyboards

__all__ = ["config", "devices_group", "generate_group", "inspect_effect", "keyboards"]
