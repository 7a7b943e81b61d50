"""Demo configuration.

Defaults and best-effort JSON loading for the demonstration entry point.
"""

from __future__ import annotations

from .defaults import DEFAULTS
from .settings import DemoSettings, load_settings


__all__ = [
    "DEFAULTS",
    "DemoSettings",
    "load_settings",
]
