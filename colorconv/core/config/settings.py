from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .defaults import DEFAULTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DemoSettings:
    samples: tuple[tuple[int, ...], ...]
    values: tuple[float, ...]
    swatch_cell_size: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DemoSettings":
        return cls(
            samples=tuple(tuple(s) for s in data["samples"]),
            values=tuple(float(v) for v in data["values"]),
            swatch_cell_size=int(data["swatch_cell_size"]),
        )


def _is_int(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _coerce(key: str, value: Any) -> Any:
    """Return *value* if it has the right shape for *key*, else the default."""

    default = DEFAULTS[key]

    if key == "samples":
        # Sample lengths are not checked here; a wrong length is a demo case.
        if isinstance(value, list) and all(isinstance(s, list) and all(_is_int(v) for v in s) for s in value):
            return value
    elif key == "values":
        if isinstance(value, list) and all(_is_int(v) or isinstance(v, float) for v in value):
            return value
    elif key == "swatch_cell_size":
        if _is_int(value) and value > 0:
            return value

    logger.warning("Ignoring invalid config value for %s: %r", key, value)
    return default


def load_settings(path: Optional[Path] = None) -> DemoSettings:
    """Load demo settings merged over DEFAULTS.

    Without a path, or when the file is missing, the defaults are used as-is.
    An unreadable or malformed file is logged and also yields the defaults.
    Unknown keys are ignored.
    """

    merged: dict[str, Any] = {k: v for k, v in DEFAULTS.items()}
    if path is None:
        return DemoSettings.from_dict(merged)

    config_file = Path(path)
    if not config_file.exists():
        return DemoSettings.from_dict(merged)

    try:
        loaded = json.loads(config_file.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Failed to read config %s: %s", config_file, exc)
        return DemoSettings.from_dict(merged)

    if not isinstance(loaded, dict):
        logger.warning("Config %s is not a JSON object; using defaults", config_file)
        return DemoSettings.from_dict(merged)

    for key, value in loaded.items():
        if key not in DEFAULTS:
            logger.debug("Ignoring unknown config key: %s", key)
            continue
        merged[key] = _coerce(key, value)

    return DemoSettings.from_dict(merged)
