"""Default demo settings."""

from __future__ import annotations

DEFAULTS: dict = {
    # RGB samples converted through every conversion form.
    "samples": [[183, 65, 14]],
    # Values fed to average().
    "values": [3.5, 0.3, 13.0, 11.7],
    # Pixel edge length of one swatch cell.
    "swatch_cell_size": 32,
}
