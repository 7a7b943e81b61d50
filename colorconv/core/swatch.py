"""PNG swatches of converted colors."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from PIL import Image, ImageDraw

from .color import Color

logger = logging.getLogger(__name__)


def render_swatch(colors: Iterable[Color], *, cell_size: int = 32) -> Image.Image:
    """Draw one square cell per color, left to right.

    An empty input renders a single black cell.
    """

    cells = [c.as_tuple() for c in colors] or [(0, 0, 0)]
    size = max(1, int(cell_size))

    img = Image.new("RGB", (size * len(cells), size), color=(0, 0, 0))
    draw = ImageDraw.Draw(img)
    for i, rgb in enumerate(cells):
        x = i * size
        draw.rectangle([x, 0, x + size - 1, size - 1], fill=rgb)
    return img


def save_swatch(colors: Iterable[Color], path: Path, *, cell_size: int = 32) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    img = render_swatch(colors, cell_size=cell_size)
    img.save(path, format="PNG")
    logger.info("Wrote swatch %s (%dx%d)", path, img.width, img.height)
    return path
