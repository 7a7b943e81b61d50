from __future__ import annotations

from .average import average
from .color import (
    Color,
    ColorConversionFailed,
    ConversionError,
    ConversionResult,
    color_from_array,
    color_from_slice,
    color_from_triple,
)
from .narrowing import try_narrow_u8


__all__ = [
    "Color",
    "ColorConversionFailed",
    "ConversionError",
    "ConversionResult",
    "average",
    "color_from_array",
    "color_from_slice",
    "color_from_triple",
    "try_narrow_u8",
]
