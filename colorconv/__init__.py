"""colorconv: fallible RGB conversions and a widening-cast average."""

from __future__ import annotations

from .core import (
    Color,
    ColorConversionFailed,
    ConversionError,
    ConversionResult,
    average,
    color_from_array,
    color_from_slice,
    color_from_triple,
    try_narrow_u8,
)

__version__ = "0.1.0"

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
