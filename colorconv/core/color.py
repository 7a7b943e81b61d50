"""RGB color record and its fallible conversions.

Three input shapes are supported:
- a 3-tuple of signed 16-bit ints (`color_from_triple`)
- a fixed 3-element sequence of any integer type (`color_from_array`)
- a sequence of any length (`color_from_slice`), which is length-checked first

Conversions never raise for bad values: they return a `ConversionResult`
holding either the color or a `ConversionError`.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterator, Optional, cast

from .narrowing import U8_MAX, U8_MIN, narrow_all_u8


class ConversionError(enum.Enum):
    BAD_LENGTH = "BadLength"
    INT_CONVERSION = "IntConversion"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value


class ColorConversionFailed(Exception):
    """Raised by `ConversionResult.unwrap()` on a failed conversion."""

    def __init__(self, error: ConversionError) -> None:
        super().__init__(f"color conversion failed: {error}")
        self.error = error


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError(f"{name} must be an int, got {type(v).__name__}")
            if v < U8_MIN or v > U8_MAX:
                raise ValueError(f"{name} out of range 0..255: {v}")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def __iter__(self) -> Iterator[int]:
        yield self.red
        yield self.green
        yield self.blue

    @classmethod
    def try_from(cls, value: object) -> "ConversionResult":
        """Convert a tuple or any other sequence into a color.

        3-tuples use the tuple conversion; everything else (including tuples
        of another arity) is treated as a variable-length sequence, so a
        wrong length comes back as BadLength instead of raising.
        """

        if isinstance(value, tuple) and len(value) == 3:
            return color_from_triple(value)
        return color_from_slice(value)  # type: ignore[arg-type]


@dataclass(frozen=True)
class ConversionResult:
    """Either a converted `Color` or the `ConversionError` explaining why not."""

    color: Optional[Color] = None
    error: Optional[ConversionError] = None

    def __post_init__(self) -> None:
        if (self.color is None) == (self.error is None):
            raise ValueError("ConversionResult needs exactly one of color or error")

    @classmethod
    def success(cls, color: Color) -> "ConversionResult":
        return cls(color=color)

    @classmethod
    def failure(cls, error: ConversionError) -> "ConversionResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Color:
        if self.color is None:
            raise ColorConversionFailed(cast(ConversionError, self.error))
        return self.color

    def __repr__(self) -> str:
        if self.color is not None:
            return f"Ok({self.color!r})"
        return f"Err({self.error!r})"


def _from_three(values) -> ConversionResult:
    narrowed = narrow_all_u8(values)
    if narrowed is None:
        return ConversionResult.failure(ConversionError.INT_CONVERSION)
    red, green, blue = narrowed
    return ConversionResult.success(Color(red, green, blue))


def color_from_triple(triple: tuple[int, int, int]) -> ConversionResult:
    """Convert an (i16, i16, i16) tuple. Fails with IntConversion only."""

    if not isinstance(triple, tuple) or len(triple) != 3:
        raise TypeError(f"expected a 3-tuple, got {triple!r}")
    return _from_three(triple)


def color_from_array(values: Sequence) -> ConversionResult:
    """Convert a fixed 3-element sequence. Fails with IntConversion only."""

    if len(values) != 3:
        raise TypeError(f"expected exactly 3 elements, got {len(values)}")
    return _from_three(values)


def color_from_slice(values: Sequence) -> ConversionResult:
    """Convert a sequence of any length. BadLength is reported before IntConversion."""

    if len(values) != 3:
        return ConversionResult.failure(ConversionError.BAD_LENGTH)
    return _from_three(values)
