"""Fallible integer narrowing.

Channel values arrive as whatever integer type the caller happens to hold
(plain ints, bools, NumPy scalars, ...). Anything implementing ``__index__``
can be narrowed; anything else has no narrowing capability at all.
"""

from __future__ import annotations

import operator
from typing import Optional, Protocol


U8_MIN = 0
U8_MAX = 255


class SupportsIndex(Protocol):
    def __index__(self) -> int: ...


def try_narrow_u8(value: SupportsIndex) -> Optional[int]:
    """Narrow *value* to the unsigned 8-bit range.

    Returns the narrowed int, or None when the value falls outside 0..255.
    Raises TypeError for non-integral input (floats, strings, None).
    """

    try:
        v = int(operator.index(value))
    except TypeError:
        raise TypeError(f"cannot narrow {type(value).__name__!s} to u8: not an integer") from None

    if v < U8_MIN or v > U8_MAX:
        return None
    return v


def narrow_all_u8(values) -> Optional[tuple[int, ...]]:
    out: list[int] = []
    for value in values:
        v = try_narrow_u8(value)
        if v is None:
            return None
        out.append(v)
    return tuple(out)
