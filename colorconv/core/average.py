from __future__ import annotations

import logging
import math
from collections.abc import Sequence

logger = logging.getLogger(__name__)


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of *values*.

    The element count is cast to float before dividing. Empty input has no
    mean and yields NaN.
    """

    if len(values) == 0:
        logger.debug("average() called with no values; returning NaN")
        return math.nan

    total = sum(float(v) for v in values)
    count = float(len(values))
    return total / count
