"""Demonstration entry point.

Converts sample channel values through every conversion form, prints each
result, then prints the average of a few floats.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import Callable, Optional, Sequence

from .core import Color, ConversionResult, average, color_from_array, color_from_slice, color_from_triple
from .core.config import DemoSettings, load_settings
from .core.swatch import save_swatch

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging for the demo.

    If callers already configured logging handlers, we don't override them.
    """

    if logging.getLogger().handlers:
        return

    level = logging.DEBUG if os.environ.get("COLORCONV_DEBUG") else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="colorconv-demo",
        description="Convert sample RGB values and print the results.",
    )
    parser.add_argument(
        "--color",
        dest="colors",
        metavar="V",
        nargs="+",
        type=int,
        action="append",
        help="extra sample to convert (repeatable; three values for a valid color)",
    )
    parser.add_argument("--values", metavar="X", nargs="+", type=float, help="values to average")
    parser.add_argument("--swatch", metavar="PATH", type=Path, help="write a PNG swatch of converted colors")
    parser.add_argument("--config", metavar="PATH", type=Path, help="JSON config file")
    return parser.parse_args(argv)


def convert_sample(sample: Sequence[int], emit: Callable[[str], None] = print) -> list[Color]:
    """Run *sample* through each applicable conversion form and emit the results.

    Returns the colors from successful conversions.
    """

    results: list[tuple[str, ConversionResult]] = []

    # Tuple and array forms have a fixed arity; only the slice forms see other lengths.
    if len(sample) == 3:
        results.append(("tuple", color_from_triple(tuple(sample))))
        results.append(("array", color_from_array(list(sample))))
    results.append(("slice", color_from_slice(list(sample))))
    results.append(("try_from", Color.try_from(list(sample))))

    converted: list[Color] = []
    for label, result in results:
        emit(f"{label:<8} {list(sample)} -> {result!r}")
        if result.ok:
            converted.append(result.unwrap())
    return converted


def run_demo(
    settings: DemoSettings,
    *,
    swatch: Optional[Path] = None,
    emit: Callable[[str], None] = print,
) -> list[Color]:
    converted: list[Color] = []
    for sample in settings.samples:
        converted.extend(convert_sample(sample, emit))

    emit(f"average  {list(settings.values)} -> {average(settings.values)}")

    if swatch is not None:
        # One cell per distinct color, in first-seen order.
        unique = list(dict.fromkeys(converted))
        save_swatch(unique, swatch, cell_size=settings.swatch_cell_size)

    return converted


def main(argv: Optional[Sequence[str]] = None) -> None:
    try:
        configure_logging()
        args = _parse_args(argv)

        settings = load_settings(args.config)
        if args.colors:
            settings = replace(settings, samples=settings.samples + tuple(tuple(c) for c in args.colors))
        if args.values:
            settings = replace(settings, values=tuple(args.values))

        logger.debug("Demo settings: %s", settings)
        run_demo(settings, swatch=args.swatch)

    except KeyboardInterrupt:
        logger.info("Interrupted")
        sys.exit(0)
    except Exception as exc:
        logger.exception("Unhandled error: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
