"""Pixel sampling for drawables: rasterize and compare against a color."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from widgetmatch.colors import format_color, from_rgba, to_rgba
from widgetmatch.widgets import Drawable


@dataclass
class PixelCheckResult:
    """Outcome of sampling every pixel of a drawable.

    Attributes:
        passed: True when every pixel matched the expected color.
        message: Human-readable detail, used verbatim as a matcher's
            failure reason.
        position: ``(x, y)`` of the first mismatching pixel, if any.
        found: ARGB value of that pixel, if any.
    """

    passed: bool
    message: str
    position: tuple[int, int] | None = None
    found: int | None = None


def rasterize(drawable: Drawable, width: int, height: int) -> np.ndarray:
    buffer = np.asarray(drawable.rasterize(width, height))
    if buffer.shape != (height, width, 4):
        raise ValueError(
            f"drawable rasterized to shape {buffer.shape}, expected {(height, width, 4)}"
        )
    if buffer.dtype != np.uint8:
        raise ValueError(f"drawable rasterized to dtype {buffer.dtype}, expected uint8")
    return buffer


def check_all_pixels_of_color(
    drawable: Drawable,
    width: int,
    height: int,
    color: int,
    *,
    prefix: str = "",
    allowed_component_variance: int = 0,
    logger: logging.Logger | None = None,
) -> PixelCheckResult:
    """Check that ``drawable`` rendered at ``width`` x ``height`` is uniformly ``color``.

    Never raises: rasterization errors come back as a failed result.
    """
    lead = f"{prefix}: " if prefix else ""

    if width <= 0 or height <= 0:
        return PixelCheckResult(
            passed=False, message=f"{lead}cannot sample drawable at {width}x{height}"
        )

    try:
        buffer = rasterize(drawable, width, height)
    except Exception as e:
        if logger is not None:
            logger.warning(f"Rasterizing {drawable!r} failed: {e}")
        return PixelCheckResult(
            passed=False, message=f"{lead}could not rasterize drawable: {e}"
        )

    expected = np.array(to_rgba(color), dtype=np.int16)
    delta = np.abs(buffer.astype(np.int16) - expected)
    bad = np.argwhere((delta > allowed_component_variance).any(axis=-1))

    if bad.size == 0:
        if logger is not None:
            logger.debug(f"All {width}x{height} pixels match {format_color(color)}")
        return PixelCheckResult(
            passed=True,
            message=f"all {width} x {height} pixels are {format_color(color)}",
        )

    # argwhere is row-major, so the first entry is the first pixel scanned
    row, column = (int(v) for v in bad[0])
    found = from_rgba(*(int(c) for c in buffer[row, column]))
    message = (
        f"{lead}expected all drawable colors to be [{format_color(color)}] "
        f"but at position ({column},{row}) out of ({width},{height}) "
        f"found [{format_color(found)}]"
    )
    if logger is not None:
        logger.debug(f"{len(bad)} of {width * height} pixels differ: {message}")
    return PixelCheckResult(
        passed=False, message=message, position=(column, row), found=found
    )
