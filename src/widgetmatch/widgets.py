"""Widget capabilities inspected by the matchers, plus reference widgets."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

import numpy as np
from PIL import Image

from widgetmatch.colors import parse_color, to_rgba


@runtime_checkable
class Drawable(Protocol):
    def rasterize(self, width: int, height: int) -> np.ndarray:
        """Return an RGBA ``uint8`` buffer of shape (height, width, 4)."""
        ...


@runtime_checkable
class ImageWidget(Protocol):
    width: int
    height: int

    def get_drawable(self) -> Drawable | None: ...


@runtime_checkable
class CheckableTextWidget(Protocol):
    def is_checked(self) -> bool: ...


class ColorDrawable:
    """Flat fill of a single color."""

    def __init__(self, color: int | str):
        self.color = parse_color(color)

    def rasterize(self, width: int, height: int) -> np.ndarray:
        buffer = np.empty((height, width, 4), dtype=np.uint8)
        buffer[:, :] = to_rgba(self.color)
        return buffer

    def __repr__(self) -> str:
        return f"ColorDrawable(color={self.color:#010x})"


class BitmapDrawable:
    """Drawable backed by a Pillow image, scaled to the requested bounds."""

    def __init__(self, image: Image.Image):
        self.image = image

    def rasterize(self, width: int, height: int) -> np.ndarray:
        image = self.image.convert("RGBA")
        if image.size != (width, height):
            image = image.resize((width, height), Image.Resampling.NEAREST)
        return np.asarray(image, dtype=np.uint8)

    def __repr__(self) -> str:
        return f"BitmapDrawable(size={self.image.size}, mode={self.image.mode!r})"


@dataclass
class ImageView:
    drawable: Drawable | None = None
    width: int = 0
    height: int = 0

    def get_drawable(self) -> Drawable | None:
        return self.drawable

    @classmethod
    def from_file(
        cls, path: str | Path, region: tuple[int, int, int, int] | None = None
    ) -> ImageView:
        """Load a screenshot as an image view sized to the image (or region).

        ``region`` is ``(x, y, width, height)`` in image pixels and must lie
        inside the image.
        """
        with Image.open(path) as source:
            image = source.convert("RGBA")
        if region is not None:
            x, y, w, h = region
            if x + w > image.width or y + h > image.height:
                raise ValueError(
                    f"Region {region} exceeds image bounds {image.width}x{image.height}"
                )
            image = image.crop((x, y, x + w, y + h))
        return cls(drawable=BitmapDrawable(image), width=image.width, height=image.height)


@dataclass
class CheckedTextView:
    text: str = ""
    checked: bool = False

    def is_checked(self) -> bool:
        return self.checked

    def toggle(self) -> None:
        self.checked = not self.checked
