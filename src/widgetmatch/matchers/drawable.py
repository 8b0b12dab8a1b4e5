from __future__ import annotations

import logging
from dataclasses import dataclass, field

from widgetmatch.colors import parse_color
from widgetmatch.matchers.base import BoundedMatcher, Description
from widgetmatch.pixels import check_all_pixels_of_color
from widgetmatch.widgets import ImageWidget


@dataclass
class ColorMatcher(BoundedMatcher):
    """Matches image widgets whose drawable is flat-filled with ``color``.

    Alpha is significant and comparison is exact.
    """

    color: int | str
    logger: logging.Logger | None = field(default=None, repr=False, compare=False)
    failure_reason: str | None = field(default=None, init=False, compare=False)

    expected_type = ImageWidget

    def __post_init__(self) -> None:
        self.color = parse_color(self.color)

    def describe(self, description: Description) -> None:
        description.append_text("with drawable of color: ")
        description.append_text(self.failure_reason)

    def matches_safely(self, view: ImageWidget) -> bool:
        try:
            drawable = view.get_drawable()
            width, height = int(view.width), int(view.height)
        except Exception as e:
            self.failure_reason = f"could not read view: {e}"
            return False

        if drawable is None:
            self.failure_reason = "no drawable"
            return False

        result = check_all_pixels_of_color(
            drawable, width, height, self.color, logger=self.logger
        )
        if not result.passed:
            self.failure_reason = result.message
            return False

        self.failure_reason = None
        return True


def drawable_of_color(color: int | str) -> ColorMatcher:
    return ColorMatcher(color)
