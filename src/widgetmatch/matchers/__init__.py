"""Capability-bounded matchers for widget state and rendered color."""

from widgetmatch.matchers.base import BoundedMatcher, Description, Matcher
from widgetmatch.matchers.checked import (
    CheckedMatcher,
    UncheckedMatcher,
    is_checked_text_view,
    is_non_checked_text_view,
)
from widgetmatch.matchers.drawable import ColorMatcher, drawable_of_color

__all__ = [
    "BoundedMatcher",
    "CheckedMatcher",
    "ColorMatcher",
    "Description",
    "Matcher",
    "UncheckedMatcher",
    "drawable_of_color",
    "is_checked_text_view",
    "is_non_checked_text_view",
]
