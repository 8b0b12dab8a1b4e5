"""Tests for the color and checked-state matchers."""

import pytest
from PIL import Image

from widgetmatch.matchers import (
    CheckedMatcher,
    ColorMatcher,
    Description,
    UncheckedMatcher,
    drawable_of_color,
    is_checked_text_view,
    is_non_checked_text_view,
)
from widgetmatch.widgets import BitmapDrawable, CheckedTextView, ColorDrawable, ImageView


class CountingCheckable:
    def __init__(self, checked):
        self.checked = checked
        self.reads = 0

    def is_checked(self):
        self.reads += 1
        return self.checked


class ExplodingDrawable:
    def rasterize(self, width, height):
        raise RuntimeError("surface lost")


def _describe(matcher) -> str:
    description = Description()
    matcher.describe(description)
    return str(description)


# --- ColorMatcher ---


@pytest.mark.parametrize("color", [0xFF000000, 0xFFFFFFFF, 0x80123456, 0x00000000])
def test_color_matches_uniform_drawable(color):
    view = ImageView(ColorDrawable(color), width=6, height=4)
    matcher = drawable_of_color(color)
    assert matcher.matches(view) is True
    assert matcher.failure_reason is None


def test_color_mismatch_records_reason():
    view = ImageView(ColorDrawable(0xFF0000FF), width=6, height=4)
    matcher = ColorMatcher(0xFFFF0000)
    assert matcher.matches(view) is False
    assert matcher.failure_reason
    assert "#FF0000FF" in matcher.failure_reason
    assert _describe(matcher) == "with drawable of color: " + matcher.failure_reason


def test_color_accepts_hex_string():
    view = ImageView(ColorDrawable("#3F51B5"), width=2, height=2)
    matcher = drawable_of_color("#FF3F51B5")
    assert matcher.color == 0xFF3F51B5
    assert matcher.matches(view) is True


def test_color_no_drawable():
    matcher = drawable_of_color(0xFF000000)
    assert matcher.matches(ImageView(None, width=4, height=4)) is False
    assert matcher.failure_reason == "no drawable"
    assert _describe(matcher) == "with drawable of color: no drawable"


def test_color_single_stray_pixel_fails():
    image = Image.new("RGBA", (5, 5), (0, 0, 0, 255))
    image.putpixel((4, 4), (0, 0, 1, 255))
    view = ImageView(BitmapDrawable(image), width=5, height=5)
    matcher = drawable_of_color(0xFF000000)
    assert matcher.matches(view) is False
    assert "position (4,4)" in matcher.failure_reason


def test_color_rasterize_error_is_swallowed():
    view = ImageView(ExplodingDrawable(), width=3, height=3)
    matcher = drawable_of_color(0xFF000000)
    assert matcher.matches(view) is False
    assert "surface lost" in matcher.failure_reason


def test_color_success_clears_previous_reason():
    matcher = drawable_of_color(0xFF00FF00)
    assert matcher.matches(ImageView(None, width=1, height=1)) is False
    assert matcher.failure_reason == "no drawable"

    assert matcher.matches(ImageView(ColorDrawable(0xFF00FF00), width=1, height=1)) is True
    assert matcher.failure_reason is None
    assert _describe(matcher) == "with drawable of color: "


@pytest.mark.parametrize("color", [0xFF000000, 0xFFFF0000])
def test_color_rejects_non_image_widget(color, monkeypatch):
    def _fail(*args, **kwargs):
        raise AssertionError("sampler must not run for non-image widgets")

    monkeypatch.setattr("widgetmatch.matchers.drawable.check_all_pixels_of_color", _fail)
    matcher = drawable_of_color(color)
    assert matcher.matches(CheckedTextView(checked=True)) is False
    assert matcher.matches("not a widget") is False
    assert matcher.matches(None) is False


def test_color_mismatch_description_for_wrong_type():
    matcher = drawable_of_color(0xFF000000)
    description = Description()
    matcher.describe_mismatch(42, description)
    assert str(description) == "is not an ImageWidget: <42>"


def test_color_rejects_invalid_color():
    with pytest.raises(ValueError):
        ColorMatcher("not-a-color")


# --- CheckedMatcher / UncheckedMatcher ---


def test_checked_view_matches_checked_matcher():
    view = CheckedTextView("Wi-Fi", checked=True)
    matcher = is_checked_text_view()
    assert matcher.matches(view) is True
    assert matcher.failure_reason is None


def test_checked_view_fails_unchecked_matcher():
    view = CheckedTextView("Wi-Fi", checked=True)
    matcher = is_non_checked_text_view()
    assert matcher.matches(view) is False
    assert matcher.failure_reason == "checked"
    assert _describe(matcher) == "non checked text view: checked"


def test_unchecked_view_matches_unchecked_matcher():
    view = CheckedTextView("Wi-Fi", checked=False)
    matcher = UncheckedMatcher()
    assert matcher.matches(view) is True
    assert matcher.failure_reason is None


def test_unchecked_view_fails_checked_matcher():
    view = CheckedTextView("Wi-Fi", checked=False)
    matcher = CheckedMatcher()
    assert matcher.matches(view) is False
    assert matcher.failure_reason == "not checked"
    assert _describe(matcher) == "checked text view: not checked"


def test_checked_matcher_follows_toggle():
    view = CheckedTextView(checked=False)
    matcher = is_checked_text_view()
    assert matcher.matches(view) is False
    view.toggle()
    assert matcher.matches(view) is True
    assert matcher.failure_reason is None


def test_checked_state_is_read_once():
    view = CountingCheckable(True)
    is_checked_text_view().matches(view)
    assert view.reads == 1


@pytest.mark.parametrize("factory", [is_checked_text_view, is_non_checked_text_view])
def test_checked_matchers_reject_non_checkable(factory):
    matcher = factory()
    assert matcher.matches(ImageView(ColorDrawable(0xFF000000), width=1, height=1)) is False
    assert matcher.matches(object()) is False
    assert matcher.failure_reason is None


def test_factories_return_fresh_instances():
    first = is_checked_text_view()
    second = is_checked_text_view()
    first.matches(CheckedTextView(checked=False))
    assert first.failure_reason == "not checked"
    assert second.failure_reason is None


class DetachedImageView:
    width = 4
    height = 4

    def get_drawable(self):
        raise RuntimeError("view detached")


class UnsizedImageView:
    width = "wide"
    height = 4

    def get_drawable(self):
        return ColorDrawable(0xFF000000)


class DetachedCheckable:
    def is_checked(self):
        raise RuntimeError("view detached")


def test_color_accessor_error_is_swallowed():
    matcher = drawable_of_color(0xFF000000)
    assert matcher.matches(DetachedImageView()) is False
    assert "view detached" in matcher.failure_reason
    assert _describe(matcher).startswith("with drawable of color: could not read view")


def test_color_bad_dimensions_are_swallowed():
    matcher = drawable_of_color(0xFF000000)
    assert matcher.matches(UnsizedImageView()) is False
    assert matcher.failure_reason.startswith("could not read view")


@pytest.mark.parametrize("factory", [is_checked_text_view, is_non_checked_text_view])
def test_checked_accessor_error_is_swallowed(factory):
    matcher = factory()
    assert matcher.matches(DetachedCheckable()) is False
    assert "view detached" in matcher.failure_reason


def test_mismatch_description_uses_article_for_type():
    description = Description()
    is_checked_text_view().describe_mismatch(42, description)
    assert str(description) == "is not a CheckableTextWidget: <42>"
