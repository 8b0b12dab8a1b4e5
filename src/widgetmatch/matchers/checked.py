from __future__ import annotations

from dataclasses import dataclass, field

from widgetmatch.matchers.base import BoundedMatcher, Description
from widgetmatch.widgets import CheckableTextWidget


@dataclass
class CheckedMatcher(BoundedMatcher):
    """Matches checkable text widgets that are currently checked."""

    failure_reason: str | None = field(default=None, init=False, compare=False)

    expected_type = CheckableTextWidget
    expect_checked = True
    label = "checked text view: "
    mismatch_reason = "not checked"

    def describe(self, description: Description) -> None:
        description.append_text(self.label)
        description.append_text(self.failure_reason)

    def matches_safely(self, view: CheckableTextWidget) -> bool:
        try:
            checked = bool(view.is_checked())
        except Exception as e:
            self.failure_reason = f"could not read checked state: {e}"
            return False

        if checked == self.expect_checked:
            self.failure_reason = None
            return True

        self.failure_reason = self.mismatch_reason
        return False


@dataclass
class UncheckedMatcher(CheckedMatcher):
    """Matches checkable text widgets that are currently unchecked."""

    expect_checked = False
    label = "non checked text view: "
    mismatch_reason = "checked"


def is_checked_text_view() -> CheckedMatcher:
    return CheckedMatcher()


def is_non_checked_text_view() -> UncheckedMatcher:
    return UncheckedMatcher()
