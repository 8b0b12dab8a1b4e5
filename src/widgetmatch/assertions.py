"""Turn matcher outcomes into assertion results and failures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from widgetmatch.matchers.base import Description, Matcher


@dataclass
class AssertionResult:
    """Result of evaluating a single matcher against a widget.

    Attributes:
        name: Identifier for the check (e.g. "color:toolbar-background").
        passed: Whether the matcher matched.
        message: Human-readable detail about the result.
        score: 1.0 (pass) or 0.0 (fail).
        weight: Relative importance of this check. Defaults to 1.0.
    """

    name: str
    passed: bool
    message: str
    score: float = 0.0
    weight: float = 1.0


def _failure_text(item: Any, matcher: Matcher, reason: str = "") -> str:
    # describe after matches: the matcher's failure reason is only set by a failed match
    expected = Description()
    matcher.describe(expected)
    mismatch = Description()
    matcher.describe_mismatch(item, mismatch)
    lead = f"{reason}\n" if reason else ""
    return f"{lead}Expected: {expected}\n     but: {mismatch}"


def evaluate(item: Any, matcher: Matcher, name: str, weight: float = 1.0) -> AssertionResult:
    if matcher.matches(item):
        return AssertionResult(
            name=name, passed=True, message=str(matcher), score=1.0, weight=weight
        )
    return AssertionResult(
        name=name,
        passed=False,
        message=_failure_text(item, matcher),
        score=0.0,
        weight=weight,
    )


def assert_that(item: Any, matcher: Matcher, reason: str = "") -> None:
    """Raise AssertionError if ``item`` does not satisfy ``matcher``."""
    if not matcher.matches(item):
        raise AssertionError(_failure_text(item, matcher, reason))
