"""Matcher protocol and the description sink matchers render into."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Description:
    """Accumulates the text a matcher renders about itself."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append_text(self, text: str | None) -> Description:
        if text:
            self._parts.append(text)
        return self

    def append_value(self, value: Any) -> Description:
        self._parts.append(f"<{value!r}>")
        return self

    def __str__(self) -> str:
        return "".join(self._parts)


class Matcher(ABC):
    @abstractmethod
    def matches(self, item: Any) -> bool:
        """Return True if ``item`` satisfies this matcher."""
        ...

    @abstractmethod
    def describe(self, description: Description) -> None:
        """Render what this matcher expects into ``description``."""
        ...

    def describe_mismatch(self, item: Any, description: Description) -> None:
        description.append_text("was ").append_value(item)

    def __str__(self) -> str:
        description = Description()
        self.describe(description)
        return str(description)


class BoundedMatcher(Matcher):
    """Matcher that only applies to items providing ``expected_type``.

    Items lacking the capability fail without ``matches_safely`` being
    called.
    """

    expected_type: type

    def matches(self, item: Any) -> bool:
        if not isinstance(item, self.expected_type):
            return False
        return self.matches_safely(item)

    @abstractmethod
    def matches_safely(self, item: Any) -> bool: ...

    def describe_mismatch(self, item: Any, description: Description) -> None:
        if not isinstance(item, self.expected_type):
            type_name = self.expected_type.__name__
            article = "an" if type_name[:1].lower() in "aeiou" else "a"
            description.append_text(f"is not {article} {type_name}: ")
            description.append_value(item)
            return
        super().describe_mismatch(item, description)
