"""Packed ARGB color helpers."""

from __future__ import annotations

import re

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def argb(a: int, r: int, g: int, b: int) -> int:
    for component in (a, r, g, b):
        if not 0 <= component <= 0xFF:
            raise ValueError(f"Color component out of range: {component}")
    return (a << 24) | (r << 16) | (g << 8) | b


def from_rgba(r: int, g: int, b: int, a: int = 0xFF) -> int:
    return argb(a, r, g, b)


def to_rgba(color: int) -> tuple[int, int, int, int]:
    """Unpack an ARGB int into an (r, g, b, a) tuple."""
    return (
        (color >> 16) & 0xFF,
        (color >> 8) & 0xFF,
        color & 0xFF,
        (color >> 24) & 0xFF,
    )


def format_color(color: int) -> str:
    return f"#{color & 0xFFFFFFFF:08X}"


def parse_color(value: int | str) -> int:
    """Normalize an int or hex string to a packed ARGB int.

    ``#RRGGBB`` is treated as fully opaque.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid color: {value!r}")
    if isinstance(value, int):
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"Color out of range: {value:#x}")
        return value
    if isinstance(value, str):
        match = _HEX_RE.match(value.strip())
        if match is None:
            raise ValueError(f"Invalid color string: {value!r}")
        digits = match.group(1)
        if len(digits) == 6:
            digits = "FF" + digits
        return int(digits, 16)
    raise ValueError(f"Invalid color: {value!r}")
