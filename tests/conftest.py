"""Pytest configuration and fixtures."""

import logging
from pathlib import Path

import pytest
from PIL import Image


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up widgetmatch loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("widgetmatch")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture()
def write_png(tmp_path):
    """Helper that writes a solid RGBA PNG (optionally with odd pixels) and returns its path."""

    def _write(
        name: str,
        size: tuple[int, int],
        rgba: tuple[int, int, int, int],
        pixels: dict[tuple[int, int], tuple[int, int, int, int]] | None = None,
    ) -> Path:
        image = Image.new("RGBA", size, rgba)
        for xy, value in (pixels or {}).items():
            image.putpixel(xy, value)
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path)
        return path

    return _write
