from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    WithJsonSchema,
    field_validator,
    model_validator,
)

from widgetmatch.colors import parse_color

# Accepted input: a packed ARGB int or a #RRGGBB / #AARRGGBB string
ColorValue = Annotated[
    int,
    WithJsonSchema(
        {
            "anyOf": [
                {"type": "integer", "minimum": 0, "maximum": 0xFFFFFFFF},
                {"type": "string", "pattern": "^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$"},
            ]
        }
    ),
]


class Region(BaseModel):
    model_config = ConfigDict(extra="forbid")
    x: int = Field(0, ge=0)
    y: int = Field(0, ge=0)
    width: int = Field(gt=0)
    height: int = Field(gt=0)

    def as_box(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)


class ColorCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    image: str
    color: ColorValue
    region: Region | None = None
    weight: float = 1.0

    @field_validator("color", mode="before")
    @classmethod
    def normalize_color(cls, v: Any) -> int:
        return parse_color(v)


class CheckConfig(BaseModel):
    checks: list[ColorCheck]

    @field_validator("checks")
    @classmethod
    def checks_must_not_be_empty(cls, v: list[ColorCheck]) -> list[ColorCheck]:
        if not v:
            raise ValueError("checks must not be empty")
        return v

    @model_validator(mode="after")
    def names_must_be_unique(self) -> CheckConfig:
        seen: set[str] = set()
        for check in self.checks:
            if check.name in seen:
                raise ValueError(f"Duplicate check name '{check.name}'")
            seen.add(check.name)
        return self


def load_config(path: Path) -> CheckConfig:
    """Load and validate a check config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    config = CheckConfig(**(raw or {}))

    # Resolve relative image paths relative to config file location
    for check in config.checks:
        image_path = Path(check.image)
        if not image_path.is_absolute():
            check.image = str((config_dir / image_path).resolve())

    return config
