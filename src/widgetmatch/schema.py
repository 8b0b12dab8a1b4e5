"""Generate JSON Schema for the check YAML format."""

from __future__ import annotations

import json
from pathlib import Path

from widgetmatch.config import CheckConfig


def generate_json_schema() -> dict:
    schema = CheckConfig.model_json_schema()
    schema["title"] = "widgetmatch checks"
    return schema


def write_json_schema(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(generate_json_schema(), indent=2) + "\n")
