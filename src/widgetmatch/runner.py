from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from widgetmatch.assertions import AssertionResult, evaluate
from widgetmatch.colors import format_color
from widgetmatch.config import CheckConfig, ColorCheck
from widgetmatch.matchers import ColorMatcher
from widgetmatch.verbose import close_logger, setup_logger
from widgetmatch.widgets import ImageView


def run_color_check(check: ColorCheck, logger: logging.Logger) -> AssertionResult:
    """Evaluate a single color check against its screenshot."""
    name = f"color:{check.name}"
    region = check.region.as_box() if check.region else None
    logger.info(f"Checking {check.image} for {format_color(check.color)} (region={region})")

    try:
        view = ImageView.from_file(check.image, region=region)
    except Exception as e:
        logger.warning(f"Could not load {check.image}: {e}")
        return AssertionResult(
            name=name,
            passed=False,
            message=f"could not load {check.image}: {e}",
            score=0.0,
            weight=check.weight,
        )

    result = evaluate(view, ColorMatcher(check.color, logger=logger), name, weight=check.weight)
    logger.info(f"{name} passed={result.passed}")
    return result


class Runner:
    """Runs every check in a config and records the results."""

    def __init__(
        self,
        config: CheckConfig,
        output_dir: Path,
        check_filter: str | None = None,
        verbose: bool = False,
    ):
        self.config = config
        self.output_dir = output_dir
        self.check_filter = check_filter
        self.verbose = verbose
        self.results: list[AssertionResult] = []

    def execute(self) -> Path:
        """Run the selected checks. Returns the run directory."""
        checks = self.config.checks
        if self.check_filter:
            checks = [c for c in checks if c.name == self.check_filter]
            if not checks:
                raise ValueError(f"No check named '{self.check_filter}'")

        run_id = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H%M%S")
        run_dir = self.output_dir / run_id
        run_dir.mkdir(parents=True, exist_ok=True)

        logger = setup_logger(
            run_dir / "debug.log", verbose=self.verbose, logger_name="widgetmatch_main"
        )
        try:
            logger.debug(f"Starting check run with {len(checks)} check(s)")
            self.results = [run_color_check(check, logger) for check in checks]
            self._write_results(run_dir, checks)
            failed = sum(1 for r in self.results if not r.passed)
            logger.debug(f"Run finished: {len(self.results) - failed} passed, {failed} failed")
        finally:
            close_logger(logger)

        return run_dir

    def _write_results(self, run_dir: Path, checks: list[ColorCheck]) -> None:
        """Write junit.xml and meta.yaml to the run directory."""
        from widgetmatch.reporting.junit import write_junit

        write_junit(run_dir, self.results)

        try:
            import importlib.metadata

            version = importlib.metadata.version("widgetmatch")
        except importlib.metadata.PackageNotFoundError:
            version = "unknown"

        meta: dict[str, Any] = {
            "run_id": run_dir.name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "checks": [c.name for c in checks],
            "passed": sum(1 for r in self.results if r.passed),
            "failed": sum(1 for r in self.results if not r.passed),
            "widgetmatch_version": version,
        }
        (run_dir / "meta.yaml").write_text(yaml.dump(meta, default_flow_style=False))
