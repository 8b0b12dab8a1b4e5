from __future__ import annotations

from pathlib import Path

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from widgetmatch.assertions import AssertionResult


def write_junit(
    run_dir: Path, results: list[AssertionResult], suite_name: str = "widgetmatch"
) -> Path:
    """Write junit.xml with one test case per result, return path."""
    xml = JUnitXml()
    suite = TestSuite(suite_name)

    for result in results:
        case = TestCase(result.name)
        case.classname = suite_name
        if not result.passed:
            case.result = Failure(result.message)
        suite.add_testcase(case)

    if results:
        total_weight = sum(r.weight for r in results)
        weighted = sum(r.score * r.weight for r in results) / total_weight if total_weight else 0.0
        suite.add_property("weighted_score", f"{weighted:.4f}")

    # Use append (not +=) to preserve properties
    xml.append(suite)

    junit_path = run_dir / "junit.xml"
    xml.write(str(junit_path), pretty=True)
    return junit_path


def summarize(junit_path: Path) -> tuple[int, int]:
    """Return (total, failures) across every suite in junit_path."""
    xml = JUnitXml.fromfile(str(junit_path))
    total = 0
    failures = 0
    for suite in xml:
        total += suite.tests
        failures += suite.failures
    return total, failures
