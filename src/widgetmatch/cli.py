from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="widgetmatch", help="Check rendered widget screenshots")


def _parse_region(value: str | None) -> tuple[int, int, int, int] | None:
    if value is None:
        return None
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 4:
        raise typer.BadParameter("region must be x,y,width,height")
    try:
        x, y, w, h = (int(p) for p in parts)
    except ValueError:
        raise typer.BadParameter("region values must be integers")
    if x < 0 or y < 0 or w <= 0 or h <= 0:
        raise typer.BadParameter("region must have non-negative origin and positive size")
    return (x, y, w, h)


@app.command()
def run(
    config: str = typer.Argument(help="Path to checks YAML config"),
    check: str | None = typer.Option(None, help="Run only this check"),
    output_dir: str = typer.Option("runs", help="Output directory for run results"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Run every check in a config file."""
    from pydantic import ValidationError

    from widgetmatch.config import load_config
    from widgetmatch.reporting.junit import summarize
    from widgetmatch.runner import Runner

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        check_config = load_config(config_path)
    except ValidationError as e:
        typer.echo(f"Error: invalid config {config}:\n{e}", err=True)
        raise typer.Exit(1)

    runner = Runner(
        config=check_config,
        output_dir=Path(output_dir),
        check_filter=check,
        verbose=verbose,
    )

    try:
        run_dir = runner.execute()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for result in runner.results:
        status = "PASS" if result.passed else "FAIL"
        typer.echo(f"{status} {result.name}")
        if not result.passed:
            typer.echo(f"  {result.message}")

    total, failures = summarize(run_dir / "junit.xml")
    typer.echo(f"Run complete: {run_dir} ({total - failures}/{total} passed)")
    if not verbose:
        typer.echo(f"Debug log: {run_dir / 'debug.log'}")

    if failures:
        raise typer.Exit(1)


@app.command()
def color(
    image: str = typer.Argument(help="Path to a screenshot"),
    expected: str = typer.Option(..., "--color", help="Expected color, #RRGGBB or #AARRGGBB"),
    region: str | None = typer.Option(None, help="Crop region as x,y,width,height"),
):
    """Check that an image (or a region of it) is a single color."""
    from widgetmatch.assertions import evaluate
    from widgetmatch.colors import parse_color
    from widgetmatch.matchers import drawable_of_color
    from widgetmatch.widgets import ImageView

    try:
        expected_color = parse_color(expected)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--color")
    box = _parse_region(region)

    try:
        view = ImageView.from_file(image, region=box)
    except (OSError, ValueError) as e:
        typer.echo(f"Error: could not load {image}: {e}", err=True)
        raise typer.Exit(1)

    result = evaluate(view, drawable_of_color(expected_color), f"color:{image}")
    if result.passed:
        typer.echo(f"PASS {result.name}")
        return
    typer.echo(f"FAIL {result.name}")
    typer.echo(result.message)
    raise typer.Exit(1)


@app.command()
def init(
    dir: str = typer.Option(
        "widgetmatch", "--dir", help="Directory to initialize the checks project in"
    ),
):
    """Initialize a new checks project with an example config."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    example = project_dir / "checks.yaml"
    if example.exists():
        typer.echo(f"checks.yaml already exists in {dir}, skipping.")
        return

    example.write_text("""\
checks:
  - name: toolbar-background
    image: screens/toolbar.png
    color: "#FF3F51B5"
    region: {x: 0, y: 0, width: 320, height: 56}
""")
    (project_dir / "screens").mkdir(exist_ok=True)

    typer.echo(f"Initialized checks project in {dir}:")
    typer.echo("  checks.yaml  - example check config")
    typer.echo("  screens/     - put screenshots here")


@app.command()
def schema(
    out: str = typer.Option(
        "schemas/widgetmatch.schema.json", help="Output path for JSON Schema"
    ),
):
    """Write the JSON Schema for the checks YAML format."""
    from widgetmatch.schema import write_json_schema

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")
