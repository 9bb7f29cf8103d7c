import dataclasses
from pathlib import Path

import typer

from .categorizer import classify as classify_title
from .config import check_env as print_env, load_settings
from .errors import LabelerError
from .main import run as run_action, setup_logging
from .render import render_failure

# ✅ create a Typer application
app = typer.Typer(help="Label issues and pull requests from their title prefix")


# ✅ register "run" as a subcommand
@app.command("run")
def run(
    event_path: Path = typer.Option(None, "--event-path", "-e", help="Event payload JSON (default: $GITHUB_EVENT_PATH)"),
    repo: str = typer.Option(None, "--repo", "-r", help="Repository in owner/name format (default: $GITHUB_REPOSITORY)"),
    default_label: str = typer.Option(None, help="Label to apply when the prefix matches no keyword"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Classify only, do not call GitHub"),
):
    """Label the issue or pull request from the current event."""
    try:
        settings = load_settings()
    except LabelerError as e:
        typer.echo(render_failure(str(e)))
        raise typer.Exit(code=1)

    overrides = {}
    if event_path:
        overrides["event_path"] = str(event_path)
    if repo:
        overrides["repository"] = repo
    if default_label:
        overrides["default_label"] = default_label
    if dry_run:
        overrides["dry_run"] = True
    settings = dataclasses.replace(settings, **overrides)

    logger = setup_logging(settings.log_level)
    code = run_action(settings, logger)
    if code:
        raise typer.Exit(code=code)


@app.command("classify")
def classify(
    title: str = typer.Argument(..., help="Issue or pull request title"),
    default_label: str = typer.Option(None, help="Label to apply when the prefix matches no keyword"),
):
    """Show which label a title would get (no GitHub calls)."""
    result = classify_title(title, default_label=default_label)
    typer.echo(f"outcome: {result.outcome.value}")
    if result.prefix is not None:
        typer.echo(f"prefix: {result.prefix}")
    if result.label:
        typer.echo(f"label: {result.label}")


@app.command("check-env")
def check_env():
    """Print the configuration picked up from the environment."""
    print_env()


if __name__ == "__main__":
    app()
