"""Command line interface for postlint.

Provides two commands:
- `postlint check PATH`: validate posts and the author partial below PATH
- `postlint accessors PARTIAL`: list the author accessors a partial references

Exit codes of `check`: 0 when clean, 1 when errors were found (or warnings
under --strict), 2 when the run itself could not be performed.
"""

import json
import logging
from pathlib import Path

import typer

from postlint.author_partial import AuthorPartial
from postlint.content_reader import ContentReader
from postlint.errors import PostlintError
from postlint.report_context import ValidationContext
from postlint.validator import ContentValidator, ValidatorConfig

app = typer.Typer(
    name="postlint",
    help="Check blog post artifacts and the author partial for content integrity problems",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase log output (-v for info, -vv for debug)",
    ),
) -> None:
    """Configure logging for every command."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("postlint").setLevel(level)


@app.command()
def check(
    path: Path = typer.Argument(..., help="Content directory or single artifact"),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML file with validator settings",
    ),
    strict: bool = typer.Option(False, "--strict", help="Fail on warnings too"),
    format_output: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output format: text or json",
    ),
) -> None:
    """Validate every post artifact and author partial below PATH."""
    if format_output not in ("text", "json"):
        typer.echo(f"Error: unknown format {format_output!r}, use text or json", err=True)
        raise typer.Exit(2)

    try:
        config = ValidatorConfig.from_file(config_path) if config_path else ValidatorConfig()
        validator = ContentValidator(config)
        with ValidationContext.track_findings() as tracker:
            report = validator.validate_tree(path, exclude=[config_path] if config_path else None)
    except PostlintError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    if format_output == "json":
        output = {
            "posts_checked": report.posts_checked,
            "partials_checked": report.partials_checked,
            "errors": len(report.errors),
            "warnings": len(report.warnings),
            "findings": tracker.to_dict(),
        }
        typer.echo(json.dumps(output, indent=2, default=str))
    else:
        for finding in report.findings:
            typer.echo(str(finding))
        typer.echo(
            f"{report.posts_checked} post(s), {report.partials_checked} partial(s) checked: "
            f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)"
        )

    if not report.is_clean(strict=strict):
        raise typer.Exit(1)


@app.command()
def accessors(
    partial_path: Path = typer.Argument(..., help="Author partial template"),
) -> None:
    """List the author accessor references of a partial with their lines."""
    try:
        text = ContentReader.read_text(partial_path)
    except PostlintError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    partial = AuthorPartial.from_text(text, source=partial_path)
    for reference in partial.references:
        typer.echo(f"{reference.line}:{reference.column} @author.{reference.name}")
