"""linkcheck CLI — entry-point for checking link lists.

Usage:
    python cli/main.py --help

Commands:
    check       → classify every link in a file as valid or invalid
    variations  → show the candidate URLs tried for one link
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from linkcheck.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from linkcheck.config import settings
from linkcheck.links import read_links, write_report
from linkcheck.validator import build_url_variations, check_urls

app = typer.Typer(
    name="linkcheck",
    help="Check which links in a list are reachable and where they resolve.",
    no_args_is_help=True,
)


@app.command("check")
def check(
    input_path: Optional[Path] = typer.Option(
        None, "--input", "-i", help="Newline-separated link list (default: settings.input_path)."
    ),
    output_path: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Report destination (default: settings.output_path)."
    ),
    concurrency: Optional[int] = typer.Option(
        None, "--concurrency", "-c", help="Maximum links checked at once."
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", "-t", help="Per-request timeout in seconds."
    ),
) -> None:
    """Check every link in the input file and write the valid/invalid report."""
    if concurrency is not None:
        settings.max_concurrency = concurrency
    if timeout is not None:
        settings.request_timeout = timeout
    try:
        settings.validate()
    except ValueError as exc:
        typer.echo(f"[check] Invalid configuration: {exc}", err=True)
        raise typer.Exit(1)

    source = input_path or settings.input_path
    destination = output_path or settings.output_path

    try:
        urls = read_links(source)
    except OSError as exc:
        typer.echo(f"[check] Cannot read {str(source)!r}: {exc}", err=True)
        raise typer.Exit(1)

    report = check_urls(urls)
    text = report.render()

    try:
        write_report(destination, text)
    except OSError as exc:
        typer.echo(f"[check] Cannot write {str(destination)!r}: {exc}", err=True)
        raise typer.Exit(1)

    typer.echo(text)
    typer.echo(
        f"[check] {len(report.valid_urls)} valid, {len(report.invalid_urls)} invalid, "
        f"{len(report.dropped)} dropped → {destination}",
        err=True,
    )


@app.command("variations")
def variations(
    url: str = typer.Argument(..., help="Link to expand."),
) -> None:
    """Print the candidate URLs tried for URL, in the order they are tried."""
    for variation in build_url_variations(url):
        typer.echo(variation)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
