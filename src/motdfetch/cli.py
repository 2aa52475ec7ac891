from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from motdfetch.config import Config, load_config
from motdfetch.dashboard import build_config
from motdfetch.quote import (
    Absent,
    FallbackStale,
    Fresh,
    QuoteCacheError,
    QuoteResult,
    Refreshed,
    default_context,
    resolve_daily_quote,
)
from motdfetch.render import render
from motdfetch.util.logging import configure_logging

app = typer.Typer(add_completion=False)
console = Console()


def _load(config_path: Path | None) -> Config:
    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2)


def _describe(result: QuoteResult) -> str:
    if isinstance(result, Fresh):
        return "cached today"
    if isinstance(result, Refreshed):
        return "fetched"
    if isinstance(result, FallbackStale):
        return f"stale fallback ({result.failure.kind.value}: {escape(result.failure.detail)})"
    if isinstance(result, Absent) and result.failure is not None:
        return f"unavailable ({result.failure.kind.value}: {escape(result.failure.detail)})"
    return "unavailable"


@app.command()
def show(
    logo: Path | None = None,
    config: Path | None = None,
    verbose: bool = False,
) -> None:
    """Show the logo next to system facts and today's quote."""
    configure_logging(verbose)
    cfg = _load(config)
    if logo is not None and not logo.exists():
        console.print(f"[red]Logo not found: {logo}[/red]")
        raise typer.Exit(code=2)
    render(build_config(cfg, logo_path=logo), console)


@app.command()
def quote(config: Path | None = None, verbose: bool = False) -> None:
    """Print today's quote and where it came from."""
    configure_logging(verbose)
    cfg = _load(config)
    try:
        result = resolve_daily_quote(default_context(cfg))
    except QuoteCacheError as exc:
        console.print(f"[red]{exc}: {exc.__cause__}[/red]")
        raise typer.Exit(code=1)
    if result.text is not None:
        console.print(result.text, highlight=False, markup=False)
    console.print(f"[dim]Quote: {_describe(result)}[/dim]")


if __name__ == "__main__":
    app()
