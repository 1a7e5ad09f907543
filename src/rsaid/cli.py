from __future__ import annotations

import json
import logging
import pathlib
import sys
from datetime import date, datetime
from typing import List, Optional

import typer
import structlog
from rich.console import Console
from rich.table import Table

from .config import load_config, RsaIdConfig
from .engine.checksum import compute_check_digit
from .engine.pipeline import IdValidator
from .engine.results import ValidationResult

console = Console()
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="rsaid — South African ID number validator")


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"rsaid {__version__}")
        raise typer.Exit()


def _parse_today(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter("expected YYYY-MM-DD")


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to rsaid.yaml"),
    today: Optional[str] = typer.Option(None, "--today", help="Reference date (YYYY-MM-DD) for century resolution"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, reference date, verbosity)."""
    structlog.configure(
        processors=[structlog.processors.add_log_level, structlog.processors.JSONRenderer()],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )
    cfg = load_config(config) if config else RsaIdConfig()
    pinned = _parse_today(today)
    ctx.obj = {
        "config": cfg,
        "validator": IdValidator(cfg, clock=(lambda: pinned) if pinned else None),
    }
    if verbose:
        log.debug("verbose_enabled", today=today)


def _render_table(pairs: List[tuple[str, ValidationResult]]) -> Table:
    table = Table(show_header=True, header_style="bold")
    for col in ("ID", "Valid", "Date of birth", "Gender", "Citizenship", "Error"):
        table.add_column(col)
    for raw, result in pairs:
        d = result.to_dict()
        if result.valid:
            table.add_row(d["id_number"], "[green]yes[/green]", d["date_of_birth"], d["gender"], d["citizenship"], "")
        else:
            table.add_row(raw, "[red]no[/red]", "", "", "", d["error"])
    return table


@app.command()
def check(
    ctx: typer.Context,
    ids: List[str] = typer.Argument(..., help="One or more ID numbers"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
    report: Optional[pathlib.Path] = typer.Option(None, "--report", help="Write an HTML page for the last result"),
):
    """Validate ID numbers; exits with code 1 if any is invalid."""
    validator: IdValidator = ctx.obj["validator"]
    pairs = [(raw, validator.validate(raw)) for raw in ids]

    invalid = [r for _, r in pairs if not r.valid]
    log.info("checked", total=len(pairs), invalid=len(invalid), kinds=sorted({r.kind.value for r in invalid}))

    if as_json:
        payload = [r.to_dict() for _, r in pairs]
        typer.echo(json.dumps(payload[0] if len(payload) == 1 else payload, indent=2))
    else:
        console.print(_render_table(pairs))

    if report:
        from .reporting.html import write_report
        raw, result = pairs[-1]
        write_report(result, report, id_value=raw)
        console.print(f"[green]Report written:[/green] {report}")

    if invalid:
        raise typer.Exit(code=1)


@app.command("check-digit")
def check_digit(prefix: str = typer.Argument(..., help="First 12 digits of an ID number")):
    """Print the check digit for a 12-digit prefix."""
    prefix = "".join(prefix.split())
    if len(prefix) != 12:
        raise typer.BadParameter("prefix must be exactly 12 digits")
    try:
        digit = compute_check_digit(prefix)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    typer.echo(str(digit))


@app.command()
def serve(
    ctx: typer.Context,
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", help="Bind port"),
):
    """Run the HTTP API (POST /validate, GET /form)."""
    import uvicorn
    from .web.api import create_app

    cfg: RsaIdConfig = ctx.obj["config"]
    validator: IdValidator = ctx.obj["validator"]
    console.print(f"Serving on http://{host}:{port}")
    uvicorn.run(create_app(cfg, validator), host=host, port=port)
