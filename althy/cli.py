"""Developer CLI for the Althy plan service.

Runs the API locally and exercises the plan normalizer and plan generator
from the terminal.
"""

import asyncio
import json
import sys
from pathlib import Path

import typer
import uvicorn
from loguru import logger
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.text import Text

from althy.plans import generator
from althy.plans.errors import PlanValidationError
from althy.plans.normalizer import normalize
from althy.services.llm.errors import LLMCallError, LLMNotConfiguredError

app = typer.Typer(help="Althy plan service developer CLI")
console = Console()

DEFAULT_HOST = "127.0.0.1"


def _print_plan(payload: dict, pretty: bool) -> None:
    if pretty:
        console.print(JSON(json.dumps(payload, ensure_ascii=False)))
    else:
        typer.echo(json.dumps(payload, ensure_ascii=False))


def _print_validation_error(e: PlanValidationError) -> None:
    console.print(
        Panel(
            Text(e.message, style="bold red"),
            title=f"Invalid plan ({e.kind.value})",
        )
    )


@app.command()
def server(
    host: str = typer.Option(DEFAULT_HOST, "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
) -> None:
    """Run the FastAPI server."""
    logger.info(f"Starting FastAPI server on {host}:{port} (reload={reload})")
    uvicorn.run("althy.main:app", host=host, port=port, reload=reload)


@app.command("normalize")
def normalize_command(
    path: Path | None = typer.Argument(None, help="File with raw plan JSON (reads stdin if omitted)"),
    pretty: bool = typer.Option(True, "--pretty/--compact", help="Pretty-print the result"),
) -> None:
    """Validate raw plan text and print the normalized plan."""
    raw_text = path.read_text(encoding="utf-8") if path else sys.stdin.read()

    try:
        plan = normalize(raw_text)
    except PlanValidationError as e:
        _print_validation_error(e)
        raise typer.Exit(code=1) from e

    _print_plan(plan.to_payload(), pretty)


@app.command()
def plan(
    goal: str = typer.Argument(..., help="Goal to plan for"),
    pretty: bool = typer.Option(True, "--pretty/--compact", help="Pretty-print the result"),
) -> None:
    """Generate a plan for GOAL with the LLM and print it normalized."""
    try:
        raw_text = asyncio.run(generator.generate_plan_text(goal))
    except (LLMNotConfiguredError, LLMCallError) as e:
        console.print(Panel(Text(str(e), style="bold red"), title="Plan generation failed"))
        raise typer.Exit(code=2) from e

    try:
        normalized = normalize(raw_text)
    except PlanValidationError as e:
        _print_validation_error(e)
        console.print(Panel(Text(raw_text), title="Raw model output"))
        raise typer.Exit(code=1) from e

    _print_plan(normalized.to_payload(), pretty)


if __name__ == "__main__":
    app()
