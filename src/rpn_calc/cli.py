"""
Command-line interface for rpn-calc.

Provides commands for:
- An interactive calculator session
- One-shot evaluation of an expression
- Batch evaluation of a file of expressions
- Dumping the token sequence of an expression
"""

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rpn_calc.config import Settings, get_settings
from rpn_calc.errors import CalculatorError
from rpn_calc.log import configure_logging
from rpn_calc.converter import to_postfix
from rpn_calc.models import Evaluation, dump_tokens, format_int
from rpn_calc.pipeline import calculate, calculate_many
from rpn_calc.renderer import render_rich
from rpn_calc.tokenizer import tokenize

app = typer.Typer(
    name="rpn-calc",
    help="rpn-calc - integer expression calculator (shunting-yard + postfix evaluation)",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Log level"),
):
    """Load settings and configure logging for every command."""
    try:
        settings = get_settings(config, log_level=log_level.upper() if log_level else None)
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/] {escape(str(e))}")
        raise typer.Exit(2)

    configure_logging(settings.log_level)
    ctx.obj = settings


# =============================================================================
# Calculation Commands
# =============================================================================

@app.command()
def repl(ctx: typer.Context):
    """Start an interactive calculator session."""
    settings: Settings = ctx.obj

    console.print("[bold yellow]rpn-calc calculator[/]")

    while True:
        try:
            line = console.input(f"[cyan]{escape(settings.prompt)}[/]")
        except EOFError:
            console.print()
            break

        if line.strip() == settings.exit_command:
            break
        if not line.strip():
            console.print(f"[{settings.error_style}]Empty input, please try again.[/]")
            continue

        try:
            evaluation = calculate(line)
        except CalculatorError as e:
            _print_error(settings, e)
            continue

        _print_evaluation(settings, evaluation, show_postfix=settings.show_postfix)


@app.command(name="eval")
def eval_expression(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Infix expression, e.g. '(10 - 2) * 3'"),
    postfix: Optional[bool] = typer.Option(None, "--postfix/--no-postfix", help="Show the postfix form"),
    as_json: bool = typer.Option(False, "--json", help="Print the full evaluation as JSON"),
):
    """Evaluate a single expression."""
    settings: Settings = ctx.obj

    try:
        evaluation = calculate(expression)
    except CalculatorError as e:
        _print_error(settings, e)
        raise typer.Exit(1)

    if as_json:
        typer.echo(evaluation.model_dump_json(indent=2))
        return

    show = settings.show_postfix if postfix is None else postfix
    _print_evaluation(settings, evaluation, show_postfix=show)


@app.command()
def batch(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="File with one expression per line"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Number of worker threads"),
):
    """Evaluate every non-blank line of a file."""
    settings: Settings = ctx.obj

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        console.print(
            f"[{settings.error_style}]Error: batch file is not valid UTF-8 ({escape(e.reason)}): {escape(str(path))}[/]",
            soft_wrap=True,
        )
        raise typer.Exit(1)

    expressions = [line.strip() for line in text.splitlines() if line.strip()]
    if not expressions:
        console.print("[yellow]No expressions found[/]")
        return

    outcomes = calculate_many(expressions, workers=workers or settings.batch_workers)

    table = Table(title="Results")
    table.add_column("#", style="dim")
    table.add_column("Expression", style="cyan")
    table.add_column("Postfix")
    table.add_column("Result")

    failed = 0
    for i, (expression, outcome) in enumerate(zip(expressions, outcomes), start=1):
        if isinstance(outcome, Evaluation):
            table.add_row(
                str(i),
                escape(expression),
                render_rich(outcome.postfix, settings.token_styles),
                f"[{settings.result_style}]{format_int(outcome.result)}[/]",
            )
        else:
            failed += 1
            table.add_row(
                str(i),
                escape(expression),
                "-",
                f"[{settings.error_style}]{escape(str(outcome))}[/]",
            )

    console.print(table)

    if failed:
        console.print(f"[red]{failed} of {len(expressions)} expressions failed[/]")
        raise typer.Exit(1)


@app.command()
def tokens(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Infix expression"),
    postfix: bool = typer.Option(False, "--postfix", "-p", help="Dump the postfix order instead"),
):
    """Print the token sequence of an expression as JSON."""
    settings: Settings = ctx.obj

    try:
        sequence = tokenize(expression)
    except CalculatorError as e:
        _print_error(settings, e)
        raise typer.Exit(1)

    if postfix:
        sequence = to_postfix(sequence)

    typer.echo(json.dumps(dump_tokens(sequence), indent=2))


# =============================================================================
# Helpers
# =============================================================================

def _print_evaluation(settings: Settings, evaluation: Evaluation, show_postfix: bool) -> None:
    if show_postfix:
        console.print(render_rich(evaluation.postfix, settings.token_styles))
    console.print(f"[{settings.result_style}]Result: {format_int(evaluation.result)}[/]")


def _print_error(settings: Settings, error: CalculatorError) -> None:
    console.print(f"[{settings.error_style}]Error: {escape(str(error))}[/]")


if __name__ == "__main__":
    app()
