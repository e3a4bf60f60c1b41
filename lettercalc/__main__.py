"""CLI for lettercalc.

Usage:
    python -m lettercalc eval 3a2c4 32a2d2          # Evaluate one or more expressions
    python -m lettercalc eval 4d0 --json            # One JSON object per expression
    python -m lettercalc eval 9c9 --bits 8          # Narrower integer range
    python -m lettercalc tokens 3ae4c66fb32         # Show the token stream
    python -m lettercalc samples                    # Run the built-in sample inputs
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lettercalc.core import SAMPLES, run
from lettercalc.errors import ExpressionError
from lettercalc.models import EvalResult
from lettercalc.settings import OutputFormat, Settings, check_int_bits, load_settings
from lettercalc.tokenizer import tokenize

app = typer.Typer(
    name="lettercalc",
    help="Evaluate arithmetic written with letter operators (a-f)",
    no_args_is_help=True,
)
out = Console()
console = Console(stderr=True)


def _settings() -> Settings:
    try:
        return load_settings()
    except ValueError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(2)


def _bits(bits: Optional[int], settings: Settings) -> int:
    if bits is None:
        return settings.int_bits
    try:
        return check_int_bits(bits)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)


def _print_result(result: EvalResult, fmt: OutputFormat) -> None:
    if fmt == OutputFormat.JSON:
        out.print(json.dumps(result.to_dict()), markup=False, highlight=False, soft_wrap=True)
        return
    if result.ok:
        out.print(f"{escape(result.expression)} = {result.value}", highlight=False)
    else:
        err = result.error
        console.print(
            f"[red]{err.kind}:[/red] {escape(err.message)} "
            f"[dim]({escape(result.expression)})[/dim]"
        )


def _print_token_line(expression: str, int_bits: int) -> None:
    """Print the token stream on one dim stderr line."""
    try:
        stream = " ".join(str(t) for t in tokenize(expression, int_bits))
    except ExpressionError as e:
        stream = f"<{e.kind}>"
    console.print(f"  [dim]tokens: {escape(stream)}[/dim]")


@app.command("eval")
def cmd_eval(
    expressions: list[str] = typer.Argument(help="Expressions to evaluate (e.g., '3a2c4')"),
    as_json: bool = typer.Option(False, "--json", help="Print one JSON object per expression"),
    bits: Optional[int] = typer.Option(None, "--bits", "-b", help="Signed integer width (default 64)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Also print the token stream"),
) -> None:
    """Evaluate expressions; exit 1 if any of them fails."""
    settings = _settings()
    int_bits = _bits(bits, settings)
    fmt = OutputFormat.JSON if as_json else settings.output

    failed = 0
    for expression in expressions:
        if verbose:
            _print_token_line(expression, int_bits)
        result = run(expression, int_bits)
        _print_result(result, fmt)
        if not result.ok:
            failed += 1

    if failed:
        raise typer.Exit(1)


@app.command("tokens")
def cmd_tokens(
    expression: str = typer.Argument(help="Expression to tokenize"),
    bits: Optional[int] = typer.Option(None, "--bits", "-b", help="Signed integer width (default 64)"),
) -> None:
    """Show the token stream of an expression."""
    int_bits = _bits(bits, _settings())
    try:
        tokens = tokenize(expression, int_bits)
    except ExpressionError as e:
        console.print(f"[red]{e.kind}:[/red] {escape(e.message)}")
        raise typer.Exit(1)

    table = Table(title=f"Tokens: {escape(expression)}", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", style="green", min_width=8)
    table.add_column("Value", justify="right")
    table.add_column("Position", justify="right")

    for i, token in enumerate(tokens):
        value = str(token.value) if token.value is not None else f"[dim]{token.letter}[/dim]"
        table.add_row(str(i), token.kind.value, value, str(token.position))

    out.print()
    out.print(table)
    out.print()


@app.command("samples")
def cmd_samples() -> None:
    """Evaluate the built-in sample inputs and compare with expected values."""
    int_bits = _settings().int_bits

    table = Table(title="Sample Inputs", show_header=True, header_style="bold")
    table.add_column("Input", style="cyan", min_width=20)
    table.add_column("Output", justify="right")
    table.add_column("Expected", justify="right", style="dim")
    table.add_column("Status", justify="center")

    mismatches = 0
    for expression, expected in SAMPLES:
        result = run(expression, int_bits)
        output = str(result.value) if result.ok else f"[red]{result.error.kind}[/red]"
        if result.ok and result.value == expected:
            status = "[green]ok[/green]"
        else:
            status = "[red]FAIL[/red]"
            mismatches += 1
        table.add_row(expression, output, str(expected), status)

    out.print()
    out.print(table)
    out.print()

    if mismatches:
        console.print(f"[red]{mismatches} sample(s) did not match[/red]")
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
