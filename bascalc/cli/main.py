# -*- coding: utf-8 -*-
"""
bascalc CLI
===========

Command-line presentation of the calculator library: list, inspect and
run calculators with a raw input snapshot.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from bascalc import __version__
from bascalc.calculation.engine import calculate
from bascalc.calculation.registry import CATEGORY_TITLES, Category, get_registry
from bascalc.calculation.results import CalculatorResult
from bascalc.cli.inputs import build_inputs
from bascalc.config import configure_logging, get_settings
from bascalc.exceptions import BasCalcException

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="bascalc",
    help="bascalc: Building Automation Engineering Calculators",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()


def _fail(message: str) -> None:
    console.print(f"[red]Error: {escape(message)}[/red]")
    raise typer.Exit(1)


@app.callback(invoke_without_command=True)
def _root(
    version: bool = typer.Option(False, "--version", help="Show version and exit")
):
    """
    bascalc - Building Automation Engineering Calculators
    """
    try:
        configure_logging(get_settings())
    except BasCalcException as e:
        _fail(e.message)
    if version:
        console.print(f"bascalc v{__version__}")
        raise typer.Exit(0)


@app.command()
def version():
    """Show bascalc version"""
    console.print(f"[bold green]bascalc v{__version__}[/bold green]")
    console.print(f"{len(get_registry())} calculators in {len(Category)} categories")


@app.command("list")
def list_calculators(
    category: Optional[str] = typer.Option(
        None, "--category", "-c", help="Only list one category (e.g. hydronic)"
    ),
):
    """List available calculators"""
    registry = get_registry()
    selected = None
    if category:
        try:
            selected = Category(category)
        except ValueError:
            _fail(
                f"Unknown category '{category}'. "
                f"Choose from: {', '.join(c.value for c in Category)}"
            )

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Category", style="green")

    definitions = registry.list(selected)
    for definition in definitions:
        table.add_row(
            definition.calculator_id,
            definition.title,
            CATEGORY_TITLES[definition.category],
        )

    console.print(table)
    console.print(f"\nTotal: {len(definitions)} calculators")


@app.command()
def show(
    calculator_id: str = typer.Argument(..., help="Calculator id (see `bascalc list`)"),
):
    """Show a calculator's inputs and outputs"""
    try:
        definition = get_registry().get(calculator_id)
    except BasCalcException as e:
        _fail(e.message)

    info = definition.describe()
    body = f"[bold cyan]{escape(info['title'])}[/bold cyan]\n[dim]{CATEGORY_TITLES[definition.category]}[/dim]"
    if info["description"]:
        body += f"\n\n{escape(info['description'])}"
    console.print(Panel.fit(body, border_style="cyan"))

    inputs = Table(title="Inputs", show_header=True, header_style="bold magenta")
    inputs.add_column("Name", style="cyan")
    inputs.add_column("Label")
    inputs.add_column("Kind")
    inputs.add_column("Unit")
    inputs.add_column("Default", style="green")
    inputs.add_column("Options")
    for field in info["inputs"]:
        options = ", ".join(field.get("options", {}))
        inputs.add_row(
            field["name"],
            field["label"],
            field["kind"],
            field["unit"] or "",
            field["default"] or "",
            options,
        )
    console.print(inputs)

    outputs = Table(title="Outputs", show_header=True, header_style="bold magenta")
    outputs.add_column("Name", style="cyan")
    outputs.add_column("Label")
    outputs.add_column("Unit")
    for output in info["outputs"]:
        outputs.add_row(output["name"], output["label"], output["unit"] or "")
    console.print(outputs)


def _render_table(result: CalculatorResult, placeholder: str) -> None:
    table = Table(title=result.title, show_header=True, header_style="bold magenta")
    table.add_column("Output", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_column("Unit")
    for output in result.outputs:
        table.add_row(output.label, output.display(placeholder), output.unit or "")
    console.print(table)


def _render_json(result: CalculatorResult) -> None:
    payload = {
        "calculator": result.calculator_id,
        "title": result.title,
        "category": result.category,
        "outputs": result.to_dict(),
        "provenance_hash": result.provenance_hash,
    }
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def run(
    calculator_id: str = typer.Argument(..., help="Calculator id (see `bascalc list`)"),
    assignments: Optional[List[str]] = typer.Option(
        None, "--set", "-s", help="Input value as name=value (repeatable)"
    ),
    input_file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="YAML or JSON mapping of input names to values"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    no_defaults: bool = typer.Option(
        False, "--no-defaults", help="Leave inputs not supplied empty instead of using defaults"
    ),
):
    """
    Run one calculator

    Examples:
        bascalc run valve_cv --set flow=50 --set delta_p=4
        bascalc run oat_reset --file reset.yaml --json
    """
    settings = get_settings()

    try:
        raw_inputs = build_inputs(input_file, assignments or [])
    except ValueError as e:
        _fail(str(e))
    except BasCalcException as e:
        _fail(e.message)

    fill_defaults = settings.fill_defaults and not no_defaults
    try:
        result = calculate(calculator_id, raw_inputs, fill_defaults=fill_defaults)
    except BasCalcException as e:
        _fail(e.message)

    logger.info(f"{calculator_id} evaluated, provenance {result.provenance_hash[:12]}")

    if as_json or settings.output_format == "json":
        _render_json(result)
    else:
        _render_table(result, settings.blank_placeholder)


def main():
    """Main entry point for the bascalc command"""
    app()


if __name__ == "__main__":
    main()
