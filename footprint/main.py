# footprint/main.py
from dotenv import load_dotenv
load_dotenv()  # load .env before anything else

import logging
import os
from typing import Optional

import typer
from rich.console import Console

from .factors import CATEGORY_AVERAGES, CATEGORY_LABELS, OVERALL_AVERAGE
from .parsers import build_input, clamp_to_form, parse_text
from .report import build_report, render_text
from .schemas import InvalidInput

logging.basicConfig(
    level=os.getenv("FOOTPRINT_LOG_LEVEL", "WARNING").upper(),
    format="%(levelname)s %(name)s %(message)s",
)

app = typer.Typer(
    name="footprint",
    help="Monthly carbon footprint estimate from lifestyle answers",
    no_args_is_help=True,
    add_completion=False,
)
console = Console(soft_wrap=True)


@app.command()
def estimate(
    answers: Optional[str] = typer.Argument(
        None, help="Answers like 'travel 12, mode bus, meat meals 3, recycle yes'"
    ),
    defaults: bool = typer.Option(True, "--defaults/--no-defaults", help="Fill unanswered fields with the form defaults"),
    clamp: bool = typer.Option(False, "--clamp", help="Clamp numbers to the form's slider ranges"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
):
    """Estimate a monthly footprint and print tips."""
    try:
        data = build_input(parse_text(answers), use_defaults=defaults)
    except InvalidInput as e:
        console.print("[bold red]Invalid input[/bold red]")
        for line in e.errors:
            console.print(f"  {line}", markup=False)
        raise typer.Exit(code=2)

    if clamp:
        data = clamp_to_form(data)

    report = build_report(data)
    if as_json:
        typer.echo(report.model_dump_json(indent=2))
        return

    for line in render_text(report):
        console.print(line, markup=False, highlight=False)


@app.command()
def averages():
    """Show the reference averages used for comparison."""
    console.print(f"[bold]Overall:[/bold] {OVERALL_AVERAGE} kg CO2e per month")
    for category, value in CATEGORY_AVERAGES.items():
        console.print(f"• {CATEGORY_LABELS[category]}: {value} kg", highlight=False)


if __name__ == "__main__":
    app()
