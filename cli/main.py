#!/usr/bin/env python3
"""
Tally CLI - Replayable decimal accumulator

Main entrypoint for the tally command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from tally.accumulator import Accumulator
from tally.config import Settings
from tally.logging_config import setup_logging

from cli.commands import run
from cli.commands.run import render_history

app = typer.Typer(
    name="tally",
    help="Decimal accumulator with replay-based undo and redo",
    add_completion=False,
)

console = Console()

app.command(
    name="run",
    context_settings={"ignore_unknown_options": True},
)(run.run_command)


@app.callback()
def configure():
    """Configure logging from TALLY_* environment variables."""
    setup_logging(Settings.from_env())


@app.command()
def demo():
    """
    Run the reference scenario.

    add 3, subtract 1, multiply 5, divide 3, undo, undo, redo, redo
    """
    acc = Accumulator(trace_id="cli-demo")
    script = [
        ("add 3", lambda: acc.add(3)),
        ("subtract 1", lambda: acc.subtract(1)),
        ("multiply 5", lambda: acc.multiply(5)),
        ("divide 3", lambda: acc.divide(3)),
        ("undo", acc.undo),
        ("undo", acc.undo),
        ("redo", acc.redo),
        ("redo", acc.redo),
    ]

    steps = Table(title="Steps")
    steps.add_column("Step", style="green")
    steps.add_column("Value", style="cyan", justify="right")
    for label, call in script:
        call()
        steps.add_row(label, str(acc.current_value))

    console.print(steps)
    console.print(render_history(acc))
    console.print(f"[bold]Current value:[/bold] {acc.current_value}")


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from tally.core import SCALE

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Tally CLI[/bold]", f"v{__version__}")
    table.add_row("Division scale", str(SCALE))

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
