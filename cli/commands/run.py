"""
Run command: apply a scripted sequence of steps to a fresh accumulator
"""

from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.table import Table

from tally.accumulator import Accumulator
from tally.config import Settings
from tally.core import InvalidArgumentError, OperationKind, TallyError, canonical_json_str, to_decimal

console = Console()

UNDO = "undo"
REDO = "redo"

Step = Tuple[str, Optional[OperationKind], Optional[str]]


def parse_steps(tokens: List[str]) -> List[Step]:
    """
    Parse CLI tokens into steps.

    Operations take the following token as operand ("add 3", "/ 2");
    "undo" and "redo" stand alone.

    Raises:
        InvalidArgumentError: On unknown words or a missing operand
    """
    steps: List[Step] = []
    i = 0
    while i < len(tokens):
        word = tokens[i].strip()
        if word.lower() in (UNDO, REDO):
            steps.append((word.lower(), None, None))
            i += 1
            continue

        kind = OperationKind.parse(word)
        if i + 1 >= len(tokens):
            raise InvalidArgumentError(f"Missing operand for {word!r}")
        operand = tokens[i + 1]
        to_decimal(operand)
        steps.append(("apply", kind, operand))
        i += 2
    return steps


def execute_steps(acc: Accumulator, steps: List[Step]) -> List[str]:
    """Run steps against acc; returns one line per undo/redo that was a no-op."""
    notices = []
    for action, kind, operand in steps:
        if action == UNDO:
            if not acc.undo():
                notices.append("No operation to undo.")
        elif action == REDO:
            if not acc.redo():
                notices.append("No operation to redo.")
        else:
            acc.apply(kind, operand)
    return notices


def render_history(acc: Accumulator, title: str = "History") -> Table:
    table = Table(title=title)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Operation", style="green")
    table.add_column("Operand", style="yellow", justify="right")
    table.add_column("Note", style="dim")

    for idx, op in enumerate(acc.get_history()):
        table.add_row(str(idx), op.kind.value, str(op.operand), op.note or "")
    return table


def run_command(
    steps: List[str] = typer.Argument(..., help="Steps, e.g. add 3 sub 1 mul 5 div 3 undo redo"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON (default from TALLY_JSON)"),
):
    """
    Apply operations, undo and redo steps to a fresh accumulator.

    Examples:
        tally run add 3 subtract 1 multiply 5 divide 3
        tally run + 3 - 1 undo redo
        tally run add 10 div 4 --json
    """
    json_output = json_output or Settings.from_env().json_output

    acc = Accumulator(trace_id="cli-run")
    try:
        parsed = parse_steps(steps)
        notices = execute_steps(acc, parsed)
    except TallyError as e:
        if json_output:
            print(canonical_json_str({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if json_output:
        output = acc.snapshot()
        output["notices"] = notices
        print(canonical_json_str(output, indent=2))
        return

    for notice in notices:
        console.print(f"[yellow]{notice}[/yellow]")
    console.print(render_history(acc))
    console.print(f"[bold]Current value:[/bold] {acc.current_value}")
