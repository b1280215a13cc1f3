"""TextUtils – CLI entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, MofNCompleteColumn
from rich.table import Table

from text_utils.registry import OPERATIONS, Operation, UnknownOperationError, apply_all, get_operation

load_dotenv()

app = typer.Typer(
    name="text-utils",
    help="Case conversion, truncation, whitespace cleanup and palindrome checks.",
    add_completion=False,
)
console = Console()

MAX_LENGTH_ENVVAR = "TEXT_UTILS_MAX_LENGTH"


def _resolve(operation: str) -> Operation:
    """Look up *operation*, exiting with code 2 when it is unknown."""
    try:
        op = get_operation(operation)
    except UnknownOperationError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2)
    return op


@app.command("list")
def list_operations() -> None:
    """List the available text operations."""
    table = Table(title="Text Operations")
    table.add_column("Operation", style="cyan")
    table.add_column("Returns", style="magenta")
    table.add_column("Summary", style="white")

    for op in OPERATIONS.values():
        table.add_row(op.name, op.returns.__name__, op.summary)

    console.print(table)


@app.command()
def run(
    operation: str = typer.Argument(..., help="Operation name, e.g. camel_case or camelCase."),
    text: list[str] = typer.Argument(..., help="Text to transform; words are joined with single spaces."),
    max_length: Optional[int] = typer.Option(
        None, "--max-length", "-n", envvar=MAX_LENGTH_ENVVAR, help="Length limit for truncate."
    ),
) -> None:
    """Apply one operation to TEXT and print the result."""
    op = _resolve(operation)
    console.print(op(" ".join(text), max_length if op.accepts_length else None), markup=False, highlight=False)


@app.command()
def inspect(
    text: list[str] = typer.Argument(..., help="Text to run every operation on."),
) -> None:
    """Run every operation on TEXT and show the results side by side."""
    joined = " ".join(text)
    table = Table(title="Transformation Summary")
    table.add_column("Operation", style="cyan")
    table.add_column("Result", style="white")

    for name, result in apply_all(joined).items():
        if isinstance(result, bool):
            shown = "[green]yes[/green]" if result else "[red]no[/red]"
        else:
            shown = escape(str(result))
        table.add_row(name, shown)

    console.print(table)


@app.command("file")
def apply_to_file(
    path: Path = typer.Argument(..., help="Text file to process line by line."),
    operation: str = typer.Argument(..., help="Operation to apply to each line."),
    max_length: Optional[int] = typer.Option(
        None, "--max-length", "-n", envvar=MAX_LENGTH_ENVVAR, help="Length limit for truncate."
    ),
) -> None:
    """Apply an operation to every line of a text file."""
    op = _resolve(operation)
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[red]Could not read {escape(str(path))}: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    if not lines:
        console.print("[yellow]No lines found.[/yellow]")
        return

    results: list[str] = []

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(f"Applying {op.name}...", total=len(lines))

        for line in lines:
            results.append(str(op(line, max_length if op.accepts_length else None)))
            progress.advance(task)

    for result in results:
        console.print(result, markup=False, highlight=False)

    console.print()
    console.print(f"[green]Applied {op.name} to {len(results)} line(s)[/green]")


if __name__ == "__main__":
    app()
