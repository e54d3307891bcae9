"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer

import pyoseq as ps

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._pipeline import run_pipeline
from ._registery import CASES, CONSOLE

app = typer.Typer(help="Benchmarks for pyoseq developments.")


@app.command()
def show() -> None:
    """List all registered benchmarks."""
    for name in ps.Seq.of(CASES).map(lambda c, *_: f"{c.category}.{c.name} @ {c.size}"):
        CONSOLE.print(name, style="bold white")


@app.command()
def run(
    *,
    category: Annotated[
        str | None, typer.Option("--category", help="Only run this category.")
    ] = None,
) -> None:
    """Run benchmarks and print the median timings."""
    CONSOLE.print("Running benchmarks...", style="bold blue")
    CONSOLE.print(run_pipeline(category))
    CONSOLE.print("✓ Done", style="bold green")


if __name__ == "__main__":
    app()
