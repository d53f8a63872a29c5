#!/usr/bin/env python3
"""Benchmark the solver offline against secrets drawn from the dictionary."""

from __future__ import annotations
import random
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn
from rich.table import Table

from ..core.env import load_env, Settings
from ..evaluation import play_secret, summarize, write_results
from ..utils import load_words

app = typer.Typer()
console = Console()


@app.command()
def main(
    words_file: Optional[str] = None,
    out_path: str = "data/cache/benchmark.jsonl",
    limit: int = 100,
    seed: int = 42,
):
    load_env()
    path = words_file or Settings.from_env().words_file
    try:
        words = load_words(path)
    except OSError as e:
        console.print(f"[red]Cannot read dictionary[/] {path}: {e}")
        raise typer.Exit(code=1)
    if not words:
        console.print(f"[red]No words found at[/] {path}")
        raise typer.Exit(code=1)

    rng = random.Random(seed)
    secrets = rng.sample(words, min(limit, len(words)))

    console.rule(
        f"[bold green]Benchmark[/]\n"
        f"Dictionary: {len(words)} words | Secrets: {len(secrets)} | Seed: {seed}"
    )

    results = []
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.completed}/{task.total}"),
    ) as prog:
        task = prog.add_task("Solving", total=len(secrets))
        for secret in secrets:
            results.append(play_secret(words, secret, rng=rng))
            prog.update(task, advance=1)

    write_results(out_path, results)
    stats = summarize(results)

    console.rule("[bold cyan]Results")
    console.print(f"Solved: {stats['solved']}/{stats['total']} ({stats['solve_rate']*100:.1f}%)")
    console.print(f"Average guesses: {stats['average_guesses']:.3f}")

    table = Table("guesses", "games")
    for n, count in stats["distribution"].items():
        table.add_row(str(n), str(count))
    console.print(table)

    if stats["failed_secrets"]:
        console.rule(f"[bold red]Failures ({stats['failures']})")
        console.print(", ".join(stats["failed_secrets"]))

    console.print(f"[green]Wrote[/] {len(results)} results to {out_path}")


if __name__ == "__main__":
    app()
