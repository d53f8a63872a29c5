from __future__ import annotations

import random
import traceback
from dataclasses import replace
from typing import List, Dict, Any, Optional

import typer
from rich import print
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.env import load_env, Settings
from ..errors import SolverError, MalformedFeedback, OracleError, ExhaustedCandidates
from ..game_loop import solve
from ..oracles import get_oracle
from ..utils import load_words

app = typer.Typer()
console = Console()


def error_hint(e: Exception, day: int) -> str:
    if isinstance(e, ExhaustedCandidates):
        return "Hint: the dictionary may not contain today's word, or the feedback was contradictory."
    if isinstance(e, MalformedFeedback):
        return f"Hint: the oracle answered in an unexpected shape. Check that day {day} exists."
    if isinstance(e, OracleError):
        return "Hint: check your network connection or VAAJOOR_CHECK_URL."
    return ""


def print_trace(trace: List[Dict[str, Any]]):
    table = Table("turn", "guess", "codes", "before", "after", "result")
    for t in trace:
        table.add_row(
            str(t["turn"]), t["guess"], t["codes"],
            str(t["candidates_before"]), str(t["candidates_after"]), t["result"],
        )
    console.print(table)


@app.command()
def main(
    day: int = typer.Option(1, "--day", "-d", help="Puzzle day, used as the oracle session key."),
    words_file: Optional[str] = None,
    url: Optional[str] = None,
    oracle: str = "vaajoor",
    seed: Optional[int] = None,
    timeout: Optional[float] = None,
    verbose: bool = False,
    debug: bool = False,
):
    """
    Solve the Vaajoor puzzle of a given day.

    Oracles:
    - vaajoor: the live web API (default)
    - local/<word>: offline, against a known secret
    """
    seen = load_env()
    try:
        settings = Settings.from_env()
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(code=1)
    if words_file:
        settings = replace(settings, words_file=words_file)
    if url:
        settings = replace(settings, check_url=url)
    if timeout is not None:
        settings = replace(settings, timeout=timeout)

    if debug:
        print({"env_keys_detected": seen, "settings": settings})

    if seed is not None:
        random.seed(seed)

    try:
        words = load_words(settings.words_file)
    except OSError as e:
        console.print(f"[red]Cannot read dictionary[/] {escape(settings.words_file)}: {escape(str(e))}")
        raise typer.Exit(code=1)

    try:
        feedback_oracle = get_oracle(oracle, settings)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(code=1)

    trace: List[Dict[str, Any]] = []
    try:
        answer = solve(words, str(day), feedback_oracle, trace=trace)
    except SolverError as e:
        if verbose and trace:
            print_trace(trace)
        console.print(f"[bold red]{type(e).__name__}:[/] {escape(str(e))}")
        hint = error_hint(e, day)
        if hint:
            console.print(hint)
        if debug:
            console.print(traceback.format_exc(), markup=False)
        raise typer.Exit(code=1)

    if verbose:
        print_trace(trace)
    console.print(f"answer => {answer}", highlight=False)


def cli():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    cli()
