from __future__ import annotations
from typing import Optional
import typer
from rich import print
from rich.markup import escape

from ..core.env import load_env, Settings
from ..utils import load_words, word_stats

app = typer.Typer()

@app.command()
def main(path: Optional[str] = None):
    load_env()
    path = path or Settings.from_env().words_file
    try:
        words = load_words(path)
    except OSError as e:
        print(f"[red]Cannot read dictionary[/] {escape(path)}: {escape(str(e))}")
        raise typer.Exit(code=1)
    stats = word_stats(words)

    print(f"[bold]Words[/]: {stats['total']} ({stats['unique']} unique)")
    print(f"[bold]Not 5 letters[/]: {len(stats['wrong_length'])} {stats['wrong_length'][:10]}")
    print(f"[bold]Duplicates[/]: {len(stats['duplicates'])} {stats['duplicates'][:10]}")
    print(f"[bold]Top letters[/]: {', '.join(f'{ch}={n}' for ch, n in stats['top_letters'])}")

if __name__ == "__main__":
    app()
