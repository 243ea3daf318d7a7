"""Central UI handler for issue-summoner.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every command file.

Usage:
    from issue_summoner.pipeline.ui import build_tag_table, console, print_success

    console.print(build_tag_table(tags, "@TODO"))
    print_success("No tags found")
"""

import sys
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from issue_summoner.tag.models import Tag

SUMMONER_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "cmd": "bold magenta",
    "path": "bold cyan",
    "dim": "dim white",
})

# Single console instance - import this, don't create your own
console = Console(
    theme=SUMMONER_THEME,
    force_terminal=sys.stdout.isatty()
)


def print_success(msg: str) -> None:
    console.print(f"[success]OK:[/success] {msg}")


def build_tag_table(tags: Sequence[Tag], annotation: str) -> Table:
    """Render tags as a File / Line / Title / Description table."""
    table = Table(title=f"{annotation} tags", show_lines=True)
    table.add_column("File", style="path")
    table.add_column("Line", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Description", style="dim")

    for tag in tags:
        # Text() keeps brackets in comments from being read as markup
        table.add_row(Text(tag.source_file), str(tag.line_number), Text(tag.title), Text(tag.description))
    return table
