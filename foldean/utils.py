"""
Console helpers for foldean.

Includes:
- Shared rich console
- Styled status messages
- Plan rendering
"""

from collections import Counter
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

# Global console instance. Emoji codes off: "notes:smile:.txt" is a valid file name
console = Console(emoji=False)


def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{escape(title)}[/bold blue]\n[italic]{escape(subtitle)}[/italic]", expand=False))


def display_path(path: Path, root: Path) -> str:
    """Path relative to the organized directory when possible."""
    try:
        return str(Path(path).relative_to(root))
    except ValueError:
        return str(path)


def print_plan_table(moves: list, root: Path):
    """Print a per-category summary followed by every planned move."""
    per_category = Counter(Path(dst).parent.name for _, dst in moves)

    table = Table(title="Plan Summary")
    table.add_column("Category", style="cyan")
    table.add_column("Files", style="magenta", justify="right")

    for category, count in sorted(per_category.items(), key=lambda x: (-x[1], x[0])):
        table.add_row(escape(category), str(count))

    console.print(table)

    console.print(f"Planned moves ({len(moves)}):")
    for src, dst in moves:
        # One line per move, however long the paths
        console.print(
            f"  [yellow]{escape(display_path(src, root))}[/yellow] -> "
            f"[blue]{escape(display_path(dst, root))}[/blue]",
            soft_wrap=True,
        )


def print_error(msg: str):
    console.print(f"[bold red]ERROR:[/bold red] {escape(msg)}", soft_wrap=True)


def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {escape(msg)}")


def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {escape(msg)}")
