from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from todo_service.domain.models import Todo


def print_todos(todos: Sequence[Todo], console: Optional[Console] = None) -> None:
    """
    Render todos as a rich table, in the order the service returned them.
    """
    console = console or Console()

    if not todos:
        console.print("[yellow]No todos to display.[/yellow]")
        return

    done_count = sum(1 for todo in todos if todo.done)
    table = Table(
        title="Todos",
        box=box.ROUNDED,
        caption=f"{done_count}/{len(todos)} done",
    )

    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Message", style="dim")
    table.add_column("Done", justify="center")

    for todo in todos:
        done_str = "[green]✓[/green]" if todo.done else "[red]✗[/red]"
        table.add_row(todo.id, todo.title, todo.message, done_str)

    console.print(table)


__all__ = ["print_todos"]
