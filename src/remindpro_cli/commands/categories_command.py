"""Category commands."""

from typing import Annotated

import typer
from rich.table import Table

from remindpro_cli.models import CategoryCreate
from remindpro_cli.services.context_manager import get_reminder_service
from remindpro_cli.utils.typer_helpers import SuggestingGroup
from remindpro_cli.utils.ui.console import get_console
from remindpro_cli.utils.ui.formatters import format_output, format_success, format_warning

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Category management commands")
console = get_console()


@app.command("list")
@command_wrapper
async def list_categories(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "table",
) -> None:
    """List default and custom categories."""
    lookup = await get_reminder_service().category_lookup()
    if output in ("json", "yaml"):
        format_output(
            [
                {
                    "id": info.id,
                    "name": info.name,
                    "color": info.color,
                    "emoji": info.emoji,
                    "is_default": info.is_default,
                }
                for info in lookup.values()
            ],
            output,
        )
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Color")
    table.add_column("Default")
    for info in lookup.values():
        table.add_row(
            info.id,
            f"{info.emoji or ''} {info.name}".strip(),
            info.color,
            "✓" if info.is_default else "",
        )
    console.print(table)


@app.command("add")
@command_wrapper
async def add_category(
    name: Annotated[str, typer.Argument(help="Category name")],
    color: Annotated[
        str, typer.Option("--color", help="Hex color, e.g. #ff9800")
    ] = "#9e9e9e",
    emoji: Annotated[str | None, typer.Option("--emoji", help="Emoji")] = None,
) -> None:
    """Add a custom category."""
    category = await get_reminder_service().add_category(
        CategoryCreate(name=name, color=color, emoji=emoji)
    )
    format_success(f"Created category '{category.name}' (id {category.id})")


@app.command("delete")
@command_wrapper
async def delete_category(
    category: Annotated[str, typer.Argument(help="Category id or name")],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip confirmation")
    ] = False,
) -> None:
    """Delete a custom category. Its reminders show as Unknown afterwards."""
    if not yes and not typer.confirm(f"Delete category '{category}'?"):
        format_warning("Cancelled")
        raise typer.Exit(0)
    info = await get_reminder_service().delete_category(category)
    format_success(f"Deleted category '{info.name}'")
