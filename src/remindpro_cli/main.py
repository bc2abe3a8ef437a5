"""Main entry point for RemindPro CLI."""

import typer
from rich.console import Console

from remindpro_cli import __version__
from remindpro_cli.commands import (
    add_command,
    calendar_command,
    categories_command,
    complete_command,
    config,
    delete_command,
    edit_command,
    list_command,
    show_command,
    snooze_command,
    stats_command,
)
from remindpro_cli.utils.typer_helpers import SuggestingGroup

# Create main app with custom group class
app = typer.Typer(
    name="remindpro",
    cls=SuggestingGroup,
    help="Reminders with recurrence, snooze and due-soon tracking",
    no_args_is_help=True,
)

console = Console()


# Add subcommands
app.add_typer(config.app, name="config", help="Configuration management")
app.add_typer(categories_command.app, name="categories", help="Category management")

# Add top-level commands
app.command("list")(list_command.list_command)
app.command("show")(show_command.show_command)
app.command("add")(add_command.add_command)
app.command("edit")(edit_command.edit_command)
app.command("complete")(complete_command.complete_command)
app.command("snooze")(snooze_command.snooze_command)
app.command("delete")(delete_command.delete_command)
app.command("stats")(stats_command.stats_command)
app.command("calendar")(calendar_command.calendar_command)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]RemindPro CLI[/bold] version [cyan]{__version__}[/cyan]")


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
