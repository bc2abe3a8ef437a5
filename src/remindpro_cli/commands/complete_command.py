"""Command 'complete' of remindpro-cli"""

from typing import Annotated

import typer

from remindpro_cli.services.context_manager import get_reminder_service
from remindpro_cli.utils.ui.console import get_console
from remindpro_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("complete")
@command_wrapper
async def complete_command(
    reminder_ids: Annotated[
        list[int], typer.Argument(help="Reminder ID(s) - can specify multiple")
    ],
) -> None:
    """Toggle the completed flag of one or more reminders."""
    service = get_reminder_service()
    for reminder_id in reminder_ids:
        view = await service.toggle_completion(reminder_id)
        title = view.reminder.title
        if len(title) > 60:
            title = title[:57] + "..."
        if view.reminder.completed:
            format_success(f"✓ Completed: {title}")
            console.print(f"[dim]To undo: remindpro complete {reminder_id}[/dim]")
        else:
            format_success(f"Reopened: {title} ({view.state})")
