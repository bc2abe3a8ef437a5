"""Command 'delete' of remindpro-cli"""

from typing import Annotated

import typer

from remindpro_cli.services.context_manager import get_reminder_service
from remindpro_cli.utils.ui.formatters import format_success, format_warning

from .decorators import command_wrapper

app = typer.Typer()


@app.command("delete")
@command_wrapper
async def delete_command(
    reminder_ids: Annotated[
        list[int], typer.Argument(help="Reminder ID(s) - can specify multiple")
    ],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip confirmation")
    ] = False,
) -> None:
    """Delete one or more reminders."""
    service = get_reminder_service()

    if len(reminder_ids) == 1:
        (reminder_id,) = reminder_ids
        view = await service.get_view(reminder_id)
        prompt = f"Delete reminder #{reminder_id} '{view.reminder.title}'?"
    else:
        prompt = f"Delete {len(reminder_ids)} reminders ({', '.join(f'#{i}' for i in reminder_ids)})?"
    if not yes:
        confirm = typer.confirm(prompt)
        if not confirm:
            format_warning("Cancelled")
            raise typer.Exit(0)

    if len(reminder_ids) == 1:
        await service.delete(reminder_ids[0])
        format_success(f"Deleted reminder #{reminder_ids[0]}")
        return
    count = await service.bulk_delete(reminder_ids)
    format_success(f"Deleted {count} reminders")
