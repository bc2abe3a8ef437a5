"""Command 'snooze' of remindpro-cli"""

from typing import Annotated

import typer

from remindpro_cli.core.snooze import describe_snooze
from remindpro_cli.services.config_service import get_config_service
from remindpro_cli.services.context_manager import get_reminder_service
from remindpro_cli.utils.ui.formatters import format_success, format_when

from .decorators import command_wrapper

app = typer.Typer()


@app.command("snooze")
@command_wrapper
async def snooze_command(
    reminder_id: Annotated[int, typer.Argument(help="Reminder ID")],
    minutes: Annotated[
        int | None,
        typer.Option(
            "--minutes", "-m", help="Minutes to snooze (default: first configured preset)"
        ),
    ] = None,
    clear: Annotated[
        bool, typer.Option("--clear", help="Remove an active snooze")
    ] = False,
) -> None:
    """Postpone a reminder's alert for a number of minutes."""
    service = get_reminder_service()
    if clear:
        view = await service.clear_snooze(reminder_id)
        format_success(f"Snooze cleared for #{reminder_id} ({view.state})")
        return

    if minutes is None:
        minutes = get_config_service().config.reminders.snooze_presets[0]
    view = await service.snooze(reminder_id, minutes)
    format_success(
        f"Snoozed #{reminder_id} for {describe_snooze(minutes)}, "
        f"until {format_when(view.reminder.snooze_until)}"
    )
