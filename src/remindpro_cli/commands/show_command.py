"""Command 'show' of remindpro-cli"""

from typing import Annotated

import typer

from remindpro_cli.services.config_service import get_config_service
from remindpro_cli.services.context_manager import get_reminder_service
from remindpro_cli.utils.ui.formatters import format_output, format_reminder_detail

from .decorators import command_wrapper

app = typer.Typer()


@app.command("show")
@command_wrapper
async def show_command(
    reminder_id: Annotated[int, typer.Argument(help="Reminder ID")],
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "pretty",
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
) -> None:
    """Show a reminder with its resolved occurrence and state."""
    if json_opt:
        output = "json"

    service = get_reminder_service()
    view = await service.get_view(reminder_id)
    if output in ("json", "yaml"):
        format_output(view.to_dict(), output)
        return
    format_reminder_detail(
        view.to_dict(),
        await service.category_lookup(),
        snooze_presets=get_config_service().config.reminders.snooze_presets,
    )
