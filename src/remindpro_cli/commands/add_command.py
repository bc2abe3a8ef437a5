"""Command 'add' of remindpro-cli"""

from datetime import datetime
from typing import Annotated

import typer

from remindpro_cli.models import ReminderCreate
from remindpro_cli.services.context_manager import get_reminder_service
from remindpro_cli.utils.exit_codes import ERROR_INVALID_ARGS
from remindpro_cli.utils.ui.console import get_console
from remindpro_cli.utils.ui.formatters import format_output, format_success, format_when

from .decorators import AppError, command_wrapper

app = typer.Typer()
console = get_console()


def parse_when(value: str) -> datetime:
    """Parse an ISO date or date-time; a bare date means 09:00 that day."""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise AppError(
            f"Invalid date/time '{value}', use ISO format like 2024-01-10T09:00",
            ERROR_INVALID_ARGS,
        ) from e
    if len(value) == 10:
        parsed = parsed.replace(hour=9)
    return parsed


@app.command("add")
@command_wrapper
async def add_command(
    title: Annotated[str, typer.Argument(help="Reminder title")],
    at: Annotated[
        str, typer.Option("--at", help="When, as YYYY-MM-DD or YYYY-MM-DDTHH:MM")
    ],
    category: Annotated[
        str, typer.Option("--category", "-c", help="Category id or name")
    ] = "personal",
    recurrence: Annotated[
        str,
        typer.Option(
            "--recurrence", "-r", help="one-time, daily, weekly, monthly or custom"
        ),
    ] = "one-time",
    rule: Annotated[
        str | None,
        typer.Option("--rule", help="RRULE text or pattern name for custom recurrence"),
    ] = None,
    priority: Annotated[
        int, typer.Option("--priority", "-p", help="Priority 1 (low) to 3 (high)")
    ] = 1,
    tags: Annotated[
        list[str] | None, typer.Option("--tag", "-t", help="Tag (repeatable)")
    ] = None,
    remind_before: Annotated[
        int | None,
        typer.Option("--remind-before", help="Minutes of advance warning"),
    ] = None,
    alert: Annotated[
        str,
        typer.Option("--alert", help="notification, sound, vibration, email or all"),
    ] = "notification",
    description: Annotated[
        str | None, typer.Option("--description", "-d", help="Description")
    ] = None,
    notes: Annotated[str | None, typer.Option("--notes", help="Notes")] = None,
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "pretty",
) -> None:
    """Create a new reminder."""
    service = get_reminder_service()
    (category_id,) = await service.resolve_category_ids([category])

    reminder_data = ReminderCreate(
        title=title,
        date_time=parse_when(at),
        category=category_id,
        recurrence=recurrence,
        recurrence_rule=rule,
        priority=priority,
        tags=tags or [],
        remind_before=remind_before,
        alert_type=alert,
        description=description,
        notes=notes,
    )
    view = await service.create(reminder_data)

    if output in ("json", "yaml"):
        format_output(view.to_dict(), output)
        return
    format_success(f"Created reminder #{view.reminder.id}: {view.reminder.title}")
    console.print(f"[dim]Next: {format_when(view.occurrence)} ({view.state})[/dim]")
