"""Command 'edit' of remindpro-cli"""

from typing import Annotated

import typer

from remindpro_cli.models import ReminderUpdate
from remindpro_cli.services.context_manager import get_reminder_service
from remindpro_cli.utils.exit_codes import ERROR_INVALID_ARGS
from remindpro_cli.utils.ui.console import get_console
from remindpro_cli.utils.ui.formatters import format_output, format_success, format_when

from .add_command import parse_when
from .decorators import AppError, command_wrapper

app = typer.Typer()
console = get_console()


@app.command("edit")
@command_wrapper
async def edit_command(
    reminder_ids: Annotated[
        list[int], typer.Argument(help="Reminder ID(s) - several apply the same change")
    ],
    title: Annotated[str | None, typer.Option("--title", help="New title")] = None,
    at: Annotated[
        str | None,
        typer.Option("--at", help="New time, as YYYY-MM-DD or YYYY-MM-DDTHH:MM"),
    ] = None,
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Category id or name")
    ] = None,
    recurrence: Annotated[
        str | None,
        typer.Option(
            "--recurrence", "-r", help="one-time, daily, weekly, monthly or custom"
        ),
    ] = None,
    rule: Annotated[
        str | None,
        typer.Option("--rule", help="RRULE text or pattern name for custom recurrence"),
    ] = None,
    priority: Annotated[
        int | None, typer.Option("--priority", "-p", help="Priority 1 (low) to 3 (high)")
    ] = None,
    tags: Annotated[
        list[str] | None,
        typer.Option("--tag", "-t", help="Replace tags (repeatable)"),
    ] = None,
    remind_before: Annotated[
        int | None,
        typer.Option("--remind-before", help="Minutes of advance warning"),
    ] = None,
    alert: Annotated[
        str | None,
        typer.Option("--alert", help="notification, sound, vibration, email or all"),
    ] = None,
    description: Annotated[
        str | None, typer.Option("--description", "-d", help="Description")
    ] = None,
    notes: Annotated[str | None, typer.Option("--notes", help="Notes")] = None,
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "pretty",
) -> None:
    """Change fields of one or more reminders."""
    service = get_reminder_service()

    changes = {
        "title": title,
        "category": category,
        "recurrence": recurrence,
        "recurrence_rule": rule,
        "priority": priority,
        "tags": tags,
        "remind_before": remind_before,
        "alert_type": alert,
        "description": description,
        "notes": notes,
    }
    changes = {key: value for key, value in changes.items() if value is not None}
    if at is not None:
        changes["date_time"] = parse_when(at)
    if category is not None:
        (changes["category"],) = await service.resolve_category_ids([category])
    if not changes:
        raise AppError("No updates provided", ERROR_INVALID_ARGS)

    updates = ReminderUpdate(**changes)
    if len(reminder_ids) == 1:
        views = [await service.update(reminder_ids[0], updates)]
    else:
        views = await service.bulk_update(reminder_ids, updates)

    if output in ("json", "yaml"):
        format_output([view.to_dict() for view in views], output)
        return
    for view in views:
        format_success(f"Updated #{view.reminder.id}: {view.reminder.title}")
        console.print(f"[dim]Next: {format_when(view.occurrence)} ({view.state})[/dim]")
