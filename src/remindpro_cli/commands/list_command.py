"""Command 'list' of remindpro-cli"""

from datetime import datetime
from typing import Annotated

import typer

from remindpro_cli.models import ReminderFilters
from remindpro_cli.services.config_service import get_config_service
from remindpro_cli.services.context_manager import get_reminder_service
from remindpro_cli.utils.exit_codes import ERROR_INVALID_ARGS
from remindpro_cli.utils.ui.formatters import format_output

from .decorators import AppError, command_wrapper

app = typer.Typer()


@app.command("list")
@command_wrapper
async def list_command(
    search: Annotated[
        str, typer.Option("--search", "-s", help="Search title, description, notes and tags")
    ] = "",
    window: Annotated[
        str,
        typer.Option(
            "--window",
            "-w",
            help="all, today, tomorrow, this-week, this-month, overdue or custom",
        ),
    ] = "all",
    date_from: Annotated[
        datetime | None,
        typer.Option("--from", help="Start day of the custom window", formats=["%Y-%m-%d"]),
    ] = None,
    date_to: Annotated[
        datetime | None,
        typer.Option("--to", help="End day of the custom window", formats=["%Y-%m-%d"]),
    ] = None,
    category: Annotated[
        list[str] | None,
        typer.Option("--category", "-c", help="Category id or name (repeatable)"),
    ] = None,
    status: Annotated[
        str, typer.Option("--status", help="all, completed or incomplete")
    ] = "all",
    priority: Annotated[
        list[int] | None,
        typer.Option("--priority", "-p", help="Priority level 1-3 (repeatable)"),
    ] = None,
    limit: Annotated[
        int | None, typer.Option("--limit", "-n", help="Maximum number of reminders")
    ] = None,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Output format")
    ] = None,
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
    compact: Annotated[bool, typer.Option("--compact", help="Compact output")] = False,
) -> None:
    """List reminders with their current state."""
    config = get_config_service().config
    output = "json" if json_opt else (output or config.output.format)
    compact = compact or config.output.compact

    if date_to is not None and date_from is None:
        raise AppError("--to needs --from", ERROR_INVALID_ARGS)
    if date_from is not None and window == "all":
        window = "custom"
    if status == "all" and not config.reminders.show_completed:
        status = "incomplete"

    service = get_reminder_service()
    custom_range = None
    if date_from is not None:
        custom_range = {"start": date_from, "end": date_to}

    filters = ReminderFilters(
        search_text=search,
        time_window=window,
        custom_range=custom_range,
        categories=await service.resolve_category_ids(category or []),
        completion=status,
        priorities=set(priority or []),
    )
    views = await service.list_view(filters, limit=limit)
    format_output(
        [view.to_dict() for view in views],
        output,
        compact=compact,
        categories=await service.category_lookup(),
    )
