"""Command 'calendar' of remindpro-cli"""

from datetime import datetime
from typing import Annotated

import typer

from remindpro_cli.services.config_service import get_config_service
from remindpro_cli.services.context_manager import get_reminder_service
from remindpro_cli.utils.exit_codes import ERROR_INVALID_ARGS
from remindpro_cli.utils.ui.formatters import (
    format_calendar,
    format_calendar_agenda,
    format_output,
)

from .decorators import AppError, command_wrapper

app = typer.Typer()


def parse_month(value: str) -> tuple[int, int]:
    """Parse ``YYYY-MM`` into (year, month)."""
    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except ValueError as e:
        raise AppError(
            f"Invalid month '{value}', use YYYY-MM like 2024-01", ERROR_INVALID_ARGS
        ) from e
    return parsed.year, parsed.month


@app.command("calendar")
@command_wrapper
async def calendar_command(
    month: Annotated[
        str | None,
        typer.Argument(help="Month as YYYY-MM (default: current month)"),
    ] = None,
    agenda: Annotated[
        bool, typer.Option("--agenda", "-a", help="List busy days instead of a grid")
    ] = False,
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "pretty",
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
) -> None:
    """Show a month of reminders, recurring ones on every day they occur."""
    if json_opt:
        output = "json"

    service = get_reminder_service()
    today = service.engine.localize(service.clock.now()).date()
    year, month_number = parse_month(month) if month else (today.year, today.month)

    days = await service.calendar_month(year, month_number)
    data = {day.isoformat(): [view.to_dict() for view in views] for day, views in days.items()}

    if output in ("json", "yaml"):
        format_output(data, output)
    elif agenda:
        format_calendar_agenda(data, await service.category_lookup())
    else:
        format_calendar(
            data,
            week_start=get_config_service().config.ui.week_starts_on,
            today=today,
        )
