"""Command 'stats' of remindpro-cli"""

from typing import Annotated

import typer

from remindpro_cli.services.context_manager import get_reminder_service
from remindpro_cli.utils.ui.formatters import (
    format_output,
    format_summary,
    summary_to_dict,
)

from .decorators import command_wrapper

app = typer.Typer()


@app.command("stats")
@command_wrapper
async def stats_command(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "pretty",
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
) -> None:
    """Show completion progress, lifecycle counts and category breakdown."""
    if json_opt:
        output = "json"

    summary = await get_reminder_service().summary()
    if output in ("json", "yaml"):
        format_output(summary_to_dict(summary), output)
        return
    format_summary(summary)
