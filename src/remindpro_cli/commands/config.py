"""Configuration management commands."""

import json
from typing import Annotated, Any

import typer

from remindpro_cli.services.config_service import get_config_service
from remindpro_cli.utils.logger import get_log_path
from remindpro_cli.utils.ui.console import get_console, print_data
from remindpro_cli.utils.ui.formatters import format_output, format_success, format_warning

from .decorators import command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


def parse_value(value: str) -> Any:
    """Interpret a CLI value as JSON when it parses, else as a plain string."""
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


@app.command("show")
@command_wrapper
def show_config(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "yaml",
) -> None:
    """Show the current configuration."""
    config_service = get_config_service()
    data = config_service.config.model_dump()
    if output not in ("json", "yaml"):
        output = "yaml"
    format_output(data, output)
    console.print(f"[dim]Config: {config_service.config_path}[/dim]")
    console.print(f"[dim]Log: {get_log_path()}[/dim]")


@app.command("get")
@command_wrapper
def get_config(
    key: Annotated[str, typer.Argument(help="Configuration key (e.g., ui.week_starts_on)")],
) -> None:
    """Get a configuration value."""
    value = get_config_service().get(key)
    if hasattr(value, "model_dump"):
        format_output(value.model_dump(), "yaml")
    else:
        print_data(json.dumps(value))


@app.command("set")
@command_wrapper
def set_config(
    key: Annotated[str, typer.Argument(help="Configuration key (e.g., ui.timezone)")],
    value: Annotated[str, typer.Argument(help="Configuration value (JSON or text)")],
) -> None:
    """Set a configuration value."""
    parsed_value = parse_value(value)
    get_config_service().set(key, parsed_value)
    format_success(f"Configuration '{key}' set to {json.dumps(parsed_value)}")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Annotated[
        str | None, typer.Argument(help="Configuration key to reset")
    ] = None,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip confirmation")
    ] = False,
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        confirm = typer.confirm(f"Are you sure you want to reset {msg}?")
        if not confirm:
            format_warning("Cancelled")
            raise typer.Exit(0)

    get_config_service().reset_config(key)
    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
