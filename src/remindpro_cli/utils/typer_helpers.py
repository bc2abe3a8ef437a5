"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from remindpro_cli.utils.exit_codes import ERROR_INVALID_ARGS
from remindpro_cli.utils.ui.console import get_console


class SuggestingGroup(TyperGroup):
    """Typer group that suggests the closest command on a typo."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            # typer raises its own usage error type here, not always click's
            if not args:
                raise
            attempted = args[0]
            suggestions = get_close_matches(
                attempted, list(self.commands), n=3, cutoff=0.6
            )
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[red]Error:[/red] unknown command "{attempted}" for "{ctx.info_name}"'
            )
            console.print()
            if len(suggestions) == 1:
                console.print("[yellow]Did you mean this?[/yellow]")
            else:
                console.print("[yellow]Did you mean one of these?[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            console.print(f"\n[dim]Run '{ctx.info_name} --help' for usage.[/dim]")
            raise typer.Exit(ERROR_INVALID_ARGS) from e
