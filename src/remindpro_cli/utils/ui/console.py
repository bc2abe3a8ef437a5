"""Shared rich consoles for remindpro output."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Get the Rich Console used for human-readable output.

    Pass ``highlight=False`` for a console that leaves numbers and paths
    uncoloured.
    """
    return Console(highlight=highlight)


def print_data(text: str) -> None:
    """Print machine-readable text (JSON, YAML) verbatim.

    No markup, emoji codes, highlighting or wrapping is applied, so the
    output can be piped into other tools.
    """
    get_console(highlight=False).print(
        text, markup=False, emoji=False, highlight=False, soft_wrap=True
    )
