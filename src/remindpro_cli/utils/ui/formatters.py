"""Output formatters for different formats."""

import json
from datetime import date, datetime
from typing import Any

import yaml
from rich.table import Table
from rich.text import Text

from remindpro_cli.core.categories import CategoryInfo, resolve_category
from remindpro_cli.core.engine import Summary
from remindpro_cli.core.recurrence import describe_recurrence
from remindpro_cli.core.snooze import describe_snooze
from remindpro_cli.core.windows import start_of_week
from remindpro_cli.models.core import PRIORITY_NAMES
from remindpro_cli.utils.ui.console import get_console, print_data

console = get_console()

STATE_ORDER = ["overdue", "due-soon", "snoozed", "upcoming", "completed"]

STATE_ICONS = {
    "overdue": "⏱️ ",
    "due-soon": "🔔",
    "snoozed": "💤",
    "upcoming": "📅",
    "completed": "✅",
}

STATE_STYLES = {
    "overdue": "bold red",
    "due-soon": "bold yellow",
    "snoozed": "magenta",
    "upcoming": "cyan",
    "completed": "dim green",
}

STATE_TITLES = {
    "overdue": "OVERDUE",
    "due-soon": "DUE SOON",
    "snoozed": "SNOOZED",
    "upcoming": "UPCOMING",
    "completed": "COMPLETED",
}

PRIORITY_STYLES = {1: "blue", 2: "yellow", 3: "red"}


def format_output(
    data: Any,
    output_format: str = "pretty",
    compact: bool = False,
    categories: dict[str, CategoryInfo] | None = None,
) -> None:
    """Format and display reminder dicts based on format."""
    if output_format == "json":
        print_data(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print_data(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_table(data, categories or {})
    else:
        format_reminders_pretty(data, compact=compact, categories=categories or {})


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


def format_when(value: str | datetime | None) -> str:
    """Short local date/time, e.g. ``Wed Jan 10, 09:00``."""
    if not value:
        return "-"
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return value.strftime("%a %b %d, %H:%M")


def format_due_in(minutes: int | None) -> str:
    """Relative due time: ``in 10m``, ``2h ago``, ``now``."""
    if minutes is None:
        return ""
    if minutes == 0:
        return "now"
    magnitude = abs(minutes)
    if magnitude >= 1440:
        text = f"{magnitude // 1440}d"
    elif magnitude >= 60:
        text = f"{magnitude // 60}h"
    else:
        text = f"{magnitude}m"
    return f"in {text}" if minutes > 0 else f"{text} ago"


def format_table(items: list[dict], categories: dict[str, CategoryInfo]) -> None:
    """Format reminders as a table."""
    if not items:
        console.print("[yellow]No reminders found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    for column in ("ID", "Title", "When", "State", "Category", "Priority", "Repeats"):
        table.add_column(column)

    for item in items:
        state = item.get("state", "upcoming")
        category = resolve_category(categories, item.get("category", ""))
        priority = item.get("priority", 1)
        table.add_row(
            str(item.get("id", "")),
            item.get("title", ""),
            format_when(item.get("occurrence") or item.get("date_time")),
            Text(state, style=STATE_STYLES.get(state, "")),
            category.name,
            Text(PRIORITY_NAMES.get(priority, str(priority)), style=PRIORITY_STYLES.get(priority, "")),
            describe_recurrence(item.get("recurrence", "one-time"), item.get("recurrence_rule")),
        )

    console.print(table)


def format_reminders_pretty(
    items: list[dict],
    compact: bool = False,
    categories: dict[str, CategoryInfo] | None = None,
) -> None:
    """Format reminders grouped by lifecycle state, keeping their order inside a group."""
    categories = categories or {}
    if not items:
        console.print("[green]No reminders found! 🎉[/green]")
        return

    active = [i for i in items if i.get("state") != "completed"]
    header = Text()
    header.append("🔔 Reminders ", style="bold cyan")
    header.append(f"({len(active)} active, {len(items) - len(active)} completed)", style="dim")
    console.print(header)
    console.print()

    for state in STATE_ORDER:
        group = [i for i in items if i.get("state") == state]
        if not group:
            continue
        console.print(
            f"{STATE_ICONS[state]} {STATE_TITLES[state]} ({len(group)})",
            style=STATE_STYLES[state],
        )
        for item in group:
            format_reminder_item(item, compact=compact, indent="  ", categories=categories)
        console.print()


def format_reminder_item(
    item: dict,
    compact: bool = False,
    indent: str = "",
    categories: dict[str, CategoryInfo] | None = None,
) -> None:
    """Format a single reminder line (plus a metadata line unless compact)."""
    state = item.get("state", "upcoming")
    category = resolve_category(categories or {}, item.get("category", ""))
    title = item.get("title", "Untitled")
    when = format_when(item.get("occurrence"))

    line = Text(indent)
    line.append(f"#{item.get('id')} ", style="dim")
    line.append(title, style="dim" if state == "completed" else ("bold" if item.get("priority", 1) >= 3 else ""))
    line.append(f"  {when}", style=STATE_STYLES.get(state, ""))
    if compact:
        console.print(line)
        return

    tags = item.get("tags") or []
    if tags:
        line.append("  " + " ".join(f"#{tag}" for tag in tags), style="blue")
    console.print(line)

    meta = [f"{category.emoji or ''} {category.name}".strip()]
    due = format_due_in(item.get("due_in_minutes"))
    if due and state != "completed":
        meta.append(due)
    if item.get("recurrence", "one-time") != "one-time":
        meta.append(describe_recurrence(item["recurrence"], item.get("recurrence_rule")))
    if state == "snoozed" and item.get("snooze_until"):
        meta.append(f"snoozed until {format_when(item['snooze_until'])}")
    console.print(Text(f"{indent}   └─ " + " • ".join(meta), style="dim"))


def format_reminder_detail(
    item: dict,
    categories: dict[str, CategoryInfo],
    snooze_presets: list[int] | tuple[int, ...] = (),
) -> None:
    """Show every field of one reminder.

    Overdue and due-soon reminders also list the snooze presets.
    """
    state = item.get("state", "upcoming")
    category = resolve_category(categories, item.get("category", ""))
    priority = item.get("priority", 1)

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("ID", str(item.get("id")))
    table.add_row("Title", item.get("title", ""))
    if item.get("description"):
        table.add_row("Description", item["description"])
    table.add_row("State", Text(state, style=STATE_STYLES.get(state, "")))
    table.add_row("Occurrence", f"{format_when(item.get('occurrence'))} ({format_due_in(item.get('due_in_minutes'))})")
    table.add_row("Anchor", format_when(item.get("date_time")))
    table.add_row("Repeats", describe_recurrence(item.get("recurrence", "one-time"), item.get("recurrence_rule")))
    table.add_row("Category", f"{category.emoji or ''} {category.name}".strip())
    table.add_row("Priority", PRIORITY_NAMES.get(priority, str(priority)))
    table.add_row("Alert", item.get("alert_type", ""))
    if item.get("remind_before") is not None:
        table.add_row("Remind before", f"{item['remind_before']} min")
    if item.get("snooze_until"):
        table.add_row("Snoozed until", format_when(item["snooze_until"]))
    if item.get("tags"):
        table.add_row("Tags", ", ".join(item["tags"]))
    if item.get("notes"):
        table.add_row("Notes", item["notes"])
    if item.get("actionable") and snooze_presets:
        options = " • ".join(describe_snooze(minutes) for minutes in snooze_presets)
        table.add_row("Snooze", f"{options}  (remindpro snooze {item.get('id')} -m MINUTES)")
    console.print(table)


def get_progress_bar(percentage: float) -> str:
    """Get a progress bar representation."""
    filled = int(percentage / 10)
    empty = 10 - filled
    return "▓" * filled + "░" * empty


def get_completion_color(percentage: float) -> str:
    """Get color based on completion percentage."""
    if percentage >= 80:
        return "green"
    if percentage >= 40:
        return "yellow"
    return "red"


def summary_to_dict(summary: Summary) -> dict:
    return {
        "total": summary.total,
        "completion_rate": summary.completion_rate,
        "states": summary.states,
        "progress": {
            window: {
                "completed": item.completed,
                "total": item.total,
                "percentage": item.percentage,
            }
            for window, item in summary.progress.items()
        },
        "categories": [
            {
                "id": entry.category.id,
                "name": entry.category.name,
                "count": entry.count,
                "completed": entry.completed,
            }
            for entry in summary.categories
        ],
    }


def format_summary(summary: Summary) -> None:
    """Dashboard view of reminder statistics."""
    console.print("[bold cyan]📊 Progress[/bold cyan]")
    for item in summary.progress.values():
        color = get_completion_color(item.percentage)
        console.print(
            f"  {item.label:<11} [{color}]{get_progress_bar(item.percentage)}[/{color}] "
            f"{item.completed}/{item.total} ({item.percentage}%)"
        )
    console.print()

    console.print("[bold cyan]🔔 Status[/bold cyan]")
    for state in STATE_ORDER:
        console.print(
            f"  {STATE_ICONS[state]} {STATE_TITLES[state].title():<10} {summary.states.get(state, 0)}",
            style=STATE_STYLES[state],
        )
    console.print()

    if summary.categories:
        console.print("[bold cyan]🗂  Categories[/bold cyan]")
        for entry in summary.categories:
            label = f"{entry.category.emoji or ''} {entry.category.name}".strip()
            console.print(f"  {label:<16} {entry.completed}/{entry.count} completed")
        console.print()

    console.print(
        f"[bold]Total:[/bold] {summary.total} reminders, "
        f"{summary.completion_rate}% completed"
    )


def _weekday_names(week_start: str) -> list[str]:
    names = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    return names if week_start == "monday" else names[-1:] + names[:-1]


def format_calendar(
    days: dict[str, list[dict]],
    week_start: str = "sunday",
    today: date | None = None,
    max_per_day: int = 3,
) -> None:
    """Month grid with the reminders of each day.

    ``days`` maps ISO dates of one month, in order, to reminder dicts.
    """
    dates = [date.fromisoformat(key) for key in days]
    if not dates:
        return
    first = dates[0]

    table = Table(
        title=first.strftime("%B %Y"),
        title_style="bold cyan",
        show_lines=True,
        expand=True,
    )
    for name in _weekday_names(week_start):
        table.add_column(name, vertical="top", ratio=1)

    cells: list[Text] = [Text("") for _ in range((first - start_of_week(first, week_start)).days)]
    for day, key in zip(dates, days):
        cell = Text(str(day.day), style="bold reverse" if day == today else "bold")
        items = days[key]
        for item in items[:max_per_day]:
            state = item.get("state", "upcoming")
            when = datetime.fromisoformat(item["occurrence"]).strftime("%H:%M")
            cell.append(f"\n{when} {item.get('title', '')}", style=STATE_STYLES.get(state, ""))
        if len(items) > max_per_day:
            cell.append(f"\n+{len(items) - max_per_day} more", style="dim")
        cells.append(cell)

    while len(cells) % 7:
        cells.append(Text(""))
    for week in range(0, len(cells), 7):
        table.add_row(*cells[week : week + 7])
    console.print(table)


def format_calendar_agenda(
    days: dict[str, list[dict]],
    categories: dict[str, CategoryInfo] | None = None,
) -> None:
    """Day-by-day list of the days that have reminders."""
    busy = {key: items for key, items in days.items() if items}
    if not busy:
        console.print("[green]No reminders this month[/green]")
        return
    for key, items in busy.items():
        console.print(f"[bold cyan]{date.fromisoformat(key):%a %b %d}[/bold cyan]")
        for item in items:
            format_reminder_item(item, indent="  ", categories=categories)
        console.print()
