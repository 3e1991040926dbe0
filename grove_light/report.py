"""
Wyświetlanie stanu lampy w konsoli (rich).
"""

from typing import Optional
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .models import Light, Location, Schedule
from .time_utils import to_printable_time


def _time(seconds: int) -> str:
    return to_printable_time(seconds) or "-"


def schedule_table(schedule: Schedule, title: str = "Harmonogram") -> Table:
    """Tabela z granicami faz i ustawieniami dnia i nocy."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Faza", style="cyan")
    table.add_column("Początek", justify="center")
    table.add_column("Ustawienia", justify="center")

    table.add_row("Wschód", _time(schedule.sunrise_begins), "-")
    table.add_row("Dzień", _time(schedule.day_begins), schedule.day.describe())
    table.add_row("Zachód", _time(schedule.sunset_begins), "-")
    table.add_row("Noc", _time(schedule.night_begins), schedule.night.describe())
    return table


def print_light(
    console: Console,
    light: Light,
    location: Optional[Location] = None,
    edited: Optional[Schedule] = None,
):
    """Wyświetla stan lampy i opcjonalnie harmonogram po edycji."""
    mode = light.mode.value if light.mode else "-"
    interruption = light.interruption
    if interruption is not None:
        inter_str = (
            f"[yellow]{interruption.setting.describe()}[/yellow] "
            f"({interruption.duration} min, zostało {interruption.seconds_left}s)"
        )
    else:
        inter_str = "[green]brak[/green]"

    title = "💡 Stan lampy"
    if location is not None:
        title += f" ({location.value})"

    console.print(Panel(
        f"[bold cyan]Tryb:[/bold cyan] {mode}\n"
        f"[bold cyan]Dzień:[/bold cyan] {light.schedule.printable_range() or '-'}\n"
        f"[bold cyan]Aktywne ustawienia:[/bold cyan] {light.active_settings.describe()}\n"
        f"[bold cyan]Przerwanie:[/bold cyan] {inter_str}",
        title=title,
        border_style="cyan"
    ))
    console.print(schedule_table(light.schedule))

    if edited is not None:
        console.print(schedule_table(edited, title="Harmonogram po zmianach"))
