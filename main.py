#!/usr/bin/env python3
"""
grove-light - odczyt i edycja harmonogramu lampy do uprawy.

Uruchomienie:
    python main.py PAYLOAD [--intensity N] [--color N] [--sunrise HH:MM]
                           [--day-length GODZINY] [--location NAZWA] [--json]

Przykłady:
    python main.py status.json
    python main.py status.json --sunrise 06:00 --day-length 14
    python main.py status.json --intensity 8 --json
"""

import argparse
import json
import logging
import sys
from typing import Optional
from rich.console import Console
from rich.markup import escape

from grove_light.config import LOG_LEVELS, Config
from grove_light.decoder import decode_light
from grove_light.errors import PayloadError, ScheduleError
from grove_light.models import Location, ScheduleChanges
from grove_light.report import print_light
from grove_light.time_utils import parse_printable_time

console = Console()
logger = logging.getLogger("grove_light")


def _time_arg(value: str) -> int:
    try:
        return parse_printable_time(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parsuje argumenty wiersza poleceń."""
    parser = argparse.ArgumentParser(
        description="grove-light - stan i harmonogram lampy",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Przykłady użycia:
  python main.py status.json                          # Stan lampy
  python main.py status.json --day-length 14          # Dzień 14h od obecnego wschodu
  python main.py status.json --sunrise 06:30          # Nowy wschód
  python main.py status.json --json                   # Wynik jako JSON
        """
    )

    parser.add_argument(
        "payload",
        nargs="?",
        help="Plik JSON z raportem stanu (domyślnie: GROVE_PAYLOAD)"
    )

    parser.add_argument(
        "--intensity", "-i",
        type=int,
        help="Nowa jasność dnia"
    )

    parser.add_argument(
        "--color", "-c",
        type=int,
        help="Nowa temperatura barwowa dnia"
    )

    parser.add_argument(
        "--sunrise", "-s",
        type=_time_arg,
        help="Nowy początek wschodu (HH:MM)"
    )

    parser.add_argument(
        "--day-length", "-d",
        type=float,
        help="Nowa długość dnia w godzinach"
    )

    parser.add_argument(
        "--location", "-l",
        choices=[loc.value for loc in Location],
        help="Miejsce lampy (domyślnie: GROVE_LOCATION lub garden)"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Wypisz wynik jako JSON"
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Poziom logowania (domyślnie: GROVE_LOG_LEVEL lub WARNING)"
    )

    return parser.parse_args(argv)


def build_changes(args: argparse.Namespace) -> Optional[ScheduleChanges]:
    """Zamienia argumenty na zmiany harmonogramu, None gdy nic nie zmieniono."""
    day_length = None
    if args.day_length is not None:
        day_length = int(round(args.day_length * 3600))

    changes = ScheduleChanges(
        intensity=args.intensity,
        color=args.color,
        sunrise_begins=args.sunrise,
        day_length=day_length,
    )
    if changes == ScheduleChanges():
        return None
    return changes


def load_payload(path: str) -> dict:
    """Wczytuje raport stanu z pliku JSON."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def main(argv: Optional[list[str]] = None) -> int:
    """Główna funkcja programu."""
    args = parse_args(argv)

    try:
        config = Config.from_env()
    except ValueError as e:
        console.print(f"[red]Błędna konfiguracja: {escape(str(e))}[/red]")
        return 1

    if args.payload:
        config.payload_path = args.payload
    if args.location:
        config.location = Location(args.location)
    if args.log_level:
        config.log_level = args.log_level
    if args.json:
        config.json_output = True

    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    if not config.payload_path:
        console.print("[red]Nie podano pliku z raportem stanu (argument lub GROVE_PAYLOAD)[/red]")
        return 1

    try:
        payload = load_payload(config.payload_path)
    except (OSError, ValueError) as e:
        console.print(f"[red]Nie udało się wczytać {config.payload_path}: {escape(str(e))}[/red]")
        return 1

    try:
        light = decode_light(payload)
        logger.info(f"Odczytano stan lampy z {config.payload_path}")

        changes = build_changes(args)
        edited = light.schedule.apply(changes) if changes is not None else None
    except PayloadError as e:
        console.print(f"[red]Błąd raportu stanu: {escape(str(e))}[/red]")
        return 1
    except ScheduleError as e:
        console.print(f"[yellow]⚠ Nie można zmienić harmonogramu: {escape(str(e))}[/yellow]")
        return 1

    if config.json_output:
        result = {"light": light.model_dump(mode="json", by_alias=True)}
        if edited is not None:
            result["edited"] = edited.model_dump(mode="json", by_alias=True)
        console.print_json(json.dumps(result))
    else:
        print_light(console, light, location=config.location, edited=edited)

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        console.print("\n[bold red]Przerwano przez użytkownika[/bold red]")
        sys.exit(0)
