"""
Czas w obrębie doby liczony w sekundach od północy.
"""

from typing import Optional

Seconds = int

# Długość cyklu - jedyna definicja w pakiecie
DAY_LENGTH: Seconds = 24 * 60 * 60


def normalize(seconds: Seconds) -> Seconds:
    """Sprowadza wartość do zakresu [0, DAY_LENGTH), także dla ujemnych."""
    return seconds % DAY_LENGTH


def to_printable_time(seconds: Seconds) -> Optional[str]:
    """
    Formatuje czas jako HH:MM (24h).

    Returns:
        Tekst albo None, gdy wartość jest poza zakresem doby
    """
    if not 0 <= seconds < DAY_LENGTH:
        return None
    hours, rest = divmod(seconds, 3600)
    return f"{hours:02d}:{rest // 60:02d}"


def parse_printable_time(text: str) -> Seconds:
    """Odwrotność to_printable_time: "06:30" -> 23400."""
    hours, sep, minutes = text.strip().partition(":")
    if not sep or not hours.isdigit() or not minutes.isdigit():
        raise ValueError(f"Niepoprawny format czasu: {text!r} (oczekiwano HH:MM)")
    h, m = int(hours), int(minutes)
    if not (0 <= h <= 23 and 0 <= m <= 59):
        raise ValueError(f"Czas poza zakresem doby: {text!r}")
    return h * 3600 + m * 60


def cyclic_distance(a: Seconds, b: Seconds) -> Seconds:
    """Najkrótsza odległość między dwoma punktami doby (przez północ też)."""
    diff = normalize(a - b)
    return min(diff, DAY_LENGTH - diff)
