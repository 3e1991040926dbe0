"""
Dekodowanie raportu stanu urządzenia (JSON) do modeli lampy.

Payload przychodzi jako nieotypowane drzewo słowników i list, więc każdy
kształt ma osobną funkcję wyciągającą. Pierwszy brakujący lub zepsuty
klucz przerywa dekodowanie - nie ma częściowych wyników.

Format:
    {
        "sched": {"day": [int, int], "night": [int, int], "times": [int, int, int, int]},
        "mode": "SCHED_SS" | "FADEtoSCHED" | "INTER_SS" | "FADEtoINTER" | "WAITbfINTER",
        "inter": {"ls": [int, int], "dur": int, "secsLeft": int}
    }
"""

import logging
from typing import Any, Mapping

from .errors import InvalidValueError, MissingFieldError
from .models import (
    Interruption,
    Light,
    LightMode,
    Schedule,
    Settings,
    has_night_window,
)

logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    # bool dziedziczy po int, a w JSON to osobny typ
    return isinstance(value, int) and not isinstance(value, bool)


def _require_mapping(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = payload.get(key)
    if not isinstance(value, Mapping):
        raise MissingFieldError(key)
    return value


def _require_int(payload: Mapping[str, Any], key: str) -> int:
    value = payload.get(key)
    if not _is_int(value):
        raise MissingFieldError(key)
    return value


def _require_int_list(payload: Mapping[str, Any], key: str) -> list[int]:
    value = payload.get(key)
    if not isinstance(value, (list, tuple)) or not all(_is_int(v) for v in value):
        raise MissingFieldError(key)
    return list(value)


def decode_settings(payload: Mapping[str, Any], key: str) -> Settings:
    """Dekoduje ustawienia zapisane pod kluczem jako [intensity, colorTemp]."""
    values = _require_int_list(payload, key)
    if len(values) < 2:
        raise InvalidValueError(key, values)
    return Settings.from_compact_form(values)


def decode_schedule(payload: Mapping[str, Any]) -> Schedule:
    """
    Dekoduje harmonogram.

    Pole "times" to kolejno: wschód, dzień, zachód, noc (sekundy od północy).
    Raport z nocą bliżej niż godzinę od wschodu jest celowo odrzucany, tak
    jak edycja harmonogramu.

    Raises:
        MissingFieldError: brak "day", "night" lub "times"
        InvalidValueError: za mało wartości albo za krótka noc
    """
    day = decode_settings(payload, "day")
    night = decode_settings(payload, "night")
    times = _require_int_list(payload, "times")
    logger.debug("times: %s", times)

    if len(times) < 4:
        raise InvalidValueError("times", times)
    sunrise_begins, day_begins, sunset_begins, night_begins = times[:4]
    if not has_night_window(sunrise_begins, night_begins):
        raise InvalidValueError("times", times)

    return Schedule(
        day=day,
        night=night,
        sunrise_begins=sunrise_begins,
        day_begins=day_begins,
        sunset_begins=sunset_begins,
        night_begins=night_begins,
    )


def decode_interruption(payload: Mapping[str, Any]) -> Interruption:
    """Dekoduje aktywne przerwanie ("ls", "dur", "secsLeft")."""
    setting = decode_settings(payload, "ls")
    duration = _require_int(payload, "dur")
    seconds_left = _require_int(payload, "secsLeft")
    return Interruption(setting=setting, duration=duration, seconds_left=seconds_left)


def decode_light(payload: Mapping[str, Any]) -> Light:
    """
    Dekoduje pełny stan lampy.

    Tryby SCHED_SS i FADEtoSCHED nie mają przerwania. Tryby INTER_SS,
    FADEtoINTER i WAITbfINTER wymagają pola "inter". Harmonogram jest
    dekodowany zawsze.

    Args:
        payload: Słownik z raportu urządzenia

    Returns:
        Zwalidowany stan lampy

    Raises:
        MissingFieldError: brak wymaganego pola
        InvalidValueError: nieznany tryb lub niepoprawna wartość
    """
    if not isinstance(payload, Mapping):
        raise InvalidValueError("payload", payload)

    schedule_json = _require_mapping(payload, "sched")

    raw_mode = payload.get("mode")
    if not isinstance(raw_mode, str):
        raise MissingFieldError("mode")
    try:
        mode = LightMode(raw_mode)
    except ValueError:
        raise InvalidValueError("mode", raw_mode) from None

    interruption = None
    if mode.has_interruption:
        interruption = decode_interruption(_require_mapping(payload, "inter"))

    schedule = decode_schedule(schedule_json)
    logger.debug("Zdekodowano stan lampy: tryb %s, %s", mode.value, schedule.printable_range())

    return Light(schedule=schedule, interruption=interruption, mode=mode)
