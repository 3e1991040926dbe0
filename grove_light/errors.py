"""
Wyjątki rzucane przy dekodowaniu stanu lampy i edycji harmonogramu.

Błędy dekodowania (PayloadError) i błędy edycji (ScheduleError) to osobne
gałęzie, żeby UI mógł pokazać walidację edycji inaczej niż zepsuty payload.
"""

from typing import Any


class LightError(Exception):
    """Bazowy wyjątek pakietu."""


class PayloadError(LightError):
    """Błąd dekodowania payloadu urządzenia."""

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key


class MissingFieldError(PayloadError):
    """Brak wymaganego klucza albo klucz ma zły kształt."""

    def __init__(self, key: str):
        super().__init__(key, f"Brak pola '{key}' w payloadzie")

    def __eq__(self, other: object) -> bool:
        return type(other) is MissingFieldError and other.key == self.key

    def __hash__(self) -> int:
        return hash((MissingFieldError, self.key))


class InvalidValueError(PayloadError):
    """Pole istnieje, ale jego wartość nie jest akceptowana."""

    def __init__(self, key: str, value: Any):
        super().__init__(key, f"Niepoprawna wartość pola '{key}': {value!r}")
        self.value = value

    def __eq__(self, other: object) -> bool:
        return (
            type(other) is InvalidValueError
            and other.key == self.key
            and other.value == self.value
        )

    def __hash__(self) -> int:
        return hash((InvalidValueError, self.key, repr(self.value)))


class ScheduleError(LightError):
    """Błąd edycji harmonogramu."""


class DayLengthTooShortError(ScheduleError):
    """Między wschodem a nocą zostałoby mniej niż godzina."""

    def __init__(self, sunrise_begins: int, night_begins: int):
        super().__init__(
            f"Za krótki dzień: wschód {sunrise_begins}s, noc {night_begins}s"
        )
        self.sunrise_begins = sunrise_begins
        self.night_begins = night_begins
