"""
Modele danych lampy.
Ustawienia, harmonogram dnia i nocy, przerwanie oraz stan całej lampy.
"""

from enum import Enum
from typing import Optional, Sequence
from pydantic import BaseModel, Field, model_validator

from .errors import DayLengthTooShortError, InvalidValueError
from .time_utils import Seconds, cyclic_distance, normalize, to_printable_time

# Minimalny odstęp między wschodem a nocą
MIN_NIGHT_WINDOW: Seconds = 60 * 60

# Zachód zaczyna się pół godziny przed nocą
SUNSET_LEAD: Seconds = 30 * 60


def has_night_window(sunrise_begins: Seconds, night_begins: Seconds) -> bool:
    """Sprawdza czy wschód i noc dzieli co najmniej MIN_NIGHT_WINDOW."""
    return cyclic_distance(night_begins, sunrise_begins) >= MIN_NIGHT_WINDOW


class Location(str, Enum):
    """Miejsce, w którym stoi lampa."""
    GARDEN = "garden"
    SEEDLING = "seedling"
    AQUARIUM = "aquarium"


class LightMode(str, Enum):
    """Tryb raportowany przez urządzenie."""
    SCHEDULE = "SCHED_SS"
    FADE_TO_SCHEDULE = "FADEtoSCHED"
    INTERRUPTION = "INTER_SS"
    FADE_TO_INTERRUPTION = "FADEtoINTER"
    WAIT_BEFORE_INTERRUPTION = "WAITbfINTER"

    @property
    def has_interruption(self) -> bool:
        return self in (
            LightMode.INTERRUPTION,
            LightMode.FADE_TO_INTERRUPTION,
            LightMode.WAIT_BEFORE_INTERRUPTION,
        )


class Phase(str, Enum):
    """Faza cyklu dobowego."""
    SUNRISE = "sunrise"
    DAY = "day"
    SUNSET = "sunset"
    NIGHT = "night"


class Preset(str, Enum):
    """Gotowe ustawienia do typowych zastosowań."""
    OFF = "off"
    HARVEST = "harvest"
    MOVIE = "movie"
    PHOTO = "photo"

    @property
    def settings(self) -> "Settings":
        return PRESETS[self][0]

    @property
    def duration(self) -> int:
        """Czas trwania w minutach, po którym lampa wraca do harmonogramu."""
        return PRESETS[self][1]


class Settings(BaseModel):
    """Jasność i temperatura barwowa."""
    intensity: int
    color_temp: int = Field(alias="colorTemp")

    class Config:
        populate_by_name = True
        frozen = True

    @classmethod
    def from_compact_form(cls, values: Sequence[int]) -> "Settings":
        """Tworzy ustawienia z pary [intensity, colorTemp]."""
        if len(values) < 2:
            raise InvalidValueError("settings", list(values))
        return cls(intensity=values[0], color_temp=values[1])

    @classmethod
    def preset(cls, preset: Preset) -> "Settings":
        return preset.settings

    def describe(self) -> str:
        return f"{self.intensity:03d}:{self.color_temp:03d}"


PRESETS: dict[Preset, tuple[Settings, int]] = {
    Preset.OFF: (Settings(intensity=0, color_temp=100), 30),
    Preset.HARVEST: (Settings(intensity=10, color_temp=100), 30),
    Preset.MOVIE: (Settings(intensity=1, color_temp=0), 120),
    Preset.PHOTO: (Settings(intensity=5, color_temp=50), 10),
}


class ScheduleChanges(BaseModel):
    """Zmiany harmonogramu - None oznacza "zostaw obecną wartość"."""
    intensity: Optional[int] = None
    color: Optional[int] = None
    sunrise_begins: Optional[Seconds] = None
    day_length: Optional[Seconds] = None

    class Config:
        frozen = True


class Schedule(BaseModel):
    """Harmonogram dnia i nocy z czterema granicami faz."""
    day: Settings
    night: Settings
    sunrise_begins: Seconds = Field(alias="sunriseBegins")
    day_begins: Seconds = Field(alias="dayBegins")
    sunset_begins: Seconds = Field(alias="sunsetBegins")
    night_begins: Seconds = Field(alias="nightBegins")

    class Config:
        populate_by_name = True
        frozen = True

    @model_validator(mode="after")
    def check_night_window(self) -> "Schedule":
        if not has_night_window(self.sunrise_begins, self.night_begins):
            raise ValueError(
                f"Wschód ({self.sunrise_begins}s) i noc ({self.night_begins}s) "
                f"muszą dzielić co najmniej {MIN_NIGHT_WINDOW}s"
            )
        return self

    def printable_range(self) -> str:
        """Zakres "HH:MM - HH:MM" od wschodu do nocy, pusty gdy nie da się sformatować."""
        sunrise = to_printable_time(self.sunrise_begins)
        night = to_printable_time(self.night_begins)
        if sunrise is None or night is None:
            return ""
        return f"{sunrise} - {night}"

    def with_changes(
        self,
        intensity: Optional[int] = None,
        color: Optional[int] = None,
        sunrise_begins: Optional[Seconds] = None,
        day_length: Optional[Seconds] = None,
    ) -> "Schedule":
        """Skrót dla apply() z argumentami nazwanymi."""
        return self.apply(ScheduleChanges(
            intensity=intensity,
            color=color,
            sunrise_begins=sunrise_begins,
            day_length=day_length,
        ))

    def apply(self, changes: ScheduleChanges) -> "Schedule":
        """
        Zwraca nowy harmonogram z naniesionymi zmianami.

        Podanie day_length przelicza noc (wschód + długość dnia) i zachód
        (pół godziny przed nocą). Ustawienia nocy i początek dnia nie są
        zmieniane.

        Raises:
            DayLengthTooShortError: gdy wschód i noc dzieli mniej niż godzina
        """
        day = Settings(
            intensity=self.day.intensity if changes.intensity is None else changes.intensity,
            color_temp=self.day.color_temp if changes.color is None else changes.color,
        )
        sunrise_begins = (
            self.sunrise_begins if changes.sunrise_begins is None else changes.sunrise_begins
        )

        if changes.day_length is None:
            night_begins = self.night_begins
            sunset_begins = self.sunset_begins
        else:
            night_begins = normalize(sunrise_begins + changes.day_length)
            sunset_begins = normalize(night_begins - SUNSET_LEAD)

        if not has_night_window(sunrise_begins, night_begins):
            raise DayLengthTooShortError(sunrise_begins, night_begins)

        return Schedule(
            day=day,
            night=self.night,
            sunrise_begins=sunrise_begins,
            day_begins=self.day_begins,
            sunset_begins=sunset_begins,
            night_begins=night_begins,
        )

    def phase_at(self, seconds: Seconds) -> Phase:
        """Faza, której granica minęła najpóźniej przed podanym czasem."""
        boundaries = (
            (Phase.SUNRISE, self.sunrise_begins),
            (Phase.DAY, self.day_begins),
            (Phase.SUNSET, self.sunset_begins),
            (Phase.NIGHT, self.night_begins),
        )
        current, best = Phase.NIGHT, None
        for phase, begins in boundaries:
            offset = normalize(seconds - begins)
            # przy równych granicach wygrywa późniejsza faza
            if best is None or offset <= best:
                current, best = phase, offset
        return current


class Interruption(BaseModel):
    """Tymczasowe nadpisanie harmonogramu."""
    setting: Settings
    duration: int
    seconds_left: int = Field(alias="secondsLeft")

    class Config:
        populate_by_name = True
        frozen = True

    @classmethod
    def from_preset(cls, preset: Preset) -> "Interruption":
        """Przerwanie uruchamiające preset na cały jego czas trwania."""
        return cls(
            setting=preset.settings,
            duration=preset.duration,
            seconds_left=preset.duration * 60,
        )


class Light(BaseModel):
    """Pełny stan lampy odczytany z urządzenia."""
    schedule: Schedule
    interruption: Optional[Interruption] = None
    mode: Optional[LightMode] = None

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_mode_matches_interruption(self) -> "Light":
        if self.mode is not None and self.mode.has_interruption != (self.interruption is not None):
            raise ValueError(
                f"Tryb {self.mode.value} nie zgadza się z przerwaniem: {self.interruption!r}"
            )
        return self

    @property
    def active_settings(self) -> Settings:
        """Ustawienia przerwania, a bez niego ustawienia dnia."""
        if self.interruption is not None:
            return self.interruption.setting
        return self.schedule.day
