"""
grove-light - model stanu i harmonogramu lampy do uprawy.
"""

from .decoder import decode_interruption, decode_light, decode_schedule, decode_settings
from .errors import (
    DayLengthTooShortError,
    InvalidValueError,
    LightError,
    MissingFieldError,
    PayloadError,
    ScheduleError,
)
from .models import (
    Interruption,
    Light,
    LightMode,
    Location,
    Phase,
    Preset,
    Schedule,
    ScheduleChanges,
    Settings,
)
