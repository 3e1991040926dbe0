import pytest

from grove_light.models import Schedule, Settings


@pytest.fixture
def schedule() -> Schedule:
    """Harmonogram 06:00 - 20:00 (wschód, dzień 07:00, zachód 18:00)."""
    return Schedule(
        day=Settings(intensity=10, color_temp=100),
        night=Settings(intensity=0, color_temp=100),
        sunrise_begins=21600,
        day_begins=25200,
        sunset_begins=64800,
        night_begins=72000,
    )


@pytest.fixture
def schedule_payload() -> dict:
    return {
        "day": [10, 100],
        "night": [0, 100],
        "times": [21600, 25200, 64800, 72000],
    }


@pytest.fixture
def interruption_payload() -> dict:
    return {"ls": [5, 50], "dur": 10, "secsLeft": 300}
