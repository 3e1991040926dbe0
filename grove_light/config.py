"""
Konfiguracja grove-light.
Można załadować z zmiennych środowiskowych lub .env
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

from .models import Location

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Główna konfiguracja aplikacji."""

    payload_path: Optional[str] = None
    location: Location = Location.GARDEN
    log_level: str = "WARNING"
    json_output: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Tworzy konfigurację z zmiennych środowiskowych."""
        load_dotenv()

        log_level = os.getenv("GROVE_LOG_LEVEL", "WARNING").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"Nieznany poziom logowania: {log_level!r}")

        return cls(
            payload_path=os.getenv("GROVE_PAYLOAD") or None,
            location=Location(os.getenv("GROVE_LOCATION", "garden").lower()),
            log_level=log_level,
            json_output=os.getenv("GROVE_JSON_OUTPUT", "false").lower() == "true",
        )
