from enum import Enum

from pydantic import BaseModel, Field


class DateMode(str, Enum):
    """Auflösung des Zellendatums.

    DATE:     nur der Kalendertag zählt (Uhrzeit wird verworfen)
    DATETIME: der vollständige Zeitpunkt zählt
    """
    DATE = "date"
    DATETIME = "datetime"


class LessonCardConfig(BaseModel):
    """Konfiguration für die Auswertung der Unterrichtskarte."""
    # Vergleich gegen das Null-Datum und Typ der Datumswerte in Zellenzuständen
    date_mode: DateMode = Field(DateMode.DATE,
        description="Kalendertag (date) oder Zeitpunkt (datetime)")
    # Verlegt ohne Ersatzdatum: Fehler (True) oder Warnung + regulär geplant (False)
    strict_replacement: bool = Field(True,
        description="Verlegte Stunden ohne Ersatzdatum als Fehler behandeln")
