"""Datenmodell für eine Zelle der Unterrichtskarte (Pydantic v2)."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from config.schema import DateMode

# Null-Datum: markiert eine leere Zelle (es gibt kein eigenes Leer-Flag)
EMPTY_DATE = datetime.min


def is_empty_date(value: Optional[datetime], mode: DateMode = DateMode.DATE) -> bool:
    """Prüft ein Datum gegen das Null-Datum.

    DATE vergleicht nur den Kalendertag, DATETIME den exakten Zeitpunkt.
    """
    if value is None:
        return True
    if mode == DateMode.DATE:
        return value.date() == EMPTY_DATE.date()
    return value == EMPTY_DATE


class LessonCardEntry(BaseModel):
    """Eine Zelle der Anwesenheitstabelle: ein Termin samt Anwesenheit.

    Leer ist eine Zelle genau dann, wenn ``date`` das Null-Datum trägt.
    ``replacement_date`` ist nur bei ``replaced=True`` aussagekräftig;
    das Modell selbst erzwingt das nicht.
    """

    date: datetime = EMPTY_DATE
    attended: bool = False               # Schüler war anwesend
    replaced: bool = False               # Stunde wurde verlegt
    replacement_date: Optional[datetime] = None

    @field_validator("date", "replacement_date", mode="before")
    @classmethod
    def _widen_plain_dates(cls, value):
        """Reine Kalenderdaten werden zu Mitternacht-Zeitpunkten erweitert."""
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, datetime.min.time())
        return value

    def is_empty(self, mode: DateMode = DateMode.DATE) -> bool:
        """True wenn die Zelle das Null-Datum trägt (gleiche Regel wie classify)."""
        return is_empty_date(self.date, mode)

    @property
    def day(self) -> date:
        """Kalendertag ohne Uhrzeit."""
        return self.date.date()
