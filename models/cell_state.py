"""Zustände einer Kartenzelle: leer, geplant oder verlegt.

Ersetzt die Kombination aus Null-Datum, ``replaced`` und
``replacement_date`` durch genau eine von drei Varianten. ``classify``
bildet einen ``LessonCardEntry`` darauf ab, ``to_entry`` wieder zurück.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

from config.schema import DateMode, LessonCardConfig
from models.lesson_card import EMPTY_DATE, LessonCardEntry, is_empty_date

logger = logging.getLogger(__name__)


class LessonCardError(Exception):
    """Basisklasse für Fehler rund um die Unterrichtskarte."""


class InconsistentEntryError(LessonCardError, ValueError):
    """Zelle ist als verlegt markiert, hat aber kein Ersatzdatum."""

    def __init__(self, entry: LessonCardEntry):
        self.entry = entry
        super().__init__(
            f"Stunde am {entry.date.isoformat()} ist als verlegt markiert, "
            f"aber ohne gültiges Ersatzdatum ({entry.replacement_date!r})"
        )


class InvalidCellError(LessonCardError, ValueError):
    """Zellenzustand mit Null-Datum (das ist nur als EmptyCell darstellbar)."""


class CellKind(str, Enum):
    """Art eines Zellenzustands."""
    EMPTY = "empty"
    SCHEDULED = "scheduled"
    RESCHEDULED = "rescheduled"


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, datetime.min.time())


def _reject_empty(cell: str, field: str, value: date) -> None:
    # Reines date: Tag 0001-01-01 ist leer; datetime: nur der exakte Null-Zeitpunkt
    if _as_datetime(value) == EMPTY_DATE:
        raise InvalidCellError(
            f"{cell}.{field} darf nicht das Null-Datum sein ({value!r})"
        )


@dataclass(frozen=True)
class EmptyCell:
    """Zelle ohne Unterrichtsstunde."""

    @property
    def kind(self) -> CellKind:
        return CellKind.EMPTY

    def to_entry(self) -> LessonCardEntry:
        return LessonCardEntry()


@dataclass(frozen=True)
class ScheduledCell:
    """Stunde findet am ursprünglichen Termin statt."""

    date: date
    attended: bool

    def __post_init__(self):
        _reject_empty("ScheduledCell", "date", self.date)

    @property
    def kind(self) -> CellKind:
        return CellKind.SCHEDULED

    def to_entry(self) -> LessonCardEntry:
        return LessonCardEntry(date=_as_datetime(self.date), attended=self.attended)


@dataclass(frozen=True)
class RescheduledCell:
    """Stunde wurde von ``original_date`` auf ``new_date`` verlegt.

    ``attended`` bezieht sich auf den ursprünglichen Termin.
    """

    original_date: date
    attended: bool
    new_date: date

    def __post_init__(self):
        _reject_empty("RescheduledCell", "original_date", self.original_date)
        _reject_empty("RescheduledCell", "new_date", self.new_date)

    @property
    def kind(self) -> CellKind:
        return CellKind.RESCHEDULED

    def to_entry(self) -> LessonCardEntry:
        return LessonCardEntry(
            date=_as_datetime(self.original_date),
            attended=self.attended,
            replaced=True,
            replacement_date=_as_datetime(self.new_date),
        )


CellState = Union[EmptyCell, ScheduledCell, RescheduledCell]


# ─── Klassifikation ───────────────────────────────────────────────────────────

def _normalize(value: datetime, mode: DateMode) -> date:
    return value.date() if mode == DateMode.DATE else value


def classify(
    entry: LessonCardEntry, config: Optional[LessonCardConfig] = None
) -> CellState:
    """Ordnet einen Eintrag genau einem Zellenzustand zu.

    Reihenfolge:
    1. Null-Datum → EmptyCell (übrige Felder werden ignoriert)
    2. nicht verlegt → ScheduledCell (replacement_date wird nicht gelesen)
    3. verlegt mit Ersatzdatum → RescheduledCell
    4. verlegt ohne Ersatzdatum → InconsistentEntryError (strict) bzw.
       Warnung + ScheduledCell
    """
    config = config or LessonCardConfig()
    mode = config.date_mode

    if entry.is_empty(mode):
        return EmptyCell()

    original = _normalize(entry.date, mode)

    if not entry.replaced:
        if entry.replacement_date is not None:
            logger.debug(
                "Ersatzdatum %s ignoriert (Stunde am %s nicht verlegt)",
                entry.replacement_date, original,
            )
        return ScheduledCell(date=original, attended=entry.attended)

    if is_empty_date(entry.replacement_date, mode):
        if config.strict_replacement:
            raise InconsistentEntryError(entry)
        logger.warning(
            "Stunde am %s als verlegt markiert, aber ohne Ersatzdatum, "
            "wird als regulär geplant behandelt", original,
        )
        return ScheduledCell(date=original, attended=entry.attended)

    return RescheduledCell(
        original_date=original,
        attended=entry.attended,
        new_date=_normalize(entry.replacement_date, mode),
    )
