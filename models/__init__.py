from models.lesson_card import EMPTY_DATE, LessonCardEntry, is_empty_date
from models.cell_state import (
    CellKind,
    CellState,
    EmptyCell,
    InconsistentEntryError,
    InvalidCellError,
    LessonCardError,
    RescheduledCell,
    ScheduledCell,
    classify,
)

__all__ = [
    "EMPTY_DATE",
    "LessonCardEntry",
    "CellKind",
    "CellState",
    "EmptyCell",
    "ScheduledCell",
    "RescheduledCell",
    "LessonCardError",
    "InconsistentEntryError",
    "InvalidCellError",
    "is_empty_date",
    "classify",
]
