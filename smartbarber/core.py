# smartbarber/core.py

from datetime import date, datetime
from typing import List, Union

from smartbarber.data import SLOT_LABELS
from smartbarber.schemas import TimeSlot

DayLike = Union[date, datetime, str]


def generate_daily_slots() -> List[TimeSlot]:
    """Return the shop's fixed slot grid, every slot available."""
    return [
        TimeSlot(id=str(i), time=label, available=True)
        for i, label in enumerate(SLOT_LABELS, start=1)
    ]


def is_slot_label(label: str) -> bool:
    return label in SLOT_LABELS


def normalize_day(value: DayLike) -> date:
    """Reduce a date, datetime or ISO string to its local calendar day.

    Aware datetimes are converted to server local time before the time of
    day is dropped.
    """
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("date is empty")
        if len(text) == 10:
            return date.fromisoformat(text)
        value = datetime.fromisoformat(text.replace("Z", "+00:00"))

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()

    if isinstance(value, date):
        return value

    raise TypeError(f"cannot read a calendar day from {type(value).__name__}")
