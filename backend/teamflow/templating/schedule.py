"""Calendar-day offset arithmetic for generated projects and tasks"""

from dataclasses import dataclass
from datetime import date, timedelta

from teamflow.core.exceptions import ValidationError


@dataclass(frozen=True)
class DateWindow:
    start_date: date
    due_date: date


def offset_window(anchor: date, start_day: int, duration_days: int) -> DateWindow:
    """Window starting ``start_day`` days after ``anchor`` and lasting ``duration_days``.

    Plain calendar days: no business-day, holiday or timezone handling.
    """
    if start_day < 0:
        raise ValidationError(f"start_day must be >= 0, got {start_day}", field="start_day")
    if duration_days < 0:
        raise ValidationError(f"duration_days must be >= 0, got {duration_days}", field="duration_days")

    try:
        start = anchor + timedelta(days=start_day)
        due = start + timedelta(days=duration_days)
    except OverflowError as e:
        raise ValidationError(
            f"Schedule from {anchor.isoformat()} (+{start_day}, +{duration_days} days) "
            f"falls outside the supported date range",
            field="start_date",
        ) from e
    return DateWindow(start_date=start, due_date=due)
