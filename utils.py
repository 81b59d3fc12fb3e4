from datetime import date, datetime

HARVEST_WINDOW_DAYS = 90


def to_calendar_date(value):
    """Reduce an ISO timestamp string to its calendar date; pass anything else through."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10:
        try:
            return datetime.fromisoformat(value.replace('Z', '+00:00')).date()
        except ValueError:
            return value
    return value


def days_until(target: date, today: date | None = None) -> int:
    """Whole days from today to ``target``; negative once the date has passed."""
    return (target - (today or date.today())).days


def growth_progress(days_left: int) -> float:
    """Share of a 90-day season already elapsed, as a percentage in [0, 100]."""
    return max(0.0, min(100.0, (1 - days_left / HARVEST_WINDOW_DAYS) * 100))
