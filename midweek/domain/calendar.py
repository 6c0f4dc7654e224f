"""Wednesday calendar arithmetic.

Pure functions computing the Wednesdays the game is played on. Every
function first reduces its arguments to calendar days, so the time of day
never shifts a result across midnight. Wednesdays are always derived in
whole 7-day steps from a known Wednesday.
"""

from datetime import date, datetime, timedelta

WEDNESDAY = 2  # date.weekday(): Monday is 0
WEEK = timedelta(days=7)


def _day(value: date | datetime) -> date:
    """Reduce a date or datetime to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")


def is_wednesday(value: date | datetime) -> bool:
    """Check whether a day is a Wednesday."""
    return _day(value).weekday() == WEDNESDAY


def current_or_next_wednesday(reference: date | datetime) -> date:
    """Get the Wednesday a reference day belongs to.

    Args:
        reference: Any date or datetime

    Returns:
        The reference day itself when it is a Wednesday, otherwise the
        nearest Wednesday after it
    """
    day = _day(reference)
    return day + timedelta(days=(WEDNESDAY - day.weekday()) % 7)


def window_of_wednesdays(total_count: int, reference: date | datetime) -> list[date]:
    """Build a window of Wednesdays around the current one.

    ``total_count // 2`` Wednesdays lie strictly before the anchor
    (see :func:`current_or_next_wednesday`); the rest start at the anchor.
    An odd count puts the extra Wednesday on the future side.

    Args:
        total_count: Number of Wednesdays to return
        reference: The moment considered "now"

    Returns:
        Wednesdays in ascending order

    Raises:
        ValueError: If total_count is negative
    """
    _check_count(total_count)
    anchor = current_or_next_wednesday(reference)
    past_count = total_count // 2
    future_count = total_count - past_count

    past = [anchor - WEEK * i for i in range(past_count, 0, -1)]
    future = [anchor + WEEK * i for i in range(future_count)]
    return past + future


def extend_past(from_date: date | datetime, count: int = 4) -> list[date]:
    """Get the ``count`` Wednesdays before a date, ascending."""
    _check_count(count)
    day = _day(from_date)
    return [day - WEEK * i for i in range(count, 0, -1)]


def extend_future(from_date: date | datetime, count: int = 4) -> list[date]:
    """Get the ``count`` Wednesdays after a date, ascending."""
    _check_count(count)
    day = _day(from_date)
    return [day + WEEK * i for i in range(1, count + 1)]


def is_past(value: date | datetime, reference: date | datetime) -> bool:
    """Check whether a day lies strictly before the reference day."""
    return _day(value) < _day(reference)


def is_today(value: date | datetime, reference: date | datetime) -> bool:
    """Check whether a day is the reference day."""
    return _day(value) == _day(reference)


def format_date(value: date | datetime) -> str:
    """Format a day as ``YYYY-MM-DD``."""
    return _day(value).isoformat()
